"""JSON payload decoding with normalized errors.

Callers only ever see CatalogDecodeError, never the underlying
parser or mapping exception.
"""

from __future__ import annotations

import json
from typing import TypeVar

from catalog.record_payload import payload_decoder
from core.errors import CatalogDecodeError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)

RecordT = TypeVar("RecordT")


def decode_json(payload: bytes, record_type: type[RecordT]) -> RecordT:
    """Decode a stored JSON payload into a typed record.

    Args:
        payload: Raw UTF-8 JSON bytes.
        record_type: Target record type, e.g. DatabaseInfo.

    Returns:
        Decoded record.

    Raises:
        CatalogDecodeError: If the payload cannot be parsed or mapped.
    """
    type_name = record_type.__name__
    if payload is None:
        raise CatalogDecodeError(f"Missing JSON value for type {type_name}", type_name, payload)
    display_text = payload.decode("utf-8", errors="replace")
    _LOGGER.debug("json_payload_parsed", type_name=type_name, payload=display_text)
    try:
        text = payload.decode("utf-8")
        return payload_decoder(record_type)(json.loads(text))
    except (ValueError, TypeError) as error:
        raise CatalogDecodeError(
            f"Invalid JSON value for type {type_name}: {display_text} ({error})",
            type_name,
            payload,
        ) from error
    except Exception as error:
        raise CatalogDecodeError(
            f"Error parsing JSON for type {type_name}: {error}",
            type_name,
            payload,
        ) from error
