"""JSON payload mapping for schema records.

This module maps decoded JSON values onto typed schema records.
Mapping failures raise ValueError or TypeError; the JSON decoding
layer normalizes them into catalog decode errors.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, TypeVar, cast

from core.types import ColumnInfo, DatabaseInfo, TableInfo

RecordT = TypeVar("RecordT")


def database_from_payload(payload: Any) -> DatabaseInfo:
    """Deserialize JSON payload into DatabaseInfo.

    Args:
        payload: Decoded JSON value.

    Returns:
        Parsed database record.

    Raises:
        ValueError: If the payload is not an object or has no name.
        TypeError: If a field has the wrong type.
    """
    mapping = _expect_object(payload, "database")
    return DatabaseInfo(
        id=_int_field(mapping, "id"),
        name=_name_field(mapping, ("db_name", "name")),
        charset=_str_field(mapping, "charset"),
        collate=_str_field(mapping, "collate"),
        state=_int_field(mapping, "state"),
    )


def table_from_payload(payload: Any) -> TableInfo:
    """Deserialize JSON payload into TableInfo.

    Args:
        payload: Decoded JSON value.

    Returns:
        Parsed table record.

    Raises:
        ValueError: If the payload is not an object or has no name.
        TypeError: If a field has the wrong type.
    """
    mapping = _expect_object(payload, "table")
    columns_payload = mapping.get("cols") or []
    if not isinstance(columns_payload, list):
        raise TypeError(f"Invalid table cols: expected list, got {type(columns_payload).__name__}")
    return TableInfo(
        id=_int_field(mapping, "id"),
        name=_name_field(mapping, ("name",)),
        charset=_str_field(mapping, "charset"),
        collate=_str_field(mapping, "collate"),
        comment=_str_field(mapping, "comment"),
        columns=tuple(column_from_payload(item) for item in columns_payload),
        pk_is_handle=_bool_field(mapping, "pk_is_handle"),
        update_timestamp=_int_field(mapping, "update_timestamp"),
        is_sequence=_is_sequence(mapping.get("sequence")),
    )


def column_from_payload(payload: Any) -> ColumnInfo:
    """Deserialize one entry of a table's ``cols`` list."""
    mapping = _expect_object(payload, "column")
    return ColumnInfo(
        id=_int_field(mapping, "id"),
        name=_name_field(mapping, ("name",)),
        offset=_int_field(mapping, "offset"),
        comment=_str_field(mapping, "comment"),
    )


_PAYLOAD_DECODERS: dict[type, Callable[[Any], Any]] = {
    DatabaseInfo: database_from_payload,
    TableInfo: table_from_payload,
    ColumnInfo: column_from_payload,
}


def payload_decoder(record_type: type[RecordT]) -> Callable[[Any], RecordT]:
    """Return the payload mapping function for a record type.

    Raises:
        KeyError: If the record type has no registered decoder.
    """
    return cast(Callable[[Any], RecordT], _PAYLOAD_DECODERS[record_type])


def _expect_object(payload: Any, context: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise ValueError(f"Invalid {context} payload: expected JSON object")
    return payload


def _name_field(mapping: Mapping[str, Any], keys: tuple[str, ...]) -> str:
    """Read a name stored as a plain string or as an ``{"O", "L"}`` object."""
    for key in keys:
        value = mapping.get(key)
        if value is None:
            continue
        if isinstance(value, str):
            return value
        if isinstance(value, Mapping) and isinstance(value.get("O"), str):
            return cast(str, value["O"])
        raise TypeError(f"Invalid {key}: expected string or name object")
    raise ValueError(f"Missing name field: expected one of {', '.join(keys)}")


def _int_field(mapping: Mapping[str, Any], key: str) -> int:
    value = mapping.get(key, 0)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Invalid {key}: expected integer, got {type(value).__name__}")
    return value


def _str_field(mapping: Mapping[str, Any], key: str) -> str:
    value = mapping.get(key, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"Invalid {key}: expected string, got {type(value).__name__}")
    return value


def _bool_field(mapping: Mapping[str, Any], key: str) -> bool:
    value = mapping.get(key, False)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise TypeError(f"Invalid {key}: expected boolean, got {type(value).__name__}")
    return value


def _is_sequence(value: Any) -> bool:
    """Any sequence value other than null or false marks a sequence."""
    return value is not None and value is not False
