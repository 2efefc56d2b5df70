"""Read-only schema catalog over a snapshot.

This module decodes the schema version, databases, and tables that the
SQL layer stores as JSON metadata inside hash buckets. Every call reads
fresh from the bound snapshot; nothing is cached.
"""

from __future__ import annotations

import re
from typing import Callable

from catalog.json_decoding import decode_json
from codec.meta_codec import bytes_get, encode_database_id, hash_get, hash_get_fields
from core.constants import KEY_DBS, KEY_SCHEMA_VERSION, KEY_TABLE
from core.errors import CatalogDecodeError
from core.logging_config import get_logger
from core.types import DatabaseInfo, SkippedRecord, TableInfo
from store.snapshot import Snapshot

_LOGGER = get_logger(__name__)
_DECIMAL_PATTERN = re.compile(r"[+-]?[0-9]+")

SkipHandler = Callable[[SkippedRecord], None]


class CatalogReader:
    """Decode-on-read accessor for schema metadata.

    One reader is bound to one snapshot and holds no other state, so it
    can be shared by concurrent callers when the snapshot allows it.
    """

    def __init__(self, snapshot: Snapshot) -> None:
        """Bind reader to a snapshot.

        Args:
            snapshot: Consistent read view; its lifetime is owned by the caller.
        """
        self._snapshot = snapshot

    @property
    def snapshot(self) -> Snapshot:
        """Snapshot this reader is bound to."""
        return self._snapshot

    def get_schema_version(self) -> int:
        """Read the latest schema version.

        Returns:
            Schema version integer.

        Raises:
            CatalogDecodeError: If the value is absent or not a decimal integer.
        """
        type_name = "SchemaVersion"
        payload = bytes_get(KEY_SCHEMA_VERSION, self._snapshot)
        if not payload:
            raise CatalogDecodeError(
                "Schema version key is missing from snapshot "
                f"at version {self._snapshot.version}.",
                type_name,
                payload,
            )
        try:
            text = payload.decode("utf-8")
            if not _DECIMAL_PATTERN.fullmatch(text):
                raise ValueError(f"not a decimal integer: {text!r}")
            return int(text)
        except ValueError as error:
            raise CatalogDecodeError(
                f"Invalid schema version value: {payload!r}. Expected a decimal integer.",
                type_name,
                payload,
            ) from error

    def list_databases(self) -> list[DatabaseInfo]:
        """List every database in store field order.

        Returns:
            Decoded database records.

        Raises:
            CatalogDecodeError: If any database payload is malformed.
        """
        fields = hash_get_fields(KEY_DBS, self._snapshot)
        return [decode_json(value, DatabaseInfo) for _, value in fields]

    def get_database(self, database_id: int) -> DatabaseInfo | None:
        """Look up one database by id.

        Args:
            database_id: Numeric database identifier.

        Returns:
            Decoded database record, or None when no such database exists.

        Raises:
            CatalogDecodeError: If the stored payload is malformed.
        """
        payload = hash_get(KEY_DBS, encode_database_id(database_id), self._snapshot)
        if not payload:
            return None
        return decode_json(payload, DatabaseInfo)

    def list_tables(
        self,
        database_id: int,
        on_skip: SkipHandler | None = None,
    ) -> list[TableInfo]:
        """List tables of a database, skipping malformed records.

        Fields without the table marker are ignored, and sequence records
        are excluded from the result.

        Args:
            database_id: Numeric database identifier.
            on_skip: Optional callback receiving each dropped record.

        Returns:
            Decoded table records in store field order.

        Raises:
            CatalogCodecError: If the bucket itself cannot be enumerated.
        """
        fields = hash_get_fields(encode_database_id(database_id), self._snapshot)
        tables: list[TableInfo] = []
        for field_key, value in fields:
            if not field_key.startswith(KEY_TABLE):
                continue
            try:
                table = decode_json(value, TableInfo)
            except CatalogDecodeError as error:
                _report_skipped(SkippedRecord(database_id, field_key, error), on_skip)
                continue
            if not table.is_sequence:
                tables.append(table)
        return tables


def _report_skipped(record: SkippedRecord, on_skip: SkipHandler | None) -> None:
    _LOGGER.warning(
        "table_record_skipped",
        database_id=record.database_id,
        field_key=record.field_key.decode("utf-8", errors="replace"),
        error=str(record.error),
    )
    if on_skip is not None:
        on_skip(record)
