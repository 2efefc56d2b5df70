"""Shared typed models.

This module defines immutable schema records decoded from catalog
metadata, plus diagnostics emitted while listing them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from core.errors import CatalogDecodeError


@dataclass(frozen=True)
class DatabaseInfo:
    """Logical database stored in the global databases bucket.

    Attributes:
        id: Numeric database identifier.
        name: Original-case database name.
        charset: Default character set.
        collate: Default collation.
        state: Schema state code of the database.
    """

    id: int
    name: str
    charset: str = ""
    collate: str = ""
    state: int = 0


@dataclass(frozen=True)
class ColumnInfo:
    """Column definition nested inside a table record.

    Attributes:
        id: Column identifier within its table.
        name: Original-case column name.
        offset: Ordinal position of the column.
        comment: Free-form column comment.
    """

    id: int
    name: str
    offset: int = 0
    comment: str = ""


@dataclass(frozen=True)
class TableInfo:
    """Logical table stored in a per-database bucket.

    Attributes:
        id: Numeric table identifier.
        name: Original-case table name.
        charset: Table character set.
        collate: Table collation.
        comment: Free-form table comment.
        columns: Ordered column definitions.
        pk_is_handle: Whether the primary key is the row handle.
        update_timestamp: Logical timestamp of the last schema change.
        is_sequence: Whether the record describes a sequence object.
    """

    id: int
    name: str
    charset: str = ""
    collate: str = ""
    comment: str = ""
    columns: tuple[ColumnInfo, ...] = field(default_factory=tuple)
    pk_is_handle: bool = False
    update_timestamp: int = 0
    is_sequence: bool = False


@dataclass(frozen=True)
class SkippedRecord:
    """Diagnostic for a table field dropped during listing.

    Attributes:
        database_id: Database whose bucket held the field.
        field_key: Raw bucket field key of the dropped record.
        error: Decode failure that caused the drop.
    """

    database_id: int
    field_key: bytes
    error: CatalogDecodeError
