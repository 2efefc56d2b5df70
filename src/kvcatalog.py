"""Public SDK surface for kvcatalog.

This module provides a stable import path for catalog users.
It re-exports the reader, snapshot helpers, and typed records.
"""

from __future__ import annotations

from catalog.catalog_reader import CatalogReader
from catalog.json_decoding import decode_json
from core.config import CatalogConfig
from core.errors import CatalogDecodeError, CatalogError
from core.types import ColumnInfo, DatabaseInfo, SkippedRecord, TableInfo
from store.snapshot import InMemorySnapshot, Snapshot
from store.snapshot_fixture import build_snapshot, load_snapshot_fixture

__all__ = [
    "CatalogConfig",
    "CatalogDecodeError",
    "CatalogError",
    "CatalogReader",
    "ColumnInfo",
    "DatabaseInfo",
    "InMemorySnapshot",
    "SkippedRecord",
    "Snapshot",
    "TableInfo",
    "build_snapshot",
    "decode_json",
    "load_snapshot_fixture",
]
