"""Core constants used across kvcatalog modules.

This module centralizes storage layout and runtime defaults.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_SNAPSHOT_PATH = Path(".kvcatalog") / "snapshot.json"
DEFAULT_LOG_LEVEL = "INFO"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
SUPPORTED_FIXTURE_EXTENSIONS = (".json", ".yaml", ".yml")

META_PREFIX = b"m"
STRING_DATA_FLAG = ord("s")
HASH_DATA_FLAG = ord("h")
ENCODED_GROUP_SIZE = 8
ENCODED_PAD_BYTE = 0x00
ENCODED_MARKER = 0xFF

KEY_DBS = b"DBs"
KEY_SCHEMA_VERSION = b"SchemaVersionKey"
KEY_TABLE = b"Table"
ENCODED_DB_PREFIX = "DB"
