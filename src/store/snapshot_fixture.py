"""Snapshot fixture loading.

This module builds an in-memory snapshot from a logical JSON or YAML
document that names string keys and hash buckets in plain text:

    version: 7
    strings:
      SchemaVersionKey: "42"
    hashes:
      DBs:
        "DB:1": {"id": 1, "name": "test"}

Object and list values are stored as JSON text; string values are
stored verbatim so malformed payloads can be expressed.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, cast

from codec.meta_codec import encode_hash_data_key, encode_string_data_key
from core.constants import SUPPORTED_FIXTURE_EXTENSIONS
from core.errors import CatalogDependencyError, CatalogSnapshotError
from core.logging_config import get_logger
from store.snapshot import InMemorySnapshot

_LOGGER = get_logger(__name__)


def load_snapshot_fixture(fixture_path: Path | str) -> InMemorySnapshot:
    """Load a snapshot fixture file.

    Args:
        fixture_path: Path to a ``.json``, ``.yaml`` or ``.yml`` document.

    Returns:
        Snapshot holding the encoded entries.

    Raises:
        CatalogSnapshotError: If the file is missing or malformed.
        CatalogDependencyError: If a YAML file is given without PyYAML.
    """
    path = Path(fixture_path).expanduser().resolve()
    if not path.exists():
        raise CatalogSnapshotError(
            f"Snapshot fixture does not exist at {path}. Provide a valid fixture path."
        )
    if path.suffix.lower() not in SUPPORTED_FIXTURE_EXTENSIONS:
        raise CatalogSnapshotError(
            f"Unsupported snapshot fixture extension '{path.suffix}' at {path}: "
            f"expected one of {', '.join(SUPPORTED_FIXTURE_EXTENSIONS)}."
        )
    document = _read_document(path)
    snapshot = build_snapshot(document, source=str(path))
    _LOGGER.info("snapshot_fixture_loaded", path=str(path), entry_count=len(snapshot))
    return snapshot


def build_snapshot(document: object, source: str = "<memory>") -> InMemorySnapshot:
    """Encode a logical fixture document into a snapshot.

    Args:
        document: Parsed fixture document.
        source: Label used in error messages.

    Returns:
        Snapshot holding the encoded entries.

    Raises:
        CatalogSnapshotError: If the document layout is invalid.
    """
    root = _expect_mapping(document, "fixture root", source)
    version = root.get("version", 0)
    if isinstance(version, bool) or not isinstance(version, int):
        raise CatalogSnapshotError(
            f"Invalid fixture version in {source}: expected integer, got {type(version).__name__}."
        )
    entries: dict[bytes, bytes] = {}
    strings = _expect_mapping(root.get("strings", {}), "strings section", source)
    for key, value in strings.items():
        entries[encode_string_data_key(_to_bytes(key))] = _encode_value(value)
    hashes = _expect_mapping(root.get("hashes", {}), "hashes section", source)
    for bucket_key, bucket in hashes.items():
        fields = _expect_mapping(bucket, f"bucket '{bucket_key}'", source)
        for field_key, value in fields.items():
            raw_key = encode_hash_data_key(_to_bytes(bucket_key), _to_bytes(field_key))
            entries[raw_key] = _encode_value(value)
    return InMemorySnapshot(entries, version=version)


def _read_document(path: Path) -> object:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as error:
        raise CatalogSnapshotError(
            f"Failed to read snapshot fixture at {path}: {error}. Check file permissions and retry."
        ) from error
    if path.suffix.lower() == ".json":
        try:
            return cast(object, json.loads(text))
        except json.JSONDecodeError as error:
            raise CatalogSnapshotError(
                f"Failed to parse snapshot fixture at {path}: {error.msg}. Fix JSON syntax and retry."
            ) from error
    return _load_yaml_text(text, path)


def _load_yaml_text(text: str, path: Path) -> object:
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as error:  # pragma: no cover - dependency failure
        raise CatalogDependencyError(
            "YAML snapshot fixtures require PyYAML. Install with 'pip install pyyaml'."
        ) from error
    try:
        return cast(object, yaml.safe_load(text))
    except yaml.YAMLError as error:
        raise CatalogSnapshotError(
            f"Failed to parse YAML snapshot fixture at {path}: {error}. Fix YAML syntax and retry."
        ) from error


def _expect_mapping(value: object, context: str, source: str) -> Mapping[Any, Any]:
    if isinstance(value, Mapping):
        return value
    raise CatalogSnapshotError(
        f"Invalid {context} in {source}: expected object mapping, got {type(value).__name__}."
    )


def _to_bytes(key: object) -> bytes:
    return str(key).encode("utf-8")


def _encode_value(value: object) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return json.dumps(value, separators=(",", ":")).encode("utf-8")
