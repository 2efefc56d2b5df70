"""Metadata key layout and snapshot lookups.

Schema metadata lives under the ``m`` prefix in two shapes:

* string data keys: ``m + bytes(key) + uint64('s')``
* hash data keys: ``m + bytes(bucket) + uint64('h') + bytes(field)``

All fields of one hash bucket share the hash data key prefix, so a
prefix scan enumerates the bucket in field order.
"""

from __future__ import annotations

from core.constants import (
    ENCODED_DB_PREFIX,
    HASH_DATA_FLAG,
    KEY_TABLE,
    META_PREFIX,
    STRING_DATA_FLAG,
)
from core.errors import CatalogCodecError
from codec.bytes_codec import decode_bytes, decode_uint64, encode_bytes, encode_uint64
from store.snapshot import Snapshot


def encode_database_id(database_id: int) -> bytes:
    """Return the bucket field key for a database id, e.g. ``DB:5``."""
    return f"{ENCODED_DB_PREFIX}:{database_id}".encode("utf-8")


def table_key(table_id: int) -> bytes:
    """Return the bucket field key for a table id, e.g. ``Table:10``."""
    return KEY_TABLE + f":{table_id}".encode("utf-8")


def encode_string_data_key(key: bytes) -> bytes:
    return META_PREFIX + encode_bytes(key) + encode_uint64(STRING_DATA_FLAG)


def encode_hash_data_key_prefix(bucket_key: bytes) -> bytes:
    return META_PREFIX + encode_bytes(bucket_key) + encode_uint64(HASH_DATA_FLAG)


def encode_hash_data_key(bucket_key: bytes, field_key: bytes) -> bytes:
    return encode_hash_data_key_prefix(bucket_key) + encode_bytes(field_key)


def decode_hash_data_key(raw_key: bytes) -> tuple[bytes, bytes]:
    """Split a raw hash data key into bucket key and field key.

    Args:
        raw_key: Encoded key read from the store.

    Returns:
        Pair of bucket key and field key.

    Raises:
        CatalogCodecError: If the key prefix or type flag is wrong.
    """
    if not raw_key.startswith(META_PREFIX):
        raise CatalogCodecError(
            f"Invalid encoded hash data key prefix: expected {META_PREFIX!r}, got {raw_key[:1]!r}."
        )
    bucket_key, offset = decode_bytes(raw_key, len(META_PREFIX))
    type_flag, offset = decode_uint64(raw_key, offset)
    if type_flag != HASH_DATA_FLAG:
        raise CatalogCodecError(f"Invalid hash data flag: {type_flag}.")
    field_key, _ = decode_bytes(raw_key, offset)
    return bucket_key, field_key


def bytes_get(key: bytes, snapshot: Snapshot) -> bytes | None:
    """Read a string data value, or None when absent."""
    return snapshot.get(encode_string_data_key(key))


def hash_get(bucket_key: bytes, field_key: bytes, snapshot: Snapshot) -> bytes | None:
    """Read one field of a hash bucket, or None when absent."""
    return snapshot.get(encode_hash_data_key(bucket_key, field_key))


def hash_get_fields(bucket_key: bytes, snapshot: Snapshot) -> list[tuple[bytes, bytes]]:
    """Enumerate every field of a hash bucket.

    Args:
        bucket_key: Logical bucket key such as ``DBs`` or ``DB:5``.
        snapshot: Snapshot to read.

    Returns:
        Field key and value pairs in store order.

    Raises:
        CatalogCodecError: If a stored key under the bucket prefix is malformed.
    """
    prefix = encode_hash_data_key_prefix(bucket_key)
    fields: list[tuple[bytes, bytes]] = []
    for raw_key, value in snapshot.scan_prefix(prefix):
        _, field_key = decode_hash_data_key(raw_key)
        fields.append((field_key, value))
    return fields
