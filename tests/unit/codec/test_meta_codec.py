"""Unit tests for metadata key encoding."""

from __future__ import annotations

import pytest

from codec.bytes_codec import decode_bytes, encode_bytes, encode_uint64
from codec.meta_codec import (
    bytes_get,
    decode_hash_data_key,
    encode_database_id,
    encode_hash_data_key,
    encode_string_data_key,
    hash_get,
    hash_get_fields,
    table_key,
)
from core.errors import CatalogCodecError
from store.snapshot import InMemorySnapshot


def test_encode_bytes_pads_final_group() -> None:
    """Short values should be zero padded with a pad-count marker."""
    assert encode_bytes(b"DBs") == b"DBs\x00\x00\x00\x00\x00\xfa"


def test_encode_bytes_adds_terminator_group_for_full_groups() -> None:
    """Values filling whole groups should end with an empty group."""
    encoded = encode_bytes(b"12345678")

    assert encoded == b"12345678\xff" + b"\x00" * 8 + b"\xf7"


@pytest.mark.parametrize("value", [b"", b"1234567", b"12345678", b"123456789"])
def test_decode_bytes_recovers_value_and_offset(value: bytes) -> None:
    """Decoding should return the value and consume the whole encoding."""
    encoded = encode_bytes(value) + b"tail"

    decoded, offset = decode_bytes(encoded)

    assert decoded == value and encoded[offset:] == b"tail"


def test_decode_bytes_rejects_nonzero_padding() -> None:
    """Padding bytes must be zero."""
    with pytest.raises(CatalogCodecError):
        decode_bytes(b"ab\x00\x00\x00\x00\x00\x01\xfa")


def test_decode_bytes_rejects_truncated_input() -> None:
    """Truncated groups should be rejected."""
    with pytest.raises(CatalogCodecError):
        decode_bytes(b"abc")


def test_encode_database_id_and_table_key() -> None:
    """Logical ids should map to prefixed field keys."""
    assert encode_database_id(5) == b"DB:5"
    assert table_key(10) == b"Table:10"


def test_string_data_key_layout() -> None:
    """String data keys should carry the meta prefix and string flag."""
    assert encode_string_data_key(b"k") == b"m" + encode_bytes(b"k") + encode_uint64(ord("s"))


def test_decode_hash_data_key_splits_bucket_and_field() -> None:
    """Hash data keys should decode back to bucket and field."""
    raw_key = encode_hash_data_key(b"DB:12", b"Table:100")

    assert decode_hash_data_key(raw_key) == (b"DB:12", b"Table:100")


def test_decode_hash_data_key_rejects_wrong_prefix() -> None:
    """Keys outside the meta prefix should be rejected."""
    with pytest.raises(CatalogCodecError):
        decode_hash_data_key(b"t" + encode_bytes(b"DBs"))


def test_decode_hash_data_key_rejects_string_flag() -> None:
    """String data keys are not hash data keys."""
    with pytest.raises(CatalogCodecError):
        decode_hash_data_key(encode_string_data_key(b"DBs") + encode_bytes(b"x"))


def test_hash_lookups_read_snapshot_entries() -> None:
    """Point and scan lookups should resolve encoded keys."""
    snapshot = InMemorySnapshot(
        {
            encode_hash_data_key(b"DBs", b"DB:2"): b"two",
            encode_hash_data_key(b"DBs", b"DB:1"): b"one",
            encode_hash_data_key(b"DBs2", b"DB:3"): b"other",
            encode_string_data_key(b"DBs"): b"scalar",
        }
    )

    assert hash_get(b"DBs", b"DB:1", snapshot) == b"one"
    assert hash_get(b"DBs", b"DB:9", snapshot) is None
    assert bytes_get(b"DBs", snapshot) == b"scalar"
    assert hash_get_fields(b"DBs", snapshot) == [(b"DB:1", b"one"), (b"DB:2", b"two")]
