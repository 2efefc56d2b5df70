"""Order-preserving byte and integer codecs.

Byte strings use the memcomparable group layout: the input is split
into 8-byte groups, the last group is zero padded, and every group is
followed by a marker byte ``0xFF - pad_count``. Encoded values sort in
the same order as the raw values, so one bucket's keys stay contiguous.
"""

from __future__ import annotations

from core.constants import ENCODED_GROUP_SIZE, ENCODED_MARKER, ENCODED_PAD_BYTE
from core.errors import CatalogCodecError

_UINT64_SIZE = 8


def encode_bytes(value: bytes) -> bytes:
    """Encode bytes with the memcomparable group layout.

    Args:
        value: Raw bytes to encode.

    Returns:
        Encoded bytes.
    """
    encoded = bytearray()
    for start in range(0, len(value) + 1, ENCODED_GROUP_SIZE):
        group = value[start : start + ENCODED_GROUP_SIZE]
        pad_count = ENCODED_GROUP_SIZE - len(group)
        encoded += group
        encoded += bytes([ENCODED_PAD_BYTE]) * pad_count
        encoded.append(ENCODED_MARKER - pad_count)
    return bytes(encoded)


def decode_bytes(data: bytes, offset: int = 0) -> tuple[bytes, int]:
    """Decode one memcomparable byte string.

    Args:
        data: Buffer holding the encoded value.
        offset: Position where the encoded value starts.

    Returns:
        Pair of decoded bytes and the offset just past the value.

    Raises:
        CatalogCodecError: If the buffer is truncated or padding is invalid.
    """
    decoded = bytearray()
    while True:
        group_end = offset + ENCODED_GROUP_SIZE
        if group_end + 1 > len(data):
            raise CatalogCodecError(
                f"Truncated encoded bytes at offset {offset}: "
                f"expected {ENCODED_GROUP_SIZE + 1} bytes, got {len(data) - offset}."
            )
        group = data[offset:group_end]
        pad_count = ENCODED_MARKER - data[group_end]
        offset = group_end + 1
        if pad_count == 0:
            decoded += group
            continue
        if pad_count > ENCODED_GROUP_SIZE:
            raise CatalogCodecError(f"Invalid encoded group marker {data[group_end]:#04x}.")
        real_size = ENCODED_GROUP_SIZE - pad_count
        if any(byte != ENCODED_PAD_BYTE for byte in group[real_size:]):
            raise CatalogCodecError(f"Invalid padding in encoded group ending at {group_end}.")
        decoded += group[:real_size]
        return bytes(decoded), offset


def encode_uint64(value: int) -> bytes:
    """Encode an unsigned integer as 8 big-endian bytes."""
    return value.to_bytes(_UINT64_SIZE, "big", signed=False)


def decode_uint64(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode 8 big-endian bytes into an unsigned integer.

    Args:
        data: Buffer holding the encoded value.
        offset: Position where the encoded value starts.

    Returns:
        Pair of decoded integer and the offset just past the value.

    Raises:
        CatalogCodecError: If fewer than 8 bytes remain.
    """
    end = offset + _UINT64_SIZE
    if end > len(data):
        raise CatalogCodecError(
            f"Truncated uint64 at offset {offset}: expected {_UINT64_SIZE} bytes."
        )
    return int.from_bytes(data[offset:end], "big", signed=False), end
