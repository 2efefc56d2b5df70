"""Point-in-time snapshot views over a key-value store.

This module defines the read interface consumed by the catalog reader
and an immutable in-memory implementation used by fixtures and tests.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterator, Mapping, Protocol


class Snapshot(Protocol):
    """Consistent read view of a key-value store at one timestamp."""

    @property
    def version(self) -> int:
        """Logical read timestamp of the view."""
        ...

    def get(self, key: bytes) -> bytes | None:
        """Return the value stored at key, or None when absent."""
        ...

    def scan_prefix(self, prefix: bytes) -> Iterator[tuple[bytes, bytes]]:
        """Yield key/value pairs whose key starts with prefix, in key order."""
        ...


class InMemorySnapshot:
    """Immutable sorted key-value snapshot.

    The entries are copied and sorted once at construction time, so the
    instance can be shared by concurrent readers.
    """

    def __init__(self, entries: Mapping[bytes, bytes], version: int = 0) -> None:
        """Create snapshot from raw entries.

        Args:
            entries: Raw encoded keys mapped to raw values.
            version: Logical read timestamp.
        """
        self._version = version
        self._entries = dict(entries)
        self._sorted_keys = tuple(sorted(self._entries))

    @property
    def version(self) -> int:
        return self._version

    def get(self, key: bytes) -> bytes | None:
        return self._entries.get(key)

    def scan_prefix(self, prefix: bytes) -> Iterator[tuple[bytes, bytes]]:
        index = bisect_left(self._sorted_keys, prefix)
        while index < len(self._sorted_keys):
            key = self._sorted_keys[index]
            if not key.startswith(prefix):
                return
            yield key, self._entries[key]
            index += 1

    def __len__(self) -> int:
        return len(self._entries)
