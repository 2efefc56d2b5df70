"""Unit tests for in-memory snapshots."""

from __future__ import annotations

from store.snapshot import InMemorySnapshot


def test_get_returns_none_for_missing_key() -> None:
    """Point reads should return None for absent keys."""
    snapshot = InMemorySnapshot({b"a": b"1"})

    assert snapshot.get(b"b") is None


def test_scan_prefix_yields_matching_keys_in_order() -> None:
    """Prefix scans should stop at the first non-matching key."""
    snapshot = InMemorySnapshot({b"ab2": b"2", b"b": b"3", b"ab1": b"1", b"a": b"0"}, version=9)

    pairs = list(snapshot.scan_prefix(b"ab"))

    assert pairs == [(b"ab1", b"1"), (b"ab2", b"2")]
    assert snapshot.version == 9


def test_snapshot_is_isolated_from_source_mapping() -> None:
    """Mutating the source mapping should not change the snapshot."""
    entries = {b"a": b"1"}
    snapshot = InMemorySnapshot(entries)

    entries[b"a"] = b"2"

    assert snapshot.get(b"a") == b"1"
