"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def make_reader() -> Callable[..., Any]:
    """Build a CatalogReader over an in-memory fixture document."""
    from catalog.catalog_reader import CatalogReader
    from store.snapshot_fixture import build_snapshot

    def _make_reader(
        strings: dict[str, object] | None = None,
        hashes: dict[str, dict[str, object]] | None = None,
    ) -> CatalogReader:
        document = {"strings": strings or {}, "hashes": hashes or {}}
        return CatalogReader(build_snapshot(document))

    return _make_reader
