"""Unit tests for core config parsing."""

from __future__ import annotations

import os

import pytest

from core.config import CatalogConfig
from core.errors import CatalogConfigError


def test_from_env_reads_snapshot_path(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve snapshot path from environment."""
    monkeypatch.setenv("KVCATALOG_SNAPSHOT_PATH", "./.tmp-kvcatalog/snap.json")

    config = CatalogConfig.from_env()

    assert config.snapshot_path.name == "snap.json" and config.snapshot_path.is_absolute()


def test_from_env_normalizes_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should accept lower-case level names."""
    monkeypatch.setenv("KVCATALOG_LOG_LEVEL", "debug")

    config = CatalogConfig.from_env()

    assert config.log_level == "DEBUG"


def test_from_env_raises_for_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unknown log levels."""
    monkeypatch.setenv("KVCATALOG_LOG_LEVEL", "chatty")

    with pytest.raises(CatalogConfigError):
        CatalogConfig.from_env()

    assert os.getenv("KVCATALOG_LOG_LEVEL") == "chatty"
