"""Runtime configuration model for kvcatalog.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import DEFAULT_LOG_LEVEL, DEFAULT_SNAPSHOT_PATH, SUPPORTED_LOG_LEVELS
from core.errors import CatalogConfigError


@dataclass(frozen=True)
class CatalogConfig:
    """Validated runtime configuration.

    Attributes:
        snapshot_path: Snapshot fixture file read by the CLI.
        log_level: Standard logging level name.
    """

    snapshot_path: Path
    log_level: str

    @classmethod
    def from_env(cls) -> "CatalogConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            CatalogConfigError: If environment values are invalid.
        """
        snapshot_path_value = os.getenv("KVCATALOG_SNAPSHOT_PATH", str(DEFAULT_SNAPSHOT_PATH))
        log_level_value = os.getenv("KVCATALOG_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        return cls(
            snapshot_path=Path(snapshot_path_value).expanduser().resolve(),
            log_level=_parse_log_level(log_level_value),
        )


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Normalized upper-case level name.

    Raises:
        CatalogConfigError: If value is not a supported level.
    """
    level = raw_value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        raise CatalogConfigError(
            "Invalid KVCATALOG_LOG_LEVEL value: "
            f"expected one of {', '.join(SUPPORTED_LOG_LEVELS)}, got '{raw_value}'. "
            "Set KVCATALOG_LOG_LEVEL to a supported level name."
        )
    return level
