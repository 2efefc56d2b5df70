"""kvcatalog exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base exception for all kvcatalog failures."""


class CatalogConfigError(CatalogError):
    """Raised for invalid runtime configuration."""


class CatalogDecodeError(CatalogError):
    """Raised when a stored metadata payload does not match its record shape.

    Attributes:
        type_name: Name of the record type the payload was decoded into.
        payload: Raw payload bytes, kept for diagnostics.
    """

    def __init__(self, message: str, type_name: str, payload: bytes | None) -> None:
        super().__init__(message)
        self.type_name = type_name
        self.payload = payload


class CatalogCodecError(CatalogError):
    """Raised for malformed encoded keys read from a snapshot."""


class CatalogSnapshotError(CatalogError):
    """Raised when a snapshot fixture cannot be loaded."""


class CatalogDependencyError(CatalogError):
    """Raised when an optional runtime dependency is missing."""
