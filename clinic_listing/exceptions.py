"""
Error types raised outside the pure listing pipeline.

The pipeline itself is total and never raises for expected input variation;
these exceptions cover configuration and snapshot loading at the CLI boundary.
"""

from __future__ import annotations


class ClinicListingError(Exception):
    """Base class for errors surfaced to the CLI."""


class ConfigurationError(ClinicListingError, ValueError):
    """Settings from the environment or `.env` are invalid."""


class SnapshotError(ClinicListingError, ValueError):
    """A record snapshot could not be read or contained an invalid row."""


__all__ = ["ClinicListingError", "ConfigurationError", "SnapshotError"]
