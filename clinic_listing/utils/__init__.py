"""
Utilities package for the clinic listing pipeline.

Exports shared helpers for logging and profiling.
Keep this package lightweight and free of domain-specific logic.
"""

from clinic_listing.utils.logging import configure_logging, get_logger
from clinic_listing.utils.profiler import ProfileStats, profile_block

__all__ = [
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
]
