"""
Timestamp normalization shared by the filtering, ordering and statistics stages.

Snapshots may mix naive and timezone-aware ``created_at`` values, and search
bounds may be either. Everything is compared as naive wall time: aware values
are converted to the target zone (UTC unless given) and stripped of their
tzinfo, naive values are taken as already being in that zone.
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Optional


def naive_timestamp(value: datetime, zone: Optional[tzinfo] = None) -> datetime:
    """Return ``value`` as naive wall time in ``zone`` (UTC by default)."""
    if value.tzinfo is None:
        return value
    return value.astimezone(zone or timezone.utc).replace(tzinfo=None)


__all__ = ["naive_timestamp"]
