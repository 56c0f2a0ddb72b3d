"""
Summary counts for the listing header.

Always computed over the full snapshot, never over the filtered or paged
subset. The "created today" count compares calendar dates against the
caller-supplied ``now``.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable

from clinic_listing.domain.models import Record, Statistics
from clinic_listing.query.timestamps import naive_timestamp


def _local_date(created_at: datetime, now: datetime) -> date:
    # Aware timestamps are compared in now's timezone; naive ones as-is.
    if now.tzinfo is None:
        return created_at.date()
    return naive_timestamp(created_at, now.tzinfo).date()


def compute_statistics(records: Iterable[Record], now: datetime) -> Statistics:
    total = active = inactive = deleted = created_today = 0
    today = now.date()

    for record in records:
        total += 1
        if record.is_deleted:
            deleted += 1
        elif record.is_active:
            active += 1
        else:
            inactive += 1
        if _local_date(record.created_at, now) == today:
            created_today += 1

    return Statistics(
        total_count=total,
        active_count=active,
        inactive_count=inactive,
        deleted_count=deleted,
        created_today_count=created_today,
    )


__all__ = ["compute_statistics"]
