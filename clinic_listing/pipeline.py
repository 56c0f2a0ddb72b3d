"""
Listing pipeline: filter, sort, paginate, and summarize a record snapshot.

Usage (example from CLI):
    from clinic_listing.pipeline import run_listing

    result = run_listing(records, SearchCriteria(search_term="derm"), now=now)
    print(result.page.total_count, result.statistics.active_count)

The pipeline is pure: it reads the caller's snapshot once, never mutates it,
and reads no clock of its own. Statistics are computed over the whole snapshot
independently of the search criteria.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from clinic_listing.domain.models import ListingResult, Record, SearchCriteria
from clinic_listing.query.ordering import apply_sorting
from clinic_listing.query.paginator import normalize_paging, paginate
from clinic_listing.query.predicates import apply_filters
from clinic_listing.query.statistics import compute_statistics
from clinic_listing.utils.logging import get_logger

log = get_logger(__name__)


def normalize_criteria(criteria: SearchCriteria) -> SearchCriteria:
    """Return ``criteria`` with paging input replaced by defaults where non-positive."""
    page_number, page_size = normalize_paging(criteria.page_number, criteria.page_size)
    if (page_number, page_size) == (criteria.page_number, criteria.page_size):
        return criteria
    log.debug(
        "Paging input normalized",
        extra={
            "requested_page": criteria.page_number,
            "requested_page_size": criteria.page_size,
            "page": page_number,
            "page_size": page_size,
        },
    )
    return criteria.model_copy(update={"page_number": page_number, "page_size": page_size})


def run_listing(
    records: Iterable[Record],
    criteria: Optional[SearchCriteria] = None,
    now: Optional[datetime] = None,
) -> ListingResult:
    """
    Run one listing request over a record snapshot.

    Parameters
    ----------
    records : iterable[Record]
        The full snapshot as loaded by the persistence collaborator.
    criteria : SearchCriteria | None
        Search, sort and paging input. Defaults to an empty criteria (first
        page of ten, default ordering, deleted records hidden).
    now : datetime | None
        Reference time for the "created today" count. Defaults to the current
        local time, read once here.

    Returns
    -------
    ListingResult
        The requested page, statistics over the full snapshot, and the
        normalized criteria that produced the page.
    """
    snapshot = tuple(records)
    criteria = normalize_criteria(criteria or SearchCriteria())
    reference = now or datetime.now()

    log.info(
        "[LISTING START]",
        extra={
            "total": len(snapshot),
            "search_term": criteria.search_term,
            "sort_by": criteria.sort_by,
            "page": criteria.page_number,
            "page_size": criteria.page_size,
        },
    )

    matched = apply_filters(snapshot, criteria)
    ordered = apply_sorting(matched, criteria.sort_by, criteria.sort_order)
    page = paginate(ordered, criteria.page_number, criteria.page_size)
    statistics = compute_statistics(snapshot, reference)

    log.info(
        "[LISTING COMPLETE]",
        extra={
            "total": len(snapshot),
            "matched": page.total_count,
            "returned": len(page.items),
            "page": page.page_number,
            "total_pages": page.total_pages,
        },
    )

    return ListingResult(page=page, statistics=statistics, criteria=criteria)


__all__ = ["normalize_criteria", "run_listing"]
