"""
Query package for the clinic listing pipeline.

Re-exports the four pipeline stages (filtering, ordering, pagination and
statistics) so callers can import them from `clinic_listing.query` directly.
"""

from clinic_listing.query.ordering import (
    SortKey,
    apply_sorting,
    available_sort_keys,
    resolve_sort_key,
)
from clinic_listing.query.paginator import normalize_paging, paginate
from clinic_listing.query.predicates import RecordPredicate, apply_filters, build_predicate
from clinic_listing.query.statistics import compute_statistics

__all__ = [
    # Filtering
    "RecordPredicate",
    "apply_filters",
    "build_predicate",
    # Ordering
    "SortKey",
    "apply_sorting",
    "available_sort_keys",
    "resolve_sort_key",
    # Paging
    "normalize_paging",
    "paginate",
    # Statistics
    "compute_statistics",
]
