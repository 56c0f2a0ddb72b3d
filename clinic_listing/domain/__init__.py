"""
Domain package for the clinic listing pipeline.

Exports the record schema and the request/response values of a listing.
Keep this package focused on data definitions and validation concerns.
"""

from clinic_listing.domain.models import (
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
    ListingResult,
    Page,
    Record,
    RecordKind,
    SearchCriteria,
    SortDirection,
    Statistics,
)

__all__ = [
    "DEFAULT_PAGE_NUMBER",
    "DEFAULT_PAGE_SIZE",
    "ListingResult",
    "Page",
    "Record",
    "RecordKind",
    "SearchCriteria",
    "SortDirection",
    "Statistics",
]
