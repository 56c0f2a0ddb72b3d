"""
Clinic listing - the list-query pipeline behind the clinic back-office.

Every administrative listing (specializations, clinics, doctors, services)
runs the same in-memory pipeline over a snapshot of records:

- Filtering by free text, active flag, creation date range and soft-delete
- Ordering by a named key with a deterministic identifier tiebreak
- Offset pagination with normalization of bad paging input
- Summary statistics over the full, unfiltered snapshot

The pipeline is pure and synchronous; loading snapshots and rendering output
live at the edges (`infrastructure`, `reporter`, the `clinic-listing` CLI).
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from clinic_listing.config import Settings, get_settings
from clinic_listing.domain.models import (
    ListingResult,
    Page,
    Record,
    RecordKind,
    SearchCriteria,
    SortDirection,
    Statistics,
)
from clinic_listing.exceptions import ClinicListingError, ConfigurationError, SnapshotError
from clinic_listing.pipeline import run_listing
from clinic_listing.query import (
    apply_filters,
    apply_sorting,
    build_predicate,
    compute_statistics,
    paginate,
)
from clinic_listing.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "ListingResult",
    "Page",
    "Record",
    "RecordKind",
    "SearchCriteria",
    "SortDirection",
    "Statistics",
    # Errors
    "ClinicListingError",
    "ConfigurationError",
    "SnapshotError",
    # Pipeline
    "run_listing",
    "apply_filters",
    "apply_sorting",
    "build_predicate",
    "compute_statistics",
    "paginate",
    # Logging
    "configure_logging",
    "get_logger",
]
