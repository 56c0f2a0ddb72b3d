"""
Domain models for the clinic listing pipeline.

Defines the record schema shared by every back-office listing (specializations,
clinics, doctors, services) together with the per-request search criteria and
the page/statistics values the pipeline returns. All models are frozen: the
pipeline reads snapshots and builds fresh outputs, it never mutates either.
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import BaseModel, Field, computed_field, field_validator

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10


class RecordKind(str, Enum):
    """Which back-office listing a record belongs to."""

    SPECIALIZATION = "specialization"
    CLINIC = "clinic"
    DOCTOR = "doctor"
    SERVICE = "service"
    SERVICE_CATEGORY = "service_category"
    DEPARTMENT = "department"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class Record(BaseModel):
    """
    A single listed entity row as exported by the persistence layer.
    """

    id: int = Field(..., description="Primary key, unique and immutable.")
    name: str = Field(..., description="Display name.")
    description: Optional[str] = Field(None, description="Free-text description.")
    is_active: bool = Field(True, description="Whether the record is active.")
    display_order: int = Field(0, description="Default sort key.")
    is_deleted: bool = Field(False, description="Soft-delete flag.")
    created_at: datetime = Field(..., description="Creation timestamp, set once.")
    kind: RecordKind = Field(RecordKind.SPECIALIZATION, description="Owning listing.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }


class SearchCriteria(BaseModel):
    """
    Search, sort and paging input for one listing request.

    Paging fields are deliberately unconstrained here; non-positive values are
    normalized by the paginator instead of being rejected.
    """

    search_term: Optional[str] = None
    is_active: Optional[bool] = None
    created_from: Optional[datetime] = None
    created_to: Optional[datetime] = None
    include_deleted: bool = False
    sort_by: Optional[str] = None
    sort_order: SortDirection = SortDirection.ASC
    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE

    model_config = {
        "frozen": True,
    }

    @field_validator("sort_order", mode="before")
    @classmethod
    def _parse_sort_order(cls, value: Any) -> SortDirection:
        # Anything other than "desc" sorts ascending.
        if isinstance(value, SortDirection):
            return value
        if isinstance(value, str) and value.strip().lower() == SortDirection.DESC.value:
            return SortDirection.DESC
        return SortDirection.ASC


class Page(BaseModel):
    """A bounded slice of the filtered, ordered result set."""

    items: Tuple[Record, ...] = ()
    total_count: int = 0
    page_number: int = Field(DEFAULT_PAGE_NUMBER, ge=1)
    page_size: int = Field(DEFAULT_PAGE_SIZE, ge=1)

    model_config = {
        "frozen": True,
    }

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        return (self.total_count + self.page_size - 1) // self.page_size

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages

    @computed_field  # type: ignore[prop-decorator]
    @property
    def first_item_index(self) -> int:
        """1-based position of the first item on this page, 0 when empty."""
        if not self.items:
            return 0
        return (self.page_number - 1) * self.page_size + 1

    @computed_field  # type: ignore[prop-decorator]
    @property
    def last_item_index(self) -> int:
        if not self.items:
            return 0
        return self.first_item_index + len(self.items) - 1


class Statistics(BaseModel):
    """Summary counts over the full, unfiltered record set."""

    total_count: int = 0
    active_count: int = 0
    inactive_count: int = 0
    deleted_count: int = 0
    created_today_count: int = 0

    model_config = {
        "frozen": True,
    }


class ListingResult(BaseModel):
    """Page view model: the requested page, the statistics and the applied criteria."""

    page: Page
    statistics: Statistics
    criteria: SearchCriteria

    model_config = {
        "frozen": True,
    }


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
