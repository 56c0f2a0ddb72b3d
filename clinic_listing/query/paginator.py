"""
Offset pagination over an already ordered sequence.

Page number and page size are normalized rather than rejected: anything below
1 becomes the default (page 1, size 10). A page past the end of the data is an
empty page whose total count is still correct.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from clinic_listing.domain.models import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE, Page, Record


def normalize_paging(page_number: int, page_size: int) -> Tuple[int, int]:
    """Replace non-positive paging input with the defaults."""
    if page_number <= 0:
        page_number = DEFAULT_PAGE_NUMBER
    if page_size <= 0:
        page_size = DEFAULT_PAGE_SIZE
    return page_number, page_size


def paginate(records: Sequence[Record], page_number: int, page_size: int) -> Page:
    """
    Slice ``records[(page - 1) * size : page * size]`` into a Page.

    Parameters
    ----------
    records : Sequence[Record]
        Ordered records; not modified.
    page_number : int
        1-based page number; non-positive values become 1.
    page_size : int
        Records per page; non-positive values become 10.
    """
    page_number, page_size = normalize_paging(page_number, page_size)
    start = (page_number - 1) * page_size
    return Page(
        items=tuple(records[start : start + page_size]),
        total_count=len(records),
        page_number=page_number,
        page_size=page_size,
    )


__all__ = ["normalize_paging", "paginate"]
