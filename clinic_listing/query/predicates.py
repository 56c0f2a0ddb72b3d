"""
Predicate builder for record listings.

Translates a SearchCriteria into a single predicate: every criterion that is
set contributes one clause and the clauses are AND-ed together. Text search is
case-insensitive (``str.casefold``) over name and description.
"""

from __future__ import annotations

from typing import Callable, Iterable, List

from clinic_listing.domain.models import Record, SearchCriteria
from clinic_listing.query.timestamps import naive_timestamp

RecordPredicate = Callable[[Record], bool]


def _match_all(record: Record) -> bool:
    return True


def text_clause(search_term: str | None) -> RecordPredicate:
    """Substring match on name or description; blank terms match everything."""
    term = (search_term or "").strip().casefold()
    if not term:
        return _match_all

    def _clause(record: Record) -> bool:
        return term in record.name.casefold() or term in (record.description or "").casefold()

    return _clause


def active_clause(is_active: bool | None) -> RecordPredicate:
    if is_active is None:
        return _match_all
    return lambda record: record.is_active == is_active


def created_range_clause(criteria: SearchCriteria) -> RecordPredicate:
    """
    Inclusive ``[created_from, created_to]``; a missing bound is open.

    Naive and aware timestamps are compared through ``naive_timestamp``.
    """
    lower, upper = criteria.created_from, criteria.created_to
    if lower is None and upper is None:
        return _match_all
    if lower is not None:
        lower = naive_timestamp(lower)
    if upper is not None:
        upper = naive_timestamp(upper)

    def _clause(record: Record) -> bool:
        created_at = naive_timestamp(record.created_at)
        if lower is not None and created_at < lower:
            return False
        if upper is not None and created_at > upper:
            return False
        return True

    return _clause


def deleted_clause(include_deleted: bool) -> RecordPredicate:
    if include_deleted:
        return _match_all
    return lambda record: not record.is_deleted


def build_predicate(criteria: SearchCriteria) -> RecordPredicate:
    """
    Compose the clauses for ``criteria`` into one predicate.

    Parameters
    ----------
    criteria : SearchCriteria
        The request's search criteria; paging and sorting fields are ignored.

    Returns
    -------
    RecordPredicate
        A pure function that is True when a record satisfies every clause.
    """
    clauses = [
        clause
        for clause in (
            text_clause(criteria.search_term),
            active_clause(criteria.is_active),
            created_range_clause(criteria),
            deleted_clause(criteria.include_deleted),
        )
        if clause is not _match_all
    ]

    def _predicate(record: Record) -> bool:
        return all(clause(record) for clause in clauses)

    return _predicate


def apply_filters(records: Iterable[Record], criteria: SearchCriteria) -> List[Record]:
    """Return the records matching ``criteria``, preserving input order."""
    predicate = build_predicate(criteria)
    return [record for record in records if predicate(record)]


__all__ = [
    "RecordPredicate",
    "active_clause",
    "apply_filters",
    "build_predicate",
    "created_range_clause",
    "deleted_clause",
    "text_clause",
]
