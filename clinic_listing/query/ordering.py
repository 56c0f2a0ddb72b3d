"""
Comparator selection for record listings.

Maps a sort-key name and direction onto a deterministic ordering. Supported
keys are ``name``, ``displayorder`` and ``createdat``; names are matched
case-insensitively and ignore underscores, dashes and spaces, so
``display_order`` and ``DisplayOrder`` select the same key.

An unknown or missing key is not an error: it falls back to the default
ordering (display order, then name, always ascending). Ties are always broken
by ``id`` ascending so repeated paging over the same snapshot is stable.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional

from clinic_listing.domain.models import Record, SortDirection
from clinic_listing.query.timestamps import naive_timestamp
from clinic_listing.utils.logging import get_logger

log = get_logger(__name__)

_SEPARATORS = re.compile(r"[\s_\-]+")


class SortKey(str, Enum):
    NAME = "name"
    DISPLAY_ORDER = "displayorder"
    CREATED_AT = "createdat"


def _name_key(record: Record) -> Any:
    return (record.name.casefold(), record.name)


_KEY_FUNCTIONS: Dict[SortKey, Callable[[Record], Any]] = {
    SortKey.NAME: _name_key,
    SortKey.DISPLAY_ORDER: lambda record: record.display_order,
    SortKey.CREATED_AT: lambda record: naive_timestamp(record.created_at),
}


def available_sort_keys() -> List[str]:
    """List the recognized sort-key names."""
    return sorted(key.value for key in SortKey)


def resolve_sort_key(name: Optional[str]) -> Optional[SortKey]:
    """Resolve a user-supplied key name, or None when it is blank or unknown."""
    if not name:
        return None
    normalized = _SEPARATORS.sub("", name).lower()
    try:
        return SortKey(normalized)
    except ValueError:
        return None


def _default_key(record: Record) -> Any:
    return (record.display_order, _name_key(record), record.id)


def apply_sorting(
    records: Iterable[Record],
    sort_by: Optional[str] = None,
    sort_order: SortDirection = SortDirection.ASC,
) -> List[Record]:
    """
    Return a new list of ``records`` in the requested order.

    Parameters
    ----------
    records : iterable[Record]
        Records to order; the input is not modified.
    sort_by : str | None
        Sort-key name. Unknown names fall back to the default ordering.
    sort_order : SortDirection
        Direction of the primary key. The ``id`` tiebreak is always ascending.

    Returns
    -------
    List[Record]
        Ordered copy of the input.
    """
    key = resolve_sort_key(sort_by)
    if key is None:
        if sort_by:
            log.debug(
                "Unrecognized sort key, using default ordering",
                extra={"sort_by": sort_by},
            )
        return sorted(records, key=_default_key)

    # Two stable passes: id ascending first, then the primary key. reverse=True
    # keeps equal elements in their existing (id ascending) order.
    by_id = sorted(records, key=lambda record: record.id)
    return sorted(
        by_id,
        key=_KEY_FUNCTIONS[key],
        reverse=sort_order == SortDirection.DESC,
    )


__all__ = [
    "SortKey",
    "apply_sorting",
    "available_sort_keys",
    "resolve_sort_key",
]
