"""RoadFacets Sorting - Stable Record Ordering.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Iterable, List, TypeVar

from roadfacets_core.facets.tags import text_of

R = TypeVar("R", bound=Mapping)


def sort_key(record: Mapping, field_name: str) -> str:
    """Case-insensitive textual form of a field; missing sorts as ''."""
    return text_of(record.get(field_name)).lower()


def sort_records(records: Iterable[R], key: str, ascending: bool = True) -> List[R]:
    """Return a new list ordered by a field.

    The sort is stable in both directions: records comparing equal keep
    their input order.
    """
    return sorted(records, key=lambda r: sort_key(r, key), reverse=not ascending)


__all__ = ["sort_key", "sort_records"]
