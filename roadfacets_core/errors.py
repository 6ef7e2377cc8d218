"""RoadFacets Errors - Data Availability Error Taxonomy.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from typing import Optional


class RoadFacetsError(Exception):
    """Base class for all RoadFacets errors."""


class SourceReadError(RoadFacetsError):
    """A data source could not read a key (I/O or transport failure)."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Cannot read {key!r}: {reason}")
        self.key = key
        self.reason = reason


class DatasetUnavailable(RoadFacetsError):
    """The primary record collection cannot be retrieved or parsed.

    Fatal to rendering: callers must surface it as a visible error state.
    """

    def __init__(self, key: str, reason: str):
        super().__init__(f"Dataset {key!r} unavailable: {reason}")
        self.key = key
        self.reason = reason


class SoftDataUnavailable(RoadFacetsError):
    """The optional ordering document cannot be retrieved or parsed.

    Recovered locally by falling back to the derived facet structure.
    """

    def __init__(self, key: str, reason: str):
        super().__init__(f"Ordering {key!r} unavailable: {reason}")
        self.key = key
        self.reason = reason


class OrderingSpecError(SoftDataUnavailable):
    """The ordering document was read but is structurally invalid."""

    def __init__(self, reason: str, key: str = "ordering"):
        super().__init__(key, reason)


class MalformedRecord(RoadFacetsError):
    """A record is not an object or lacks expected fixed fields."""

    def __init__(self, position: int, reason: str, missing: Optional[list] = None):
        super().__init__(f"Record #{position} malformed: {reason}")
        self.position = position
        self.reason = reason
        self.missing = missing or []


__all__ = [
    "RoadFacetsError",
    "SourceReadError",
    "DatasetUnavailable",
    "SoftDataUnavailable",
    "OrderingSpecError",
    "MalformedRecord",
]
