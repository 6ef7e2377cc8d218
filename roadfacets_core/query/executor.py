"""RoadFacets Filter Executor - Facet Predicate Evaluation.

A record matches a filter state when, for every constrained key, at least
one of its tags is active (OR within a key, AND across keys).

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Sequence, Union

from roadfacets_core.facets.tags import record_tags
from roadfacets_core.query.state import FilterState

logger = logging.getLogger(__name__)

StateLike = Union[FilterState, Mapping, None]


@dataclass
class ExecutionStats:
    """Counters for filter evaluation.

    Attributes:
        passes: Number of filter passes run
        records_scanned: Records tested against a predicate
        tag_lookups: Tag sets normalized (cache misses)
    """

    passes: int = 0
    records_scanned: int = 0
    tag_lookups: int = 0


class FilterExecutor:
    """Evaluates filter states against a fixed record sequence.

    Normalized tag sets are computed once per (record, key) and reused
    across passes, since the dataset never changes.
    """

    def __init__(self, records: Sequence[Mapping]):
        """Initialize executor.

        Args:
            records: Records in original order
        """
        self._records = records
        self._tag_cache: List[Dict[str, FrozenSet[str]]] = [{} for _ in range(len(records))]
        self.stats = ExecutionStats()

    def tags(self, index: int, key: str) -> FrozenSet[str]:
        """Tag set of the record at index for key."""
        cached = self._tag_cache[index]
        tags = cached.get(key)
        if tags is None:
            tags = record_tags(self._records[index], key)
            cached[key] = tags
            self.stats.tag_lookups += 1
        return tags

    def matches(self, index: int, state: FilterState) -> bool:
        """Check whether the record at index satisfies every constraint."""
        self.stats.records_scanned += 1
        for key, active in state.items():
            if self.tags(index, key).isdisjoint(active):
                return False
        return True

    def matching_indices(self, state: StateLike) -> List[int]:
        """Indices of matching records, in original order."""
        state = FilterState.coerce(state)
        self.stats.passes += 1
        if not state:
            return list(range(len(self._records)))
        return [i for i in range(len(self._records)) if self.matches(i, state)]

    def execute(self, state: StateLike) -> List[Mapping]:
        """Records matching state, preserving original relative order."""
        return [self._records[i] for i in self.matching_indices(state)]

    def count(self, state: StateLike, limit: Optional[int] = None) -> int:
        """Number of matching records.

        Args:
            state: Filter state
            limit: Stop counting once this many matches are found
        """
        state = FilterState.coerce(state)
        self.stats.passes += 1
        total = 0
        for i in range(len(self._records)):
            if self.matches(i, state):
                total += 1
                if limit is not None and total >= limit:
                    break
        return total


def apply_filter(dataset: Sequence[Mapping], state: StateLike) -> List[Mapping]:
    """Return the subsequence of dataset matching state.

    Args:
        dataset: Records
        state: FilterState or mapping of key to active values

    Returns:
        Matching records in original order
    """
    return FilterExecutor(dataset).execute(state)


__all__ = ["ExecutionStats", "FilterExecutor", "StateLike", "apply_filter"]
