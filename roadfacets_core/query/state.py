"""RoadFacets Filter State - Active Facet Selections.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Optional, Union


class FilterState(Mapping):
    """Mapping of facet key to its non-empty set of active values.

    Instances are never modified in place; every change returns a new
    state. Keys whose selection becomes empty are dropped.
    """

    __slots__ = ("_active",)

    def __init__(self, active: Optional[Mapping] = None):
        self._active: Dict[str, FrozenSet[str]] = {}
        for key, values in (active or {}).items():
            if values is None:
                continue
            if isinstance(values, str):
                values = [values]
            selected = frozenset(values)
            if selected:
                self._active[key] = selected

    def __getitem__(self, key: str) -> FrozenSet[str]:
        return self._active[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._active)

    def __len__(self) -> int:
        return len(self._active)

    def __hash__(self) -> int:
        return hash(frozenset(self._active.items()))

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={sorted(v)}" for k, v in self._active.items())
        return f"FilterState({inner})"

    def is_active(self, key: str, value: str) -> bool:
        return value in self._active.get(key, ())

    def active(self, key: str) -> FrozenSet[str]:
        return self._active.get(key, frozenset())

    def with_value(self, key: str, value: str) -> "FilterState":
        """State with value added to key's selection."""
        active = dict(self._active)
        active[key] = self.active(key) | {value}
        return FilterState(active)

    def without_value(self, key: str, value: str) -> "FilterState":
        """State with value removed from key's selection."""
        if not self.is_active(key, value):
            return self
        active = dict(self._active)
        active[key] = active[key] - {value}
        return FilterState(active)

    def toggled(self, key: str, value: str) -> "FilterState":
        if self.is_active(key, value):
            return self.without_value(key, value)
        return self.with_value(key, value)

    def cleared(self, key: str) -> "FilterState":
        """State with every value of key removed at once."""
        if key not in self._active:
            return self
        active = dict(self._active)
        del active[key]
        return FilterState(active)

    def to_dict(self) -> Dict[str, List[str]]:
        return {k: sorted(v) for k, v in self._active.items()}

    @classmethod
    def coerce(cls, state: Union["FilterState", Mapping, None]) -> "FilterState":
        """Accept a FilterState or any mapping of key to values."""
        if isinstance(state, FilterState):
            return state
        return cls(state)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Any]) -> "FilterState":
        """Build from (key, value) pairs."""
        state = cls()
        for key, value in pairs:
            state = state.with_value(key, value)
        return state


__all__ = ["FilterState"]
