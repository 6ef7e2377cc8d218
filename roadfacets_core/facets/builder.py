"""RoadFacets Facet Builder - Facet Structure Derivation.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from roadfacets_core.dataset import FIXED_FIELDS
from roadfacets_core.facets.ordering import OrderingSpec
from roadfacets_core.facets.tags import extract_tags

logger = logging.getLogger(__name__)

ButtonKey = Tuple[str, str]


@dataclass(frozen=True)
class FacetValue:
    """A single facet button with the number of records carrying it."""
    value: str
    count: int = 0


@dataclass(frozen=True)
class Facet:
    """A filterable key with its ordered buttons."""
    key: str
    values: Tuple[FacetValue, ...] = ()

    def __iter__(self) -> Iterator[FacetValue]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    @property
    def labels(self) -> List[str]:
        return [v.value for v in self.values]


@dataclass(frozen=True)
class FacetGroup:
    """A named display grouping of facets. The default group is unnamed."""
    name: str = ""
    facets: Tuple[Facet, ...] = field(default_factory=tuple)

    @property
    def keys(self) -> List[str]:
        return [f.key for f in self.facets]


class FacetBuilder:
    """Collects the distinct tags of one facet key."""

    def __init__(self, key: str):
        self.key = key
        self._counts: Dict[str, int] = {}
        self._missing = 0

    def add(self, value: Optional[Any]) -> None:
        tags = extract_tags(value)
        if not tags:
            self._missing += 1
        for tag in tags:
            self._counts[tag] = self._counts.get(tag, 0) + 1

    def build(self, order: Optional[Sequence[str]] = None) -> Facet:
        """Build the facet.

        Args:
            order: Explicit button sequence; observed tags sorted when None
        """
        labels = list(order) if order is not None else sorted(self._counts)
        return Facet(
            key=self.key,
            values=tuple(FacetValue(v, self._counts.get(v, 0)) for v in labels),
        )

    @property
    def missing(self) -> int:
        return self._missing


def candidate_keys(records: Iterable[Mapping], fixed_fields: Iterable[str] = FIXED_FIELDS) -> List[str]:
    """Non-fixed field names in first-seen order across all records."""
    fixed = set(fixed_fields)
    keys: Dict[str, None] = {}
    for record in records:
        for name in record:
            if name not in fixed:
                keys.setdefault(name, None)
    return list(keys)


def derive_facets(
    dataset: Sequence[Mapping],
    ordering: Optional[OrderingSpec] = None,
    fixed_fields: Iterable[str] = FIXED_FIELDS,
) -> List[FacetGroup]:
    """Derive the ordered facet groups of a dataset.

    With an ordering spec its groups (or, lacking groups, its keysOrder)
    give the structure and buttonsOrder gives per-key value order where
    present. Otherwise every non-fixed field is a facet in one unnamed
    group and values are the sorted distinct tags.

    Args:
        dataset: Records
        ordering: Optional explicit ordering
        fixed_fields: Fields never treated as facets

    Returns:
        Ordered facet groups
    """
    if ordering is not None and ordering.groups:
        layout = [(g.name, list(g.keys)) for g in ordering.groups]
    elif ordering is not None and ordering.keys_order:
        layout = [("", list(ordering.keys_order))]
    else:
        layout = [("", candidate_keys(dataset, fixed_fields))]

    builders: Dict[str, FacetBuilder] = {}
    for _, keys in layout:
        for key in keys:
            builders.setdefault(key, FacetBuilder(key))

    for record in dataset:
        for key, builder in builders.items():
            builder.add(record.get(key))

    groups = []
    for name, keys in layout:
        facets = []
        for key in keys:
            order = ordering.values_for(key) if ordering is not None else None
            facets.append(builders[key].build(order))
        groups.append(FacetGroup(name=name, facets=tuple(facets)))

    logger.info(
        f"Derived {len(builders)} facets in {len(groups)} groups "
        f"({'explicit' if ordering is not None else 'derived'} ordering)"
    )
    return groups


def iter_buttons(facets: Iterable[FacetGroup]) -> Iterator[ButtonKey]:
    """Yield every (key, value) button in display order."""
    for group in facets:
        for facet in group.facets:
            for value in facet.values:
                yield facet.key, value.value


__all__ = [
    "ButtonKey",
    "FacetValue",
    "Facet",
    "FacetGroup",
    "FacetBuilder",
    "candidate_keys",
    "derive_facets",
    "iter_buttons",
]
