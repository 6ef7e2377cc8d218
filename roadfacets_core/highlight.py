"""RoadFacets Highlight Correlator - Hover Highlighting.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Dict, FrozenSet, Iterable, List

from roadfacets_core.facets.builder import ButtonKey, FacetGroup
from roadfacets_core.facets.tags import folded_tags


def correlate(record: Mapping, facets: Iterable[FacetGroup]) -> Dict[ButtonKey, bool]:
    """Flag every button whose value appears in the record.

    Comparison is case-insensitive and ignores surrounding whitespace.
    The active filter plays no part.
    """
    flags: Dict[ButtonKey, bool] = {}
    for group in facets:
        for facet in group.facets:
            tags: FrozenSet[str] = folded_tags(record, facet.key)
            for value in facet.values:
                flags[(facet.key, value.value)] = value.value.strip().lower() in tags
    return flags


def highlighted(record: Mapping, facets: Iterable[FacetGroup]) -> List[ButtonKey]:
    """Buttons matching the record, in display order."""
    return [button for button, hit in correlate(record, facets).items() if hit]


__all__ = ["correlate", "highlighted"]
