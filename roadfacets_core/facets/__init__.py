"""RoadFacets Facet Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from roadfacets_core.facets.builder import (
    ButtonKey,
    FacetBuilder,
    Facet,
    FacetGroup,
    FacetValue,
    candidate_keys,
    derive_facets,
    iter_buttons,
)
from roadfacets_core.facets.ordering import GroupSpec, OrderingSpec
from roadfacets_core.facets.tags import extract_tags, folded_tags, record_tags, text_of

__all__ = [
    "ButtonKey",
    "FacetBuilder",
    "Facet",
    "FacetGroup",
    "FacetValue",
    "candidate_keys",
    "derive_facets",
    "iter_buttons",
    "GroupSpec",
    "OrderingSpec",
    "extract_tags",
    "folded_tags",
    "record_tags",
    "text_of",
]
