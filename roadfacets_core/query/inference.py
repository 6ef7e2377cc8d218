"""RoadFacets Disabled-State Inference.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
import logging
from collections.abc import Mapping
from typing import Dict, Iterable, Optional, Sequence

from roadfacets_core.facets.builder import ButtonKey, FacetGroup, iter_buttons
from roadfacets_core.query.executor import FilterExecutor, StateLike
from roadfacets_core.query.state import FilterState

logger = logging.getLogger(__name__)


def compute_disabled(
    dataset: Sequence[Mapping],
    state: StateLike,
    facets: Iterable[FacetGroup],
    executor: Optional[FilterExecutor] = None,
) -> Dict[ButtonKey, bool]:
    """Flag every inactive button whose activation would match nothing.

    Each inactive (key, value) is probed by adding value to key's
    selection and counting matches. Active buttons are never flagged, so
    deselecting them stays possible.

    Args:
        dataset: Records
        state: Current selections
        facets: Facet structure to probe
        executor: Executor over dataset to reuse its tag cache

    Returns:
        Mapping of (key, value) to disabled flag
    """
    state = FilterState.coerce(state)
    if executor is None:
        executor = FilterExecutor(dataset)

    disabled: Dict[ButtonKey, bool] = {}
    for key, value in iter_buttons(facets):
        if state.is_active(key, value):
            disabled[(key, value)] = False
            continue
        probe = state.with_value(key, value)
        disabled[(key, value)] = executor.count(probe, limit=1) == 0

    logger.debug(f"Disabled {sum(disabled.values())} of {len(disabled)} buttons for {state!r}")
    return disabled


__all__ = ["compute_disabled"]
