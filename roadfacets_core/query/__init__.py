"""RoadFacets Query Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from roadfacets_core.query.state import FilterState
from roadfacets_core.query.executor import ExecutionStats, FilterExecutor, apply_filter
from roadfacets_core.query.inference import compute_disabled

__all__ = [
    "FilterState",
    "ExecutionStats",
    "FilterExecutor",
    "apply_filter",
    "compute_disabled",
]
