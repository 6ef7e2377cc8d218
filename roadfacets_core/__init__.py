"""RoadFacets - Faceted Record Browser for BlackRoad OS.

Renders a static collection of bibliographic records as a table with
multi-select facet filters, and infers which filter buttons would empty
the table if activated.

Architecture:
┌─────────────────────────────────────────────────────────────────────┐
│                          FacetBrowser                               │
├─────────────────────────────────────────────────────────────────────┤
│   ┌────────────┐  ┌────────────┐  ┌────────────┐  ┌────────────┐    │
│   │   Load     │→ │  Derive    │→ │  Filter    │→ │   Sort     │    │
│   │  Sources   │  │  Facets    │  │  Records   │  │  Records   │    │
│   └────────────┘  └────────────┘  └────────────┘  └────────────┘    │
│                                          │                          │
│                       ┌──────────────────┴───────┐  ┌────────────┐  │
│                       │ Disabled-State Inference │  │ Highlight  │  │
│                       └──────────────────────────┘  │ Correlator │  │
│                                                     └────────────┘  │
└─────────────────────────────────────────────────────────────────────┘

Key Features:
- Facets derived from heterogeneous fields (scalars, lists, comma lists)
- Optional explicit ordering document for groups and buttons
- OR within a facet, AND across facets
- Disabled-button inference for empty result sets
- Case-insensitive hover correlation
- Stable case-insensitive sorting

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "BlackRoad OS"
__license__ = "Proprietary"

# Core engine
from roadfacets_core.engine import (
    FacetBrowser,
    BrowserConfig,
    BrowserState,
    BrowserView,
)

# Data model
from roadfacets_core.dataset import (
    Dataset,
    Record,
    FIXED_FIELDS,
)
from roadfacets_core.errors import (
    RoadFacetsError,
    DatasetUnavailable,
    SoftDataUnavailable,
    OrderingSpecError,
    MalformedRecord,
    SourceReadError,
)

# Facets
from roadfacets_core.facets.builder import (
    FacetBuilder,
    Facet,
    FacetGroup,
    FacetValue,
    derive_facets,
)
from roadfacets_core.facets.ordering import (
    GroupSpec,
    OrderingSpec,
)
from roadfacets_core.facets.tags import extract_tags

# Query
from roadfacets_core.query.state import FilterState
from roadfacets_core.query.executor import FilterExecutor, apply_filter
from roadfacets_core.query.inference import compute_disabled

# Presentation helpers
from roadfacets_core.highlight import correlate
from roadfacets_core.sorting import sort_records
from roadfacets_core.table import TableRow

# Sources
from roadfacets_core.storage import (
    DataSource,
    SourceConfig,
    MemorySource,
    FileSource,
    HttpSource,
    load_dataset,
    load_ordering,
    source_for,
)

__all__ = [
    # Version
    "__version__",
    "__author__",
    "__license__",
    # Core
    "FacetBrowser",
    "BrowserConfig",
    "BrowserState",
    "BrowserView",
    # Data model
    "Dataset",
    "Record",
    "FIXED_FIELDS",
    "RoadFacetsError",
    "DatasetUnavailable",
    "SoftDataUnavailable",
    "OrderingSpecError",
    "MalformedRecord",
    "SourceReadError",
    # Facets
    "FacetBuilder",
    "Facet",
    "FacetGroup",
    "FacetValue",
    "derive_facets",
    "GroupSpec",
    "OrderingSpec",
    "extract_tags",
    # Query
    "FilterState",
    "FilterExecutor",
    "apply_filter",
    "compute_disabled",
    # Presentation
    "correlate",
    "sort_records",
    "TableRow",
    # Sources
    "DataSource",
    "SourceConfig",
    "MemorySource",
    "FileSource",
    "HttpSource",
    "load_dataset",
    "load_ordering",
    "source_for",
]
