"""RoadFacets Data Sources.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from roadfacets_core.storage.backend import DataSource, SourceConfig
from roadfacets_core.storage.memory import MemorySource
from roadfacets_core.storage.file import FileSource
from roadfacets_core.storage.remote import HttpSource
from roadfacets_core.storage.loader import (
    DATA_KEY,
    ORDERING_KEY,
    load_dataset,
    load_ordering,
    read_ordering,
    source_for,
)

__all__ = [
    "DataSource",
    "SourceConfig",
    "MemorySource",
    "FileSource",
    "HttpSource",
    "DATA_KEY",
    "ORDERING_KEY",
    "load_dataset",
    "load_ordering",
    "read_ordering",
    "source_for",
]
