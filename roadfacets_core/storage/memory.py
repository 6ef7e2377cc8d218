"""RoadFacets Memory Source - In-Memory Document Source.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
import json
from typing import Any, Dict, Optional
from roadfacets_core.storage.backend import DataSource, SourceConfig

class MemorySource(DataSource):
    """In-memory document source."""

    def __init__(self, documents: Optional[Dict[str, bytes]] = None, config: SourceConfig = None):
        super().__init__(config)
        self._data: Dict[str, bytes] = dict(documents or {})

    def write(self, key: str, data: bytes) -> None:
        self._data[key] = data

    def write_json(self, key: str, document: Any) -> None:
        self._data[key] = json.dumps(document).encode(self.config.encoding)

    def read(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    def exists(self, key: str) -> bool:
        return key in self._data

    def describe(self, key: str) -> str:
        return f"memory:{key}"

__all__ = ["MemorySource"]
