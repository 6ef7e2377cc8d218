"""RoadFacets File Source - Directory-Backed Document Source.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
import os
from typing import Optional
from roadfacets_core.errors import SourceReadError
from roadfacets_core.storage.backend import DataSource, SourceConfig

class FileSource(DataSource):
    """Reads documents from files under a base directory."""

    def __init__(self, config: SourceConfig = None):
        super().__init__(config)

    def _key_to_path(self, key: str) -> str:
        return os.path.join(self.config.base, key)

    def read(self, key: str) -> Optional[bytes]:
        path = self._key_to_path(key)
        if not os.path.isfile(path):
            return None
        try:
            with open(path, "rb") as f:
                return f.read()
        except OSError as e:
            raise SourceReadError(key, str(e)) from e

    def exists(self, key: str) -> bool:
        return os.path.isfile(self._key_to_path(key))

    def describe(self, key: str) -> str:
        return self._key_to_path(key)

__all__ = ["FileSource"]
