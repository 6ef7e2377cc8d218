"""RoadFacets Remote Source - Documents Served Over HTTP.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
import logging
from typing import Optional

import requests

from roadfacets_core.errors import SourceReadError
from roadfacets_core.storage.backend import DataSource, SourceConfig

logger = logging.getLogger(__name__)

_NOT_FOUND = (404, 410)

class HttpSource(DataSource):
    """Fetches documents relative to a base URL."""

    def __init__(self, config: SourceConfig = None, session: Optional[requests.Session] = None):
        super().__init__(config)
        self._session = session or requests.Session()
        self._owns_session = session is None

    def _key_to_url(self, key: str) -> str:
        base = self.config.base.rstrip("/")
        return f"{base}/{key}" if base else key

    def read(self, key: str) -> Optional[bytes]:
        url = self._key_to_url(key)
        try:
            resp = self._session.get(url, timeout=self.config.timeout)
        except requests.RequestException as e:
            raise SourceReadError(key, str(e)) from e

        if resp.status_code in _NOT_FOUND:
            logger.debug(f"{url} not found ({resp.status_code})")
            return None
        try:
            resp.raise_for_status()
        except requests.HTTPError as e:
            raise SourceReadError(key, f"HTTP {resp.status_code}") from e
        return resp.content

    def describe(self, key: str) -> str:
        return self._key_to_url(key)

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

__all__ = ["HttpSource"]
