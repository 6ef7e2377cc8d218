"""RoadFacets Data Source Backend - Abstract Source Interface.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

@dataclass
class SourceConfig:
    """Data source configuration.

    Attributes:
        base: Directory path or base URL documents are resolved against
        timeout: Network timeout in seconds
        encoding: Text encoding of JSON documents
    """
    base: str = ""
    timeout: float = 30.0
    encoding: str = "utf-8"

class DataSource(ABC):
    """Abstract read-only source of named JSON documents.

    ``read`` returns None when the document does not exist and raises
    SourceReadError when it exists but cannot be read.
    """

    def __init__(self, config: SourceConfig = None):
        self.config = config or SourceConfig()

    @abstractmethod
    def read(self, key: str) -> Optional[bytes]:
        pass

    def exists(self, key: str) -> bool:
        return self.read(key) is not None

    def describe(self, key: str) -> str:
        """Human-readable location of key, for log messages."""
        return key

    def close(self) -> None:
        pass

    def __enter__(self) -> "DataSource":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

__all__ = ["DataSource", "SourceConfig"]
