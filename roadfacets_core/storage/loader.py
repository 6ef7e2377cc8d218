"""RoadFacets Loader - Dataset and Ordering Document Loading.

The dataset is required: any failure raises DatasetUnavailable. The
ordering document is optional: absence and every kind of failure are
treated alike and yield None.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from roadfacets_core.dataset import Dataset
from roadfacets_core.errors import DatasetUnavailable, SoftDataUnavailable, SourceReadError
from roadfacets_core.facets.ordering import OrderingSpec
from roadfacets_core.storage.backend import DataSource, SourceConfig
from roadfacets_core.storage.file import FileSource
from roadfacets_core.storage.remote import HttpSource

logger = logging.getLogger(__name__)

DATA_KEY = "data.json"
ORDERING_KEY = "ordering.json"


def _decode(raw: bytes, encoding: str) -> Any:
    return json.loads(raw.decode(encoding))


def load_dataset(source: DataSource, key: str = DATA_KEY) -> Dataset:
    """Load the record collection.

    Raises:
        DatasetUnavailable: If the document is missing, unreadable, not
            valid JSON, or not a JSON array
    """
    where = source.describe(key)
    try:
        raw = source.read(key)
    except SourceReadError as e:
        raise DatasetUnavailable(key, e.reason) from e
    if raw is None:
        raise DatasetUnavailable(key, f"{where} not found")

    try:
        rows = _decode(raw, source.config.encoding)
    except (UnicodeDecodeError, ValueError) as e:
        raise DatasetUnavailable(key, f"invalid JSON: {e}") from e
    if not isinstance(rows, list):
        raise DatasetUnavailable(key, f"expected a JSON array, got {type(rows).__name__}")

    return Dataset.from_list(rows, source=where)


def read_ordering(source: DataSource, key: str = ORDERING_KEY) -> Optional[OrderingSpec]:
    """Load the ordering document, raising on failure.

    Returns:
        OrderingSpec, or None when the document does not exist

    Raises:
        SoftDataUnavailable: If the document cannot be read or parsed
    """
    try:
        raw = source.read(key)
    except SourceReadError as e:
        raise SoftDataUnavailable(key, e.reason) from e
    if raw is None:
        return None

    try:
        data = _decode(raw, source.config.encoding)
    except (UnicodeDecodeError, ValueError) as e:
        raise SoftDataUnavailable(key, f"invalid JSON: {e}") from e
    return OrderingSpec.from_dict(data)


def load_ordering(source: DataSource, key: str = ORDERING_KEY) -> Optional[OrderingSpec]:
    """Load the ordering document; None on absence or any failure."""
    try:
        ordering = read_ordering(source, key)
    except SoftDataUnavailable as e:
        logger.warning(f"Falling back to derived facet order: {e}")
        return None

    if ordering is None:
        logger.info(f"No ordering document at {source.describe(key)}, deriving facet order")
    return ordering


def source_for(location: str, timeout: float = 30.0) -> DataSource:
    """Pick a source for a directory path or an http(s) base URL."""
    config = SourceConfig(base=location, timeout=timeout)
    if location.startswith(("http://", "https://")):
        return HttpSource(config)
    return FileSource(config)


__all__ = [
    "DATA_KEY",
    "ORDERING_KEY",
    "load_dataset",
    "read_ordering",
    "load_ordering",
    "source_for",
]
