"""RoadFacets Tags - Field Value Normalization.

A facet field may hold a scalar, a list of scalars, or a string of
comma-separated tokens. All three are read as a set of tags.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, FrozenSet, List

TAG_SEPARATOR = ","

_MULTI_VALUED = (list, tuple, set, frozenset)


def text_of(value: Any) -> str:
    """Textual form of a field value as it appears on a button or cell."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, _MULTI_VALUED):
        return ", ".join(text_of(v) for v in value)
    if isinstance(value, float) and value.is_integer():
        # JSON numbers print without a trailing ".0"
        return str(int(value))
    return str(value)


def extract_tags(value: Any) -> List[str]:
    """Normalize a field value into its list of tags.

    Lists are flattened, comma-bearing strings are split, every tag is
    trimmed and empty tags are dropped. Order of first appearance is kept.
    """
    if value is None:
        return []

    if isinstance(value, _MULTI_VALUED):
        raw = [text_of(v) for v in value if v is not None]
    elif isinstance(value, str) and TAG_SEPARATOR in value:
        raw = value.split(TAG_SEPARATOR)
    else:
        raw = [text_of(value)]

    tags: List[str] = []
    for item in raw:
        tag = item.strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def record_tags(record: Mapping, key: str) -> FrozenSet[str]:
    """Case-sensitive tag set of a record for one facet key."""
    return frozenset(extract_tags(record.get(key)))


def folded_tags(record: Mapping, key: str) -> FrozenSet[str]:
    """Lowercased tag set of a record, used for hover correlation."""
    return frozenset(tag.lower() for tag in extract_tags(record.get(key)))


__all__ = ["TAG_SEPARATOR", "text_of", "extract_tags", "record_tags", "folded_tags"]
