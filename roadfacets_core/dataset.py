"""RoadFacets Dataset - Immutable Record Collection.

The dataset is created once at load time and never mutated; every
filtering pass works on views of it.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union, overload

from roadfacets_core.errors import MalformedRecord

logger = logging.getLogger(__name__)

# Display fields that are never offered as facets
FIXED_FIELDS: Tuple[str, ...] = ("document_label", "year", "title", "institution", "url")

# Fixed fields a well-formed record is expected to carry (url is optional)
REQUIRED_FIELDS: Tuple[str, ...] = ("document_label", "year", "title", "institution")


class Record(Mapping):
    """A read-only bibliographic record.

    Attributes:
        position: Index of the record in the loaded collection
    """

    __slots__ = ("_fields", "position")

    def __init__(self, fields: Optional[Mapping] = None, position: int = 0):
        """Initialize record.

        Args:
            fields: Field values (copied)
            position: Position in the original collection
        """
        self._fields: Dict[str, Any] = dict(fields or {})
        self.position = position

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        label = self._fields.get("document_label", "")
        return f"Record({label!r}, pos={self.position})"

    def missing_fields(self, required: Iterable[str] = REQUIRED_FIELDS) -> List[str]:
        """Return required fields that are absent or null."""
        return [name for name in required if self._fields.get(name) is None]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return dict(self._fields)


class Dataset(Sequence):
    """The immutable original record collection."""

    def __init__(self, records: Optional[Iterable[Record]] = None, source: str = ""):
        """Initialize dataset.

        Args:
            records: Records in original order
            source: Identifier of where the records came from
        """
        self._records: Tuple[Record, ...] = tuple(records or ())
        self.source = source

    @overload
    def __getitem__(self, index: int) -> Record: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Record, ...]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Record, Tuple[Record, ...]]:
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"Dataset({len(self._records)} records, source={self.source!r})"

    def find(self, field_name: str, value: Any) -> Optional[Record]:
        """Return the first record whose field equals value."""
        for record in self._records:
            if record.get(field_name) == value:
                return record
        return None

    @classmethod
    def from_list(
        cls,
        rows: Iterable[Any],
        source: str = "",
        required: Iterable[str] = REQUIRED_FIELDS,
    ) -> "Dataset":
        """Build a dataset from decoded JSON rows.

        Rows that are not objects are skipped; objects missing required
        fixed fields are kept and displayed with empty values.

        Args:
            rows: Decoded JSON array items
            source: Source identifier
            required: Fixed fields each record should carry

        Returns:
            Dataset
        """
        required = tuple(required)
        records: List[Record] = []
        for position, row in enumerate(rows):
            if not isinstance(row, Mapping):
                err = MalformedRecord(position, f"expected object, got {type(row).__name__}")
                logger.warning(f"Skipping record: {err}")
                continue
            record = Record(row, position=position)
            missing = record.missing_fields(required)
            if missing:
                err = MalformedRecord(position, "missing fixed fields", missing)
                logger.warning(f"{err}: {', '.join(missing)}")
            records.append(record)
        logger.info(f"Loaded {len(records)} records from {source or 'memory'}")
        return cls(records, source=source)


__all__ = ["Record", "Dataset", "FIXED_FIELDS", "REQUIRED_FIELDS"]
