"""RoadFacets Browser Engine - Faceted Table Session.

The FacetBrowser holds the loaded dataset, its derived facet structure
and the current FilterState. Every user action replaces the FilterState
and runs one refresh (filter, sort, disabled inference) before returning
the new view.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Optional, Tuple, Union

from roadfacets_core.dataset import FIXED_FIELDS, Dataset
from roadfacets_core.errors import DatasetUnavailable
from roadfacets_core.facets.builder import ButtonKey, FacetGroup, derive_facets, iter_buttons
from roadfacets_core.facets.ordering import OrderingSpec
from roadfacets_core.highlight import correlate
from roadfacets_core.query.executor import FilterExecutor
from roadfacets_core.query.inference import compute_disabled
from roadfacets_core.query.state import FilterState
from roadfacets_core.sorting import sort_records
from roadfacets_core.storage.backend import DataSource
from roadfacets_core.storage.loader import DATA_KEY, ORDERING_KEY, load_dataset, load_ordering
from roadfacets_core.table import DEFAULT_URL_WIDTH, ELLIPSIS, TableRow, build_rows

logger = logging.getLogger(__name__)


class BrowserState(Enum):
    """Browser state enumeration."""

    INITIALIZING = auto()
    READY = auto()
    UNAVAILABLE = auto()  # Dataset could not be loaded


@dataclass
class BrowserConfig:
    """Browser configuration.

    Attributes:
        data_key: Name of the record collection document
        ordering_key: Name of the optional ordering document
        sort_field: Field the table is sorted by after each pass
        sort_ascending: Sort direction
        fixed_fields: Fields never offered as facets
        url_display_width: Characters of a URL shown before truncation
        ellipsis: Suffix of a truncated URL
    """

    data_key: str = DATA_KEY
    ordering_key: str = ORDERING_KEY
    sort_field: str = "document_label"
    sort_ascending: bool = True
    fixed_fields: Tuple[str, ...] = FIXED_FIELDS
    url_display_width: int = DEFAULT_URL_WIDTH
    ellipsis: str = ELLIPSIS


@dataclass
class BrowserStats:
    """Browser statistics.

    Attributes:
        refresh_count: Filter/disabled recomputations run
        last_refresh_ms: Duration of the latest refresh
        load_ms: Time spent loading and deriving facets
    """

    refresh_count: int = 0
    last_refresh_ms: float = 0.0
    load_ms: float = 0.0


@dataclass
class BrowserView:
    """Snapshot handed to the presentation layer.

    Attributes:
        records: Matching records, sorted
        rows: Display rows for records
        active: Current selections
        disabled: (key, value) -> would-disable flag
        total: Records in the dataset
        error: Message when the dataset is unavailable
    """

    records: List[Mapping] = field(default_factory=list)
    rows: List[TableRow] = field(default_factory=list)
    active: FilterState = field(default_factory=FilterState)
    disabled: Dict[ButtonKey, bool] = field(default_factory=dict)
    total: int = 0
    error: Optional[str] = None

    @property
    def matched(self) -> int:
        return len(self.records)

    @property
    def no_data(self) -> bool:
        """True when the table has no rows to show."""
        return not self.records

    def is_disabled(self, key: str, value: str) -> bool:
        return self.disabled.get((key, value), False)

    def is_active(self, key: str, value: str) -> bool:
        return self.active.is_active(key, value)


class FacetBrowser:
    """Faceted table session.

    Coordinates facet derivation, filtering, sorting and disabled-state
    inference over one immutable dataset.
    """

    def __init__(
        self,
        dataset: Optional[Dataset] = None,
        ordering: Optional[OrderingSpec] = None,
        config: Optional[BrowserConfig] = None,
    ):
        """Initialize browser.

        Args:
            dataset: Loaded records
            ordering: Optional explicit facet ordering
            config: Browser configuration
        """
        self.config = config or BrowserConfig()
        self._state = BrowserState.INITIALIZING
        self._dataset = dataset if dataset is not None else Dataset()
        self._ordering = ordering
        self._filter_state = FilterState()
        self._error: Optional[str] = None
        self.stats = BrowserStats()

        start = time.time()
        self._facets: List[FacetGroup] = derive_facets(
            self._dataset, ordering, self.config.fixed_fields
        )
        self._buttons = set(iter_buttons(self._facets))
        self._executor = FilterExecutor(self._dataset)
        self.stats.load_ms = (time.time() - start) * 1000

        self._state = BrowserState.READY
        self._view = self._refresh()
        logger.info(f"Browser ready: {len(self._dataset)} records, {len(self._buttons)} buttons")

    @classmethod
    def open(cls, source: DataSource, config: Optional[BrowserConfig] = None) -> "FacetBrowser":
        """Load dataset and ordering from a source.

        A dataset failure yields a browser in the UNAVAILABLE state whose
        view carries the error message.
        """
        config = config or BrowserConfig()
        try:
            dataset = load_dataset(source, config.data_key)
        except DatasetUnavailable as e:
            logger.error(f"Cannot render table: {e}")
            return cls.unavailable(str(e), config)

        ordering = load_ordering(source, config.ordering_key)
        return cls(dataset, ordering, config)

    @classmethod
    def unavailable(cls, message: str, config: Optional[BrowserConfig] = None) -> "FacetBrowser":
        """Browser showing an error state instead of a table."""
        browser = cls(Dataset(), None, config)
        browser._state = BrowserState.UNAVAILABLE
        browser._error = message
        browser._view = BrowserView(error=message)
        return browser

    def _refresh(self) -> BrowserView:
        """Run one filter, sort and disabled-inference pass."""
        start = time.time()
        state = self._filter_state

        matched = self._executor.execute(state)
        records = sort_records(matched, self.config.sort_field, self.config.sort_ascending)
        disabled = compute_disabled(self._dataset, state, self._facets, self._executor)

        self.stats.refresh_count += 1
        self.stats.last_refresh_ms = (time.time() - start) * 1000
        logger.debug(
            f"Refresh #{self.stats.refresh_count}: {len(records)}/{len(self._dataset)} "
            f"records in {self.stats.last_refresh_ms:.1f}ms"
        )

        return BrowserView(
            records=records,
            rows=build_rows(records, self.config.url_display_width, self.config.ellipsis),
            active=state,
            disabled=disabled,
            total=len(self._dataset),
            error=self._error,
        )

    def _apply(self, state: FilterState) -> BrowserView:
        if self._state == BrowserState.UNAVAILABLE:
            return self._view
        self._filter_state = state
        self._view = self._refresh()
        return self._view

    def toggle(self, key: str, value: str) -> BrowserView:
        """Activate or deactivate one facet button.

        Args:
            key: Facet key
            value: Facet value

        Returns:
            The refreshed view
        """
        if (key, value) not in self._buttons:
            logger.debug(f"Toggling unknown button {key}={value!r}")
        return self._apply(self._filter_state.toggled(key, value))

    def set_filter(self, state: Union[FilterState, Mapping]) -> BrowserView:
        """Replace the whole selection with a single refresh."""
        return self._apply(FilterState.coerce(state))

    def clear(self, key: str) -> BrowserView:
        """Remove every active value of a key in a single refresh."""
        return self._apply(self._filter_state.cleared(key))

    def reset(self) -> BrowserView:
        """Remove every selection."""
        return self._apply(FilterState())

    def hover(self, record: Mapping) -> Dict[ButtonKey, bool]:
        """Buttons matching a hovered record. Does not refresh."""
        return correlate(record, self._facets)

    def get_stats(self) -> Dict[str, Any]:
        return {
            "records": len(self._dataset),
            "facets": sum(len(g.facets) for g in self._facets),
            "buttons": len(self._buttons),
            "refresh_count": self.stats.refresh_count,
            "last_refresh_ms": self.stats.last_refresh_ms,
            "load_ms": self.stats.load_ms,
            "records_scanned": self._executor.stats.records_scanned,
        }

    @property
    def state(self) -> BrowserState:
        """Get current browser state."""
        return self._state

    @property
    def filter_state(self) -> FilterState:
        return self._filter_state

    @property
    def facets(self) -> List[FacetGroup]:
        return self._facets

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    @property
    def ordering(self) -> Optional[OrderingSpec]:
        return self._ordering

    @property
    def view(self) -> BrowserView:
        return self._view


__all__ = [
    "FacetBrowser",
    "BrowserConfig",
    "BrowserState",
    "BrowserStats",
    "BrowserView",
]
