"""RoadFacets Table - Display Rows for the Records Table.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Iterable, List

from roadfacets_core.facets.tags import text_of

DEFAULT_URL_WIDTH = 60
ELLIPSIS = "…"


def truncate(text: str, width: int = DEFAULT_URL_WIDTH, ellipsis: str = ELLIPSIS) -> str:
    """Cut text to width characters, appending ellipsis when cut."""
    if len(text) > width:
        return text[:width] + ellipsis
    return text


@dataclass(frozen=True)
class TableRow:
    """One rendered table row.

    Attributes:
        document_label: Label cell
        year: Year cell
        title: Title cell
        institution: Institution cell
        url: Link target ('' when absent)
        display_url: Link text, truncated
    """

    document_label: str = ""
    year: str = ""
    title: str = ""
    institution: str = ""
    url: str = ""
    display_url: str = ""

    @classmethod
    def from_record(
        cls,
        record: Mapping,
        width: int = DEFAULT_URL_WIDTH,
        ellipsis: str = ELLIPSIS,
    ) -> "TableRow":
        """Build a row; missing fields display as empty strings."""
        url = text_of(record.get("url"))
        return cls(
            document_label=text_of(record.get("document_label")),
            year=text_of(record.get("year")),
            title=text_of(record.get("title")),
            institution=text_of(record.get("institution")),
            url=url,
            display_url=truncate(url, width, ellipsis),
        )

    def cells(self) -> List[str]:
        return [self.document_label, self.year, self.title, self.institution, self.display_url]


COLUMNS = ("document_label", "year", "title", "institution", "url")


def build_rows(
    records: Iterable[Mapping],
    width: int = DEFAULT_URL_WIDTH,
    ellipsis: str = ELLIPSIS,
) -> List[TableRow]:
    return [TableRow.from_record(r, width, ellipsis) for r in records]


__all__ = ["TableRow", "COLUMNS", "DEFAULT_URL_WIDTH", "ELLIPSIS", "build_rows", "truncate"]
