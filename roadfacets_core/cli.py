"""
roadfacets: command line viewer for faceted record collections.

Usage:
  roadfacets <command> PATH [options]

Commands:
  facets      Print the facet groups, keys and buttons.
  table       Print the filtered table and the buttons that would empty it.
  highlight   Print the buttons correlating with one record.

PATH is a directory holding data.json (and optionally ordering.json),
or an http(s):// base URL serving them.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from roadfacets_core import __version__
from roadfacets_core.engine import BrowserConfig, BrowserState, BrowserView, FacetBrowser
from roadfacets_core.highlight import highlighted
from roadfacets_core.query.state import FilterState
from roadfacets_core.storage.loader import source_for
from roadfacets_core.table import COLUMNS

console = Console(width=200)

# Button styles per state
ACTIVE_STYLE = "bold green"
DISABLED_STYLE = "dim strike"
HIGHLIGHT_STYLE = "bold yellow"


def _parse_filter(text: str) -> Tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    return key.strip(), value.strip()


def _open(args: argparse.Namespace) -> FacetBrowser:
    config = BrowserConfig(
        sort_field=getattr(args, "sort", None) or "document_label",
        sort_ascending=not getattr(args, "desc", False),
    )
    with source_for(args.path, timeout=args.timeout) as source:
        browser = FacetBrowser.open(source, config)
    if browser.state == BrowserState.UNAVAILABLE:
        console.print(f"[red]Dataset unavailable:[/red] {escape(browser.view.error)}")
        sys.exit(1)
    return browser


def _buttons_table(browser: FacetBrowser, view: BrowserView, marks: Optional[set] = None) -> Table:
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Group", style="cyan")
    table.add_column("Key", style="magenta")
    table.add_column("Buttons")

    for group in browser.facets:
        for facet in group.facets:
            line = Text()
            for i, fv in enumerate(facet.values):
                if i:
                    line.append("  ")
                style = ""
                if view.is_active(facet.key, fv.value):
                    style = ACTIVE_STYLE
                elif view.is_disabled(facet.key, fv.value):
                    style = DISABLED_STYLE
                if marks and (facet.key, fv.value) in marks:
                    style = HIGHLIGHT_STYLE
                line.append(f"{fv.value} ({fv.count})", style=style)
            table.add_row(group.name, facet.key, line)
    return table


def cmd_facets(args: argparse.Namespace) -> None:
    browser = _open(args)
    console.print(_buttons_table(browser, browser.view))


def cmd_table(args: argparse.Namespace) -> None:
    browser = _open(args)
    view = browser.set_filter(FilterState.from_pairs(args.filter or []))

    table = Table(box=box.SIMPLE_HEAVY, show_lines=False)
    for column in COLUMNS:
        table.add_column(column, no_wrap=column == "document_label", overflow="fold")
    for row in view.rows:
        table.add_row(*row.cells())

    if view.no_data:
        console.print("[yellow]No records match the selected filters.[/yellow]")
    else:
        console.print(table)
    console.print(f"{view.matched} / {view.total} records")
    console.print(_buttons_table(browser, view))


def cmd_highlight(args: argparse.Namespace) -> None:
    browser = _open(args)
    record = browser.dataset.find("document_label", args.label)
    if record is None:
        console.print(f"[red]No record labelled {escape(repr(args.label))}[/red]")
        sys.exit(1)
    marks = set(highlighted(record, browser.facets))
    console.print(_buttons_table(browser, browser.view, marks))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roadfacets",
        description="RoadFacets: faceted record browser.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"roadfacets {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")

    subparsers = parser.add_subparsers(title="commands", metavar="<command>", dest="command")
    subparsers.required = True

    def add_common(p: argparse.ArgumentParser) -> None:
        p.add_argument("path", help="directory or base URL with data.json")
        p.add_argument("--timeout", type=float, default=30.0, help="network timeout (s)")

    p = subparsers.add_parser("facets", help="print facet structure")
    add_common(p)
    p.set_defaults(func=cmd_facets)

    p = subparsers.add_parser("table", help="print filtered table")
    add_common(p)
    p.add_argument(
        "-f", "--filter", type=_parse_filter, action="append", metavar="KEY=VALUE",
        help="activate a facet button (repeatable)",
    )
    p.add_argument("--sort", default="document_label", help="sort field")
    p.add_argument("--desc", action="store_true", help="sort descending")
    p.set_defaults(func=cmd_table)

    p = subparsers.add_parser("highlight", help="print buttons matching a record")
    add_common(p)
    p.add_argument("label", help="document_label of the record")
    p.set_defaults(func=cmd_highlight)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    args.func(args)


if __name__ == "__main__":
    main()
