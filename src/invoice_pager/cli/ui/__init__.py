#!/usr/bin/env python3
from __future__ import annotations

from collections.abc import Sequence

from rich import box
from rich.panel import Panel
from rich.table import Table

from ...measure.types import PaginationResult
from ...pager.capacity import final_position
from ...pager.pipeline import page_height_px
from .state import UIContext, get_context, isatty, set_no_color

DEFAULT_CONTEXT = get_context()
THEME = DEFAULT_CONTEXT.theme
console = DEFAULT_CONTEXT.console
console_err = DEFAULT_CONTEXT.console_err


def panel(title: str, renderable, *, style: str = "panel") -> Panel:
    return Panel(
        renderable,
        title=title,
        title_align="left",
        border_style=style,
        box=box.ROUNDED,
        padding=(1, 2),
    )


def build_kv_table(rows: Sequence[tuple[str, str]], *, title: str | None = None) -> Table:
    table = Table(title=title, show_header=False, box=box.SIMPLE, show_lines=False)
    table.add_column("Field", style="bold", no_wrap=True)
    table.add_column("Value")
    for key, value in rows:
        table.add_row(str(key), str(value))
    return table


def _index_range(page: Sequence[int]) -> str:
    if not page:
        return "-"
    if len(page) == 1:
        return str(page[0])
    return f"{page[0]}-{page[-1]}"


def build_pages_table(result: PaginationResult) -> Table:
    heights = result.measurement.row_heights_px if result.measurement else None
    table = Table(box=box.SIMPLE_HEAD, show_lines=False)
    table.add_column("Page", justify="right", style="bold", no_wrap=True)
    table.add_column("Position", style="muted")
    table.add_column("Rows", justify="right")
    table.add_column("Indices", no_wrap=True)
    table.add_column("Height (px)", justify="right")
    total = len(result.pages)
    for page_idx, page in enumerate(result.pages):
        height = f"{page_height_px(heights, page):.1f}" if heights is not None else "-"
        table.add_row(
            str(page_idx + 1),
            final_position(page_idx, total).value,
            str(len(page)),
            _index_range(page),
            height,
        )
    return table


__all__ = [
    "THEME",
    "UIContext",
    "build_kv_table",
    "build_pages_table",
    "console",
    "console_err",
    "isatty",
    "panel",
    "set_no_color",
]
