#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

from pathlib import Path

import typer

from ...config import load_app_config
from ...core.validation import load_invoice
from ..core.common import _ctx_value, _mode_callback, _run_cli
from ..flows.pagination import resolve_mode, run_pagination, select_measurer
from ..ui.summary import print_pagination_summary

_PAGINATE_HELP = (
    "Split an invoice's line items into pages and print the partition.\n\n"
    "Examples:\n"
    "  invoice-pager paginate invoice.json\n"
    "  invoice-pager paginate invoice.json --mode fixed --per-page 12\n"
    "  invoice-pager paginate invoice.json --heights heights.json\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_PAGINATE_HELP)(paginate)


def paginate(
    ctx: typer.Context,
    invoice: Path = typer.Argument(..., help="Invoice JSON file."),
    mode: str | None = typer.Option(
        None,
        "--mode",
        "-m",
        help="Pagination mode: measured or fixed (defaults to the config).",
        callback=_mode_callback,
        rich_help_panel="Pagination",
    ),
    per_page: int | None = typer.Option(
        None,
        "--per-page",
        help="Rows per page in fixed mode.",
        rich_help_panel="Pagination",
    ),
    heights: Path | None = typer.Option(
        None,
        "--heights",
        help="JSON file with pre-measured row and block heights (skips the browser).",
        rich_help_panel="Measurement",
    ),
    estimate: bool = typer.Option(
        False,
        "--estimate",
        help="Use heuristic row heights instead of rendering the document.",
        rich_help_panel="Measurement",
    ),
) -> None:
    quiet_value = bool(_ctx_value(ctx, "quiet"))
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        config = load_app_config(_ctx_value(ctx, "config"))
        document = load_invoice(invoice)
        resolved_mode, items_per_page = resolve_mode(config, mode, per_page, quiet=quiet_value)
        measurer = select_measurer(config, heights=heights, estimate=estimate)
        result = run_pagination(
            document,
            config,
            mode=resolved_mode,
            items_per_page=items_per_page,
            measurer=measurer,
            quiet=quiet_value,
        )
        print_pagination_summary(result, item_count=len(document.line_items), quiet=quiet_value)

    _run_cli(_run, debug=debug_value)
