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

from ...config import AppConfig
from ...core.models import InvoiceDocument
from ...measure.browser import BrowserMeasurer
from ...measure.measurers import EstimateMeasurer, load_heights_fixture
from ...measure.orchestrator import PaginationOrchestrator
from ...measure.types import Measurer, PaginationResult
from ...pager.pipeline import oversized_rows
from ...pager.types import PaginationMode
from ..core.log import _warn


def select_measurer(
    config: AppConfig,
    *,
    heights: Path | None = None,
    estimate: bool = False,
) -> Measurer:
    if heights is not None:
        return load_heights_fixture(heights)
    if estimate:
        return EstimateMeasurer()
    return BrowserMeasurer(
        config=config.pager,
        page_width_mm=config.page_width_mm,
        template_path=config.template_path,
    )


def resolve_mode(
    config: AppConfig,
    mode: str | None,
    per_page: int | None,
    *,
    quiet: bool,
) -> tuple[PaginationMode, int]:
    resolved: PaginationMode = config.mode
    if mode == "fixed":
        resolved = "fixed"
    elif mode == "measured":
        resolved = "measured"
    if per_page is not None and per_page <= 0:
        raise ValueError("--per-page must be a positive integer")
    if per_page is not None and resolved == "measured":
        _warn("--per-page only applies in fixed mode; ignoring it", quiet=quiet)
    return resolved, per_page or config.items_per_page


def run_pagination(
    document: InvoiceDocument,
    config: AppConfig,
    *,
    mode: PaginationMode,
    items_per_page: int,
    measurer: Measurer,
    quiet: bool,
) -> PaginationResult:
    orchestrator = PaginationOrchestrator(config.pager, measurer)
    result = orchestrator.refresh(document, mode=mode, items_per_page=items_per_page)
    if result.measurement is not None and result.capacities is not None:
        heights = result.measurement.row_heights_px
        for idx in oversized_rows(heights, result.pages, result.capacities):
            _warn(
                f"line item {idx} is taller than its page capacity and will overflow",
                quiet=quiet,
            )
    return result
