#!/usr/bin/env python3
from __future__ import annotations

from ...measure.types import PaginationResult
from . import build_kv_table, build_pages_table, console, panel


def print_pagination_summary(
    result: PaginationResult,
    *,
    item_count: int,
    quiet: bool,
) -> None:
    if quiet:
        return
    rows = [
        ("Mode", result.mode),
        ("Line items", str(item_count)),
        ("Pages", str(result.page_count)),
    ]
    if result.capacities is not None:
        capacities = result.capacities
        rows.append(
            (
                "Capacity (px)",
                f"first {capacities.first:.1f} / middle {capacities.middle:.1f} "
                f"/ last {capacities.last:.1f}",
            )
        )
        rows.append(("Totals block", result.summary.value.replace("_", " ")))
    console.print(panel("Pagination", build_kv_table(rows)))
    if result.pages:
        console.print(build_pages_table(result))
