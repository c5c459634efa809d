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

from collections.abc import Sequence
from enum import Enum
from typing import TypeVar

from .capacity import PageCapacities, scan_position
from .packing import normalize_height, paginate_by_heights, paginate_by_heights_with_extras
from .types import Extras, Page, PagerConfig

_T = TypeVar("_T")


class SummaryPlacement(Enum):
    INLINE = "inline"
    TRAILING_PAGE = "trailing_page"


def paginate(
    rows: Sequence[object],
    config: PagerConfig,
    extras: Extras | None = None,
) -> list[Page]:
    """Partition measured row heights into pages.

    Pure: the same rows, config and extras always give the same partition.
    Without extras a single uniform capacity is used.
    """
    if extras is None:
        return paginate_by_heights(rows, config)
    return paginate_by_heights_with_extras(rows, config, extras.top_px, extras.bottom_px)


def build_pages(items: Sequence[_T], pages: Sequence[Sequence[int]]) -> list[list[_T]]:
    return [[items[idx] for idx in page] for page in pages]


def page_height_px(heights: Sequence[object], page: Sequence[int]) -> float:
    return sum(normalize_height(heights[idx]) for idx in page)


def place_summary(
    pages: Sequence[Sequence[int]],
    heights: Sequence[object],
    capacities: PageCapacities,
    notes_px: float = 0.0,
) -> SummaryPlacement:
    """Decide whether totals, payment details and notes fit under the last page's rows.

    ``capacities.last`` already excludes the bottom extras; a single page is also charged
    the damped top block through ``capacities.sole``. Notes are measured separately.
    """
    if not pages:
        return SummaryPlacement.INLINE
    used = page_height_px(heights, pages[-1]) + normalize_height(notes_px)
    if used <= capacities.summary_capacity(len(pages)):
        return SummaryPlacement.INLINE
    return SummaryPlacement.TRAILING_PAGE


def oversized_rows(
    heights: Sequence[object],
    pages: Sequence[Sequence[int]],
    capacities: PageCapacities,
) -> list[int]:
    oversized: list[int] = []
    for page_idx, page in enumerate(pages):
        # Compare against the budget the row was packed with, not the last-page one.
        capacity = capacities.for_position(scan_position(page_idx))
        for idx in page:
            if normalize_height(heights[idx]) > capacity:
                oversized.append(idx)
    return oversized
