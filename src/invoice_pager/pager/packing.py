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

import math
from collections.abc import Callable, Sequence

from .balance import balance_last_page
from .capacity import compute_capacities, scan_position, uniform_capacity_px
from .estimate import estimate_row_height_px
from .types import Page, PagerConfig

__all__ = [
    "normalize_height",
    "paginate_by_heights",
    "paginate_by_heights_with_extras",
    "paginate_fixed",
    "paginate_items",
]


def normalize_height(value: object) -> float:
    """Coerce a row height to a finite, non-negative float (anything else is 0)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    height = float(value)
    if not math.isfinite(height) or height < 0:
        return 0.0
    return height


def _greedy_pack(
    heights: Sequence[float],
    capacity_for_page: Callable[[int], float],
) -> list[Page]:
    pages: list[Page] = []
    page: Page = []
    acc = 0.0
    capacity = capacity_for_page(0)
    for idx, height in enumerate(heights):
        # An empty page always accepts the row, so oversized rows cannot stall the scan.
        if page and acc + height > capacity:
            pages.append(page)
            page = []
            acc = 0.0
            capacity = capacity_for_page(len(pages))
        acc += height
        page.append(idx)
    if page:
        pages.append(page)
    return pages


def paginate_by_heights(heights_px: Sequence[object], config: PagerConfig) -> list[Page]:
    heights = [normalize_height(value) for value in heights_px]
    capacity = uniform_capacity_px(config)
    pages = _greedy_pack(heights, lambda _page_idx: capacity)
    return balance_last_page(pages, config.min_last_page_rows)


def paginate_by_heights_with_extras(
    heights_px: Sequence[object],
    config: PagerConfig,
    extra_top_px: float = 0.0,
    extra_bottom_px: float = 0.0,
) -> list[Page]:
    heights = [normalize_height(value) for value in heights_px]
    capacities = compute_capacities(
        config,
        extra_top_px=normalize_height(extra_top_px),
        extra_bottom_px=normalize_height(extra_bottom_px),
    )
    pages = _greedy_pack(
        heights,
        lambda page_idx: capacities.for_position(scan_position(page_idx)),
    )
    return balance_last_page(pages, config.min_last_page_rows)


def paginate_items(items: Sequence[object], config: PagerConfig) -> list[Page]:
    heights = [estimate_row_height_px(item) for item in items]
    capacity = uniform_capacity_px(config)
    pages = _greedy_pack(heights, lambda _page_idx: capacity)
    return balance_last_page(pages, config.min_last_page_rows)


def paginate_fixed(length: int, per_page: int) -> list[Page]:
    per_page = max(1, int(per_page))
    return [
        list(range(start, min(start + per_page, length)))
        for start in range(0, max(0, int(length)), per_page)
    ]
