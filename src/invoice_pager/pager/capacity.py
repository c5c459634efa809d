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

from dataclasses import dataclass
from enum import Enum

from .types import PagerConfig
from .units import mm_to_px

# Page content padding (top + bottom), independent of header/footer.
PADDING_PX = 40.0

# Date / page-number line drawn under the last page's rows.
PAGE_FOOTER_RESERVE_PX = 24.0

# Address panels rarely fill their layout box, so only part of the measured
# top block is charged against the first page.
TOP_EXTRA_DAMPING = 0.6


class PagePosition(Enum):
    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"


@dataclass(frozen=True)
class PageCapacities:
    first: float
    middle: float
    last: float
    # A single page carries both the top and the bottom blocks.
    sole: float | None = None

    def for_position(self, position: PagePosition) -> float:
        if position is PagePosition.FIRST:
            return self.first
        if position is PagePosition.LAST:
            return self.last
        return self.middle

    def summary_capacity(self, page_count: int) -> float:
        if page_count == 1 and self.sole is not None:
            return self.sole
        return self.last


def scan_position(page_index: int) -> PagePosition:
    """Position used while scanning forward; the last page is unknown until the scan ends."""
    if page_index <= 0:
        return PagePosition.FIRST
    return PagePosition.MIDDLE


def final_position(page_index: int, page_count: int) -> PagePosition:
    if page_index >= page_count - 1:
        return PagePosition.LAST
    return scan_position(page_index)


def uniform_capacity_px(config: PagerConfig) -> float:
    page_px = mm_to_px(config.page_height_mm)
    header_px = mm_to_px(config.header_height_mm)
    footer_px = mm_to_px(config.footer_height_mm)
    return max(0.0, page_px - header_px - footer_px)


def compute_capacities(
    config: PagerConfig,
    extra_top_px: float = 0.0,
    extra_bottom_px: float = 0.0,
) -> PageCapacities:
    page_px = mm_to_px(config.page_height_mm)
    first = max(0.0, page_px - PADDING_PX - extra_top_px * TOP_EXTRA_DAMPING)
    middle = max(0.0, page_px - PADDING_PX)
    last = max(0.0, page_px - PADDING_PX - PAGE_FOOTER_RESERVE_PX - extra_bottom_px)
    sole = max(0.0, last - extra_top_px * TOP_EXTRA_DAMPING)
    return PageCapacities(first=first, middle=middle, last=last, sole=sole)
