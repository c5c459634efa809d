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
from typing import Literal

Page = list[int]
PaginationMode = Literal["measured", "fixed"]

PAGINATION_MODES: tuple[PaginationMode, ...] = ("measured", "fixed")


@dataclass(frozen=True)
class PagerConfig:
    """Physical page geometry for a single pagination run (millimetres)."""

    page_height_mm: float
    header_height_mm: float
    footer_height_mm: float
    min_last_page_rows: int


@dataclass(frozen=True)
class Extras:
    """Measured block heights charged against the first (top) and last (bottom) page."""

    top_px: float = 0.0
    bottom_px: float = 0.0
