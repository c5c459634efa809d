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

ROW_BASE_HEIGHT_PX = 28.0
ROW_LINE_HEIGHT_PX = 16.0
ROW_CHARS_PER_LINE = 70


def row_text(row: object) -> str:
    if isinstance(row, str):
        return row
    name = getattr(row, "name", None)
    if isinstance(name, str):
        return name
    return ""


def wrapped_lines(text: str, *, chars_per_line: int = ROW_CHARS_PER_LINE) -> int:
    return max(1, math.ceil(len(text) / chars_per_line))


def estimate_row_height_px(row: object) -> float:
    """Heuristic row height used when no rendered measurement is available.

    One base line plus a fixed increment for every wrapped line after the first.
    """
    lines = wrapped_lines(row_text(row))
    return ROW_BASE_HEIGHT_PX + (lines - 1) * ROW_LINE_HEIGHT_PX
