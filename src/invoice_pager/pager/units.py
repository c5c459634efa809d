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

CSS_PX_PER_INCH = 96.0
MM_PER_INCH = 25.4

# CSS reference pixels per millimetre (~3.7795275591).
PX_PER_MM = CSS_PX_PER_INCH / MM_PER_INCH


def mm_to_px(mm: float) -> float:
    return mm * PX_PER_MM
