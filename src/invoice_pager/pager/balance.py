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

from .types import Page


def balance_last_page(pages: Sequence[Sequence[int]], min_last_page_rows: int) -> list[Page]:
    """Borrow a single row from the previous page when the trailing page is too short.

    This is one nudge, not a rebalance: a last page that is still below the
    minimum afterwards is left as is. A donor page emptied by the move is dropped
    rather than kept as an empty sheet, so every returned page holds at least one row.
    """
    balanced = [list(page) for page in pages]
    if len(balanced) < 2:
        return balanced
    last = balanced[-1]
    if len(last) >= min_last_page_rows:
        return balanced
    donor = balanced[-2]
    if not donor:
        return balanced
    last.insert(0, donor.pop())
    if not donor:
        del balanced[-2]
    return balanced
