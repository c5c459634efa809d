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
from dataclasses import dataclass
from typing import Protocol, TypeVar

from ..core.models import InvoiceDocument
from ..pager.capacity import PageCapacities
from ..pager.pipeline import SummaryPlacement, build_pages
from ..pager.types import Page, PaginationMode

_T = TypeVar("_T")

# Added to the measured totals + payment height before it is charged to the last page.
BOTTOM_SAFETY_MARGIN_PX = 10.0


@dataclass(frozen=True)
class Measurement:
    """Rendered heights (CSS px) read from a laid-out copy of the document."""

    row_heights_px: tuple[float, ...]
    top_block_px: float = 0.0
    bottom_block_px: float = 0.0
    notes_px: float = 0.0


class Measurer(Protocol):
    def measure(self, document: InvoiceDocument) -> Measurement: ...


@dataclass(frozen=True)
class PaginationResult:
    identity: str
    mode: PaginationMode
    pages: tuple[Page, ...]
    capacities: PageCapacities | None = None
    summary: SummaryPlacement = SummaryPlacement.INLINE
    measurement: Measurement | None = None

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def pages_of(self, items: Sequence[_T]) -> list[list[_T]]:
        return build_pages(items, self.pages)
