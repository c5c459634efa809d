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
from pathlib import Path

from ..core.models import InvoiceDocument
from ..core.validation import read_json, require_dict, require_list
from ..pager.estimate import estimate_row_height_px
from ..pager.packing import normalize_height
from .types import Measurement


def _align_heights(heights: Sequence[object], count: int) -> tuple[float, ...]:
    aligned = [normalize_height(value) for value in heights[:count]]
    aligned.extend(0.0 for _ in range(count - len(aligned)))
    return tuple(aligned)


@dataclass(frozen=True)
class FixtureMeasurer:
    """Pre-computed heights, e.g. from an external renderer or a test fixture.

    Row heights are aligned to the document: extra entries are ignored and
    missing ones count as zero.
    """

    row_heights_px: tuple[object, ...]
    top_block_px: float = 0.0
    bottom_block_px: float = 0.0
    notes_px: float = 0.0

    def measure(self, document: InvoiceDocument) -> Measurement:
        return Measurement(
            row_heights_px=_align_heights(self.row_heights_px, len(document.line_items)),
            top_block_px=normalize_height(self.top_block_px),
            bottom_block_px=normalize_height(self.bottom_block_px),
            notes_px=normalize_height(self.notes_px),
        )


@dataclass(frozen=True)
class EstimateMeasurer:
    """Heuristic heights for hosts without a layout engine."""

    top_block_px: float = 0.0
    bottom_block_px: float = 0.0
    notes_px: float = 0.0

    def measure(self, document: InvoiceDocument) -> Measurement:
        return Measurement(
            row_heights_px=tuple(estimate_row_height_px(item) for item in document.line_items),
            top_block_px=normalize_height(self.top_block_px),
            bottom_block_px=normalize_height(self.bottom_block_px),
            notes_px=normalize_height(self.notes_px),
        )


def load_heights_fixture(path: str | Path) -> FixtureMeasurer:
    """Load ``[h0, h1, ...]`` or ``{"rows": [...], "top": .., "bottom": .., "notes": ..}``."""
    data = read_json(path, label="heights fixture")
    if isinstance(data, list):
        return FixtureMeasurer(row_heights_px=tuple(data))
    fixture = require_dict(data, label="heights fixture")
    rows = require_list(fixture.get("rows", []), label="heights fixture rows")
    return FixtureMeasurer(
        row_heights_px=tuple(rows),
        top_block_px=normalize_height(fixture.get("top", 0.0)),
        bottom_block_px=normalize_height(fixture.get("bottom", 0.0)),
        notes_px=normalize_height(fixture.get("notes", 0.0)),
    )
