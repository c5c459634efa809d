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

"""Feed measured heights into the pure paginator.

Every change to the line items or the mode starts a new run identified by
:func:`input_identity`. A measurement is only applied when it belongs to the
latest run; anything older is discarded so out-of-order results cannot
replace a newer partition.
"""

from __future__ import annotations

import hashlib
import json

from ..core.models import InvoiceDocument
from ..pager.capacity import compute_capacities
from ..pager.packing import paginate_fixed
from ..pager.pipeline import paginate, place_summary
from ..pager.types import PAGINATION_MODES, Extras, PagerConfig, PaginationMode
from .types import BOTTOM_SAFETY_MARGIN_PX, Measurement, Measurer, PaginationResult

DEFAULT_ITEMS_PER_PAGE = 10


def to_extras(measurement: Measurement) -> Extras:
    # Damping of the top block is applied by the capacity calculator, not here.
    return Extras(
        top_px=measurement.top_block_px,
        bottom_px=measurement.bottom_block_px + BOTTOM_SAFETY_MARGIN_PX,
    )


def input_identity(
    document: InvoiceDocument,
    mode: PaginationMode,
    items_per_page: int | None = None,
) -> str:
    payload = {
        "mode": mode,
        "items_per_page": items_per_page if mode == "fixed" else None,
        "items": [item.to_dict() for item in document.line_items],
        "blocks": [
            document.customer_name,
            document.from_details,
            document.customer_details,
            document.payment_details,
            document.note_details,
        ],
    }
    encoded = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
    return hashlib.sha256(encoded).hexdigest()


def paginate_measurement(
    identity: str,
    measurement: Measurement,
    config: PagerConfig,
) -> PaginationResult:
    extras = to_extras(measurement)
    heights = measurement.row_heights_px
    pages = paginate(heights, config, extras)
    capacities = compute_capacities(config, extras.top_px, extras.bottom_px)
    return PaginationResult(
        identity=identity,
        mode="measured",
        pages=tuple(pages),
        capacities=capacities,
        summary=place_summary(pages, heights, capacities, measurement.notes_px),
        measurement=measurement,
    )


class PaginationOrchestrator:
    def __init__(self, config: PagerConfig, measurer: Measurer) -> None:
        self.config = config
        self.measurer = measurer
        self._latest: str | None = None
        self._latest_mode: PaginationMode | None = None
        self._result: PaginationResult | None = None

    @property
    def result(self) -> PaginationResult | None:
        return self._result

    @property
    def latest_identity(self) -> str | None:
        return self._latest

    def is_current(self, identity: str) -> bool:
        return identity == self._latest

    def begin(
        self,
        document: InvoiceDocument,
        *,
        mode: PaginationMode = "measured",
        items_per_page: int | None = None,
    ) -> str:
        """Start a new run; fixed mode is resolved immediately without measurement."""
        if mode not in PAGINATION_MODES:
            raise ValueError(f"unknown pagination mode: {mode}")
        per_page = items_per_page if items_per_page is not None else DEFAULT_ITEMS_PER_PAGE
        identity = input_identity(document, mode, per_page)
        self._latest = identity
        self._latest_mode = mode
        if mode == "fixed":
            self._result = PaginationResult(
                identity=identity,
                mode="fixed",
                pages=tuple(paginate_fixed(len(document.line_items), per_page)),
            )
        return identity

    def apply(self, identity: str, measurement: Measurement) -> PaginationResult | None:
        """Apply a measurement for ``identity``; stale or fixed-mode runs return None."""
        if not self.is_current(identity) or self._latest_mode == "fixed":
            return None
        result = paginate_measurement(identity, measurement, self.config)
        self._result = result
        return result

    def refresh(
        self,
        document: InvoiceDocument,
        *,
        mode: PaginationMode = "measured",
        items_per_page: int | None = None,
    ) -> PaginationResult:
        identity = self.begin(document, mode=mode, items_per_page=items_per_page)
        if mode == "fixed" and self._result is not None:
            return self._result
        measurement = self.measurer.measure(document)
        result = self.apply(identity, measurement)
        if result is None:
            raise RuntimeError("pagination run was superseded while measuring")
        return result
