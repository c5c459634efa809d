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
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

from ..core.models import InvoiceDocument
from ..core.validation import require_dict, require_list
from ..pager.packing import normalize_height
from ..pager.types import PagerConfig
from ..pager.units import mm_to_px
from ..render.document import A4_WIDTH_MM, measurement_html
from ..render.html_to_pdf import get_browser
from ..render.templating import DEFAULT_TEMPLATE_PATH
from .signals import LayoutSignal, animation_frames
from .types import Measurement

_READ_HEIGHTS_JS = """
() => {
  const height = (el) => el.getBoundingClientRect().height;
  const total = (selector) =>
    Array.from(document.querySelectorAll(selector)).reduce((sum, el) => sum + height(el), 0);
  return {
    rows: Array.from(document.querySelectorAll("[data-measure-row]")).map(height),
    top: total("[data-measure-top]"),
    bottom: total("[data-measure-summary], [data-measure-payment]"),
    notes: total("[data-measure-notes]"),
  };
}
"""


def measurement_from_payload(payload: object, *, row_count: int) -> Measurement:
    data = require_dict(payload, label="measurement")
    rows = require_list(data.get("rows", []), label="measurement rows")
    if len(rows) != row_count:
        raise RuntimeError(
            f"measured {len(rows)} rows but the document has {row_count} line items"
        )
    return Measurement(
        row_heights_px=tuple(normalize_height(value) for value in rows),
        top_block_px=normalize_height(data.get("top", 0.0)),
        bottom_block_px=normalize_height(data.get("bottom", 0.0)),
        notes_px=normalize_height(data.get("notes", 0.0)),
    )


@dataclass
class BrowserMeasurer:
    """Measure an off-screen copy of the invoice in headless Chromium."""

    config: PagerConfig
    page_width_mm: float = A4_WIDTH_MM
    template_path: str | Path = DEFAULT_TEMPLATE_PATH
    layout_signal: LayoutSignal = field(default_factory=animation_frames)
    browser_factory: Callable[[], Any] = get_browser

    def viewport(self) -> dict[str, int]:
        return {
            "width": math.ceil(mm_to_px(self.page_width_mm)),
            "height": math.ceil(mm_to_px(self.config.page_height_mm)),
        }

    def measure(self, document: InvoiceDocument) -> Measurement:
        html = measurement_html(
            document,
            self.config,
            template_path=self.template_path,
            page_width_mm=self.page_width_mm,
        )
        browser = self.browser_factory()
        page = browser.new_page(viewport=self.viewport())
        try:
            page.set_content(html, wait_until="load")
            page.emulate_media(media="print")
            self.layout_signal(page)
            payload = page.evaluate(_READ_HEIGHTS_JS)
        finally:
            page.close()
        return measurement_from_payload(payload, row_count=len(document.line_items))
