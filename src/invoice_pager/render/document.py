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

from pathlib import Path
from typing import TYPE_CHECKING

from ..core.models import InvoiceDocument, LineItem
from ..core.totals import compute_totals, line_net, line_vat
from ..pager.capacity import PADDING_PX
from ..pager.pipeline import SummaryPlacement
from ..pager.types import PagerConfig
from .templating import DEFAULT_TEMPLATE_PATH, render_template

if TYPE_CHECKING:
    from ..measure.types import PaginationResult

A4_WIDTH_MM = 210.0

DEFAULT_LABELS = {
    "invoice_label": "Invoice",
    "from_label": "From",
    "customer_label": "To",
    "description_label": "Description",
    "quantity_label": "Quantity",
    "price_label": "Price",
    "vat_label": "VAT",
    "total_label": "Total",
    "subtotal_label": "Subtotal",
    "discount_label": "Discount",
    "payment_label": "Payment details",
    "note_label": "Note",
    "issue_date_label": "Issue date",
    "due_date_label": "Due date",
}


def _row_context(index: int, item: LineItem) -> dict[str, object]:
    net = line_net(item)
    return {
        "index": index,
        "name": item.name,
        "quantity": item.quantity,
        "unit": item.unit or "",
        "price": item.price,
        "vat": item.vat,
        "total": net + line_vat(item),
    }


def document_context(
    document: InvoiceDocument,
    config: PagerConfig,
    *,
    result: PaginationResult | None = None,
    measure: bool = False,
    page_width_mm: float = A4_WIDTH_MM,
) -> dict[str, object]:
    """Template context for either the measurement copy or the paged document."""
    labels = {**DEFAULT_LABELS, **document.labels}
    rows = [_row_context(idx, item) for idx, item in enumerate(document.line_items)]
    totals = compute_totals(document.line_items)

    summary_inline = result is None or result.summary is SummaryPlacement.INLINE
    # Measured capacities charge only padding on continuation pages, so those
    # sheets carry rows alone. Fixed mode keeps the reserved header on every sheet.
    measured = result is not None and result.capacities is not None
    partition = result.pages if result is not None else ()
    total_sheets = len(partition) + (0 if partition and summary_inline else 1)

    pages: list[dict[str, object]] = []
    for page_idx, page in enumerate(partition):
        is_first = page_idx == 0
        is_last = page_idx == len(partition) - 1
        pages.append(
            {
                "number": page_idx + 1,
                "label": f"Page {page_idx + 1} / {total_sheets}",
                "rows": [rows[idx] for idx in page],
                "is_first": is_first,
                "is_last": is_last,
                "show_header": is_first or not measured,
                "show_footer": is_last and summary_inline,
            }
        )
    trailing: dict[str, object] | None = None
    if not partition or not summary_inline:
        trailing = {
            "number": total_sheets,
            "label": f"Page {total_sheets} / {total_sheets}",
            "show_parties": not partition,
            "show_header": not partition or not measured,
        }

    return {
        "measure": measure,
        "invoice": document,
        "labels": labels,
        "rows": rows,
        "pages": pages,
        "trailing": trailing,
        "reserve_header": not measure and not measured,
        "totals": totals,
        "summary_inline": summary_inline,
        "page_width_mm": page_width_mm,
        "page_height_mm": config.page_height_mm,
        "header_height_mm": config.header_height_mm,
        "footer_height_mm": config.footer_height_mm,
        "padding_px": PADDING_PX,
    }


def measurement_html(
    document: InvoiceDocument,
    config: PagerConfig,
    *,
    template_path: str | Path = DEFAULT_TEMPLATE_PATH,
    page_width_mm: float = A4_WIDTH_MM,
) -> str:
    context = document_context(document, config, measure=True, page_width_mm=page_width_mm)
    return render_template(template_path, context)


def paged_html(
    document: InvoiceDocument,
    config: PagerConfig,
    result: PaginationResult,
    *,
    template_path: str | Path = DEFAULT_TEMPLATE_PATH,
    page_width_mm: float = A4_WIDTH_MM,
) -> str:
    context = document_context(document, config, result=result, page_width_mm=page_width_mm)
    return render_template(template_path, context)
