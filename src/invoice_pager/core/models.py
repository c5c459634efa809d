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

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LineItem:
    name: str
    quantity: float
    price: float
    vat: float = 0.0
    unit: str | None = None
    discount_rate: float = 0.0

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "quantity": self.quantity,
            "price": self.price,
            "vat": self.vat,
            "unit": self.unit,
            "discount_rate": self.discount_rate,
        }


@dataclass(frozen=True)
class InvoiceDocument:
    """Invoice metadata plus the ordered line items that get paginated."""

    invoice_number: str
    issue_date: str
    currency: str
    customer_name: str
    line_items: tuple[LineItem, ...] = ()
    due_date: str | None = None
    from_details: str = ""
    customer_details: str = ""
    payment_details: str = ""
    note_details: str = ""
    labels: dict[str, str] = field(default_factory=dict)
