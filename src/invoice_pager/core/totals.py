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

from .models import LineItem


@dataclass(frozen=True)
class InvoiceTotals:
    amount_before_discount: float
    discount_total: float
    subtotal: float
    total_vat: float
    total: float


def line_gross(item: LineItem) -> float:
    return item.quantity * item.price


def line_net(item: LineItem) -> float:
    return line_gross(item) * (1 - item.discount_rate / 100)


def line_vat(item: LineItem) -> float:
    return line_net(item) * item.vat / 100


def compute_totals(items: Sequence[LineItem]) -> InvoiceTotals:
    before_discount = sum(line_gross(item) for item in items)
    subtotal = sum(line_net(item) for item in items)
    total_vat = sum(line_vat(item) for item in items)
    return InvoiceTotals(
        amount_before_discount=before_discount,
        discount_total=before_discount - subtotal,
        subtotal=subtotal,
        total_vat=total_vat,
        total=subtotal + total_vat,
    )
