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

import json
import math
from pathlib import Path
from typing import Any

from .bounds import MAX_INVOICE_JSON_BYTES, MAX_LINE_ITEM_NAME_CHARS, MAX_LINE_ITEMS
from .models import InvoiceDocument, LineItem


def require_list(value: object, *, label: str) -> list[Any]:
    """Validate that value is a list."""
    if not isinstance(value, list):
        raise ValueError(f"{label} must be a list")
    return value


def require_dict(value: object, *, label: str) -> dict[Any, Any]:
    """Validate that value is a dict."""
    if not isinstance(value, dict):
        raise ValueError(f"{label} must be a dict")
    return value


def require_str(value: object, *, label: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{label} must be a string")
    return value


def require_number(value: object, *, label: str) -> float:
    """Validate that value is a finite int/float (bools are rejected)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{label} must be a number")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"{label} must be finite")
    return number


def optional_str(value: object, *, label: str) -> str | None:
    if value is None:
        return None
    return require_str(value, label=label)


def optional_number(value: object, *, label: str, default: float) -> float:
    if value is None:
        return default
    return require_number(value, label=label)


def parse_line_item(data: object, *, index: int) -> LineItem:
    label = f"line_items[{index}]"
    item = require_dict(data, label=label)
    name = item.get("name", item.get("description"))
    name = require_str(name, label=f"{label}.name")
    if len(name) > MAX_LINE_ITEM_NAME_CHARS:
        raise ValueError(
            f"{label}.name exceeds MAX_LINE_ITEM_NAME_CHARS ({MAX_LINE_ITEM_NAME_CHARS})"
        )
    return LineItem(
        name=name,
        quantity=require_number(item.get("quantity"), label=f"{label}.quantity"),
        price=require_number(item.get("price"), label=f"{label}.price"),
        vat=optional_number(item.get("vat"), label=f"{label}.vat", default=0.0),
        unit=optional_str(item.get("unit"), label=f"{label}.unit"),
        discount_rate=optional_number(
            item.get("discount_rate", item.get("discountRate")),
            label=f"{label}.discount_rate",
            default=0.0,
        ),
    )


def parse_invoice(data: object) -> InvoiceDocument:
    invoice = require_dict(data, label="invoice")
    raw_items = require_list(invoice.get("line_items", []), label="line_items")
    if len(raw_items) > MAX_LINE_ITEMS:
        raise ValueError(f"line_items exceeds MAX_LINE_ITEMS ({MAX_LINE_ITEMS}): {len(raw_items)}")
    labels = require_dict(invoice.get("labels", {}), label="labels")
    return InvoiceDocument(
        invoice_number=require_str(invoice.get("invoice_number", ""), label="invoice_number"),
        issue_date=require_str(invoice.get("issue_date", ""), label="issue_date"),
        due_date=optional_str(invoice.get("due_date"), label="due_date"),
        currency=require_str(invoice.get("currency", "EUR"), label="currency"),
        customer_name=require_str(invoice.get("customer_name", ""), label="customer_name"),
        from_details=require_str(invoice.get("from_details", ""), label="from_details"),
        customer_details=require_str(
            invoice.get("customer_details", ""), label="customer_details"
        ),
        payment_details=require_str(invoice.get("payment_details", ""), label="payment_details"),
        note_details=require_str(invoice.get("note_details", ""), label="note_details"),
        line_items=tuple(parse_line_item(item, index=idx) for idx, item in enumerate(raw_items)),
        labels={
            str(key): require_str(value, label=f"labels.{key}") for key, value in labels.items()
        },
    )


def read_json(path: str | Path, *, label: str) -> object:
    path = Path(path)
    raw = path.read_bytes()
    if len(raw) > MAX_INVOICE_JSON_BYTES:
        raise ValueError(f"{label} exceeds MAX_INVOICE_JSON_BYTES ({MAX_INVOICE_JSON_BYTES} bytes)")
    try:
        return json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValueError(f"{label} is not valid JSON: {exc}") from exc


def load_invoice(path: str | Path) -> InvoiceDocument:
    return parse_invoice(read_json(path, label="invoice"))
