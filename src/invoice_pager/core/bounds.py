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

# Maximum invoice JSON input size (UTF-8 bytes).
MAX_INVOICE_JSON_BYTES = 8_388_608

# Maximum number of line items on one invoice.
MAX_LINE_ITEMS = 20_000

# Maximum characters in one line item description.
MAX_LINE_ITEM_NAME_CHARS = 4_096


__all__ = [
    "MAX_INVOICE_JSON_BYTES",
    "MAX_LINE_ITEMS",
    "MAX_LINE_ITEM_NAME_CHARS",
]
