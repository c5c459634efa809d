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

"""Split invoice line items into printable A4 pages."""

from .core.models import InvoiceDocument, LineItem
from .pager import (
    Extras,
    PagerConfig,
    balance_last_page,
    estimate_row_height_px,
    mm_to_px,
    paginate,
    paginate_by_heights,
    paginate_by_heights_with_extras,
    paginate_fixed,
    paginate_items,
)

__all__ = [
    "Extras",
    "InvoiceDocument",
    "LineItem",
    "PagerConfig",
    "balance_last_page",
    "estimate_row_height_px",
    "mm_to_px",
    "paginate",
    "paginate_by_heights",
    "paginate_by_heights_with_extras",
    "paginate_fixed",
    "paginate_items",
]
