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

"""Pure pagination engine: capacities, packers and the last-page balancer."""

from .balance import balance_last_page
from .capacity import (
    PADDING_PX,
    PAGE_FOOTER_RESERVE_PX,
    TOP_EXTRA_DAMPING,
    PageCapacities,
    PagePosition,
    compute_capacities,
    final_position,
    scan_position,
    uniform_capacity_px,
)
from .estimate import estimate_row_height_px
from .packing import (
    normalize_height,
    paginate_by_heights,
    paginate_by_heights_with_extras,
    paginate_fixed,
    paginate_items,
)
from .pipeline import (
    SummaryPlacement,
    build_pages,
    oversized_rows,
    page_height_px,
    paginate,
    place_summary,
)
from .types import PAGINATION_MODES, Extras, Page, PagerConfig, PaginationMode
from .units import PX_PER_MM, mm_to_px

__all__ = [
    "Extras",
    "PADDING_PX",
    "PAGE_FOOTER_RESERVE_PX",
    "PAGINATION_MODES",
    "PX_PER_MM",
    "Page",
    "PageCapacities",
    "PagePosition",
    "PagerConfig",
    "PaginationMode",
    "SummaryPlacement",
    "TOP_EXTRA_DAMPING",
    "balance_last_page",
    "build_pages",
    "compute_capacities",
    "estimate_row_height_px",
    "final_position",
    "mm_to_px",
    "normalize_height",
    "oversized_rows",
    "page_height_px",
    "paginate",
    "paginate_by_heights",
    "paginate_by_heights_with_extras",
    "paginate_fixed",
    "paginate_items",
    "place_summary",
    "scan_position",
    "uniform_capacity_px",
]
