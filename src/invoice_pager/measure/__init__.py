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

"""Measurement adapters and the orchestrator that feeds them into the pager."""

from .browser import BrowserMeasurer, measurement_from_payload
from .measurers import EstimateMeasurer, FixtureMeasurer, load_heights_fixture
from .orchestrator import (
    DEFAULT_ITEMS_PER_PAGE,
    PaginationOrchestrator,
    input_identity,
    paginate_measurement,
    to_extras,
)
from .signals import LayoutSignal, animation_frames, immediate, stable_heights
from .types import BOTTOM_SAFETY_MARGIN_PX, Measurement, Measurer, PaginationResult

__all__ = [
    "BOTTOM_SAFETY_MARGIN_PX",
    "BrowserMeasurer",
    "DEFAULT_ITEMS_PER_PAGE",
    "EstimateMeasurer",
    "FixtureMeasurer",
    "LayoutSignal",
    "Measurement",
    "Measurer",
    "PaginationOrchestrator",
    "PaginationResult",
    "animation_frames",
    "immediate",
    "input_identity",
    "load_heights_fixture",
    "measurement_from_payload",
    "paginate_measurement",
    "stable_heights",
    "to_extras",
]
