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

import unittest
from unittest import mock

from invoice_pager.measure.measurers import FixtureMeasurer
from invoice_pager.measure.orchestrator import (
    PaginationOrchestrator,
    input_identity,
    paginate_measurement,
    to_extras,
)
from invoice_pager.measure.types import Measurement
from invoice_pager.pager.pipeline import SummaryPlacement
from invoice_pager.pager.types import Extras
from invoice_pager.pager.units import mm_to_px
from tests.test_support import TEST_CONFIG, make_document, make_item


class TestToExtras(unittest.TestCase):
    def test_adds_bottom_safety_margin(self) -> None:
        measurement = Measurement(row_heights_px=(), top_block_px=100.0, bottom_block_px=50.0)
        self.assertEqual(to_extras(measurement), Extras(top_px=100.0, bottom_px=60.0))


class TestInputIdentity(unittest.TestCase):
    def test_stable_for_equal_inputs(self) -> None:
        self.assertEqual(
            input_identity(make_document(3), "measured"),
            input_identity(make_document(3), "measured"),
        )

    def test_changes_with_items_mode_and_blocks(self) -> None:
        base = input_identity(make_document(3), "measured")
        self.assertNotEqual(base, input_identity(make_document(4), "measured"))
        self.assertNotEqual(base, input_identity(make_document(3), "fixed", 10))
        self.assertNotEqual(
            base, input_identity(make_document(3, note_details="Thanks!"), "measured")
        )

    def test_per_page_only_matters_in_fixed_mode(self) -> None:
        document = make_document(3)
        self.assertEqual(
            input_identity(document, "measured", 5), input_identity(document, "measured", 9)
        )
        self.assertNotEqual(
            input_identity(document, "fixed", 5), input_identity(document, "fixed", 9)
        )


class TestPaginateMeasurement(unittest.TestCase):
    def test_uses_extras_aware_capacities(self) -> None:
        measurement = Measurement(row_heights_px=(40.0,) * 60, top_block_px=300.0)
        result = paginate_measurement("run", measurement, TEST_CONFIG)
        self.assertEqual([len(page) for page in result.pages], [22, 27, 11])
        self.assertEqual(result.mode, "measured")
        self.assertIs(result.summary, SummaryPlacement.INLINE)
        assert result.capacities is not None
        self.assertAlmostEqual(result.capacities.first, mm_to_px(297) - 40 - 180)
        self.assertAlmostEqual(result.capacities.last, mm_to_px(297) - 40 - 24 - 10)

    def test_single_page_with_address_panels_moves_summary(self) -> None:
        measurement = Measurement(
            row_heights_px=(40.0,) * 20, top_block_px=300.0, bottom_block_px=100.0
        )
        result = paginate_measurement("run", measurement, TEST_CONFIG)
        self.assertEqual(result.page_count, 1)
        self.assertIs(result.summary, SummaryPlacement.TRAILING_PAGE)

    def test_tall_notes_move_summary_to_trailing_page(self) -> None:
        measurement = Measurement(row_heights_px=(40.0,) * 20, notes_px=400.0)
        result = paginate_measurement("run", measurement, TEST_CONFIG)
        self.assertIs(result.summary, SummaryPlacement.TRAILING_PAGE)


class TestPaginationOrchestrator(unittest.TestCase):
    def test_fixed_mode_skips_measurement(self) -> None:
        measurer = mock.Mock()
        orchestrator = PaginationOrchestrator(TEST_CONFIG, measurer)
        result = orchestrator.refresh(make_document(25), mode="fixed", items_per_page=10)
        self.assertEqual([len(page) for page in result.pages], [10, 10, 5])
        self.assertIsNone(result.capacities)
        measurer.measure.assert_not_called()

    def test_fixed_mode_defaults_to_ten_per_page(self) -> None:
        orchestrator = PaginationOrchestrator(TEST_CONFIG, mock.Mock())
        result = orchestrator.refresh(make_document(12), mode="fixed")
        self.assertEqual(result.page_count, 2)

    def test_measured_mode(self) -> None:
        measurer = FixtureMeasurer(row_heights_px=(40.0,) * 60, top_block_px=300.0)
        orchestrator = PaginationOrchestrator(TEST_CONFIG, measurer)
        result = orchestrator.refresh(make_document(60))
        self.assertEqual([len(page) for page in result.pages], [22, 27, 11])
        self.assertIs(orchestrator.result, result)
        self.assertEqual(result.identity, orchestrator.latest_identity)

    def test_stale_measurement_is_discarded(self) -> None:
        orchestrator = PaginationOrchestrator(TEST_CONFIG, mock.Mock())
        stale = orchestrator.begin(make_document(3))
        current = orchestrator.begin(make_document(4))
        self.assertFalse(orchestrator.is_current(stale))

        measurement = Measurement(row_heights_px=(40.0,) * 3)
        self.assertIsNone(orchestrator.apply(stale, measurement))
        self.assertIsNone(orchestrator.result)

        result = orchestrator.apply(current, Measurement(row_heights_px=(40.0,) * 4))
        self.assertIsNotNone(result)
        self.assertIs(orchestrator.result, result)

    def test_measurement_ignored_in_fixed_mode(self) -> None:
        orchestrator = PaginationOrchestrator(TEST_CONFIG, mock.Mock())
        identity = orchestrator.begin(make_document(3), mode="fixed", items_per_page=1)
        fixed = orchestrator.result
        self.assertIsNone(orchestrator.apply(identity, Measurement(row_heights_px=(1.0,) * 3)))
        self.assertIs(orchestrator.result, fixed)

    def test_refresh_raises_when_superseded(self) -> None:
        orchestrator = PaginationOrchestrator(TEST_CONFIG, mock.Mock())

        def _measure(document):
            orchestrator.begin(make_document(5))
            return Measurement(row_heights_px=(40.0,) * len(document.line_items))

        orchestrator.measurer.measure.side_effect = _measure
        with self.assertRaisesRegex(RuntimeError, "superseded"):
            orchestrator.refresh(make_document(3))

    def test_unknown_mode(self) -> None:
        orchestrator = PaginationOrchestrator(TEST_CONFIG, mock.Mock())
        with self.assertRaises(ValueError):
            orchestrator.begin(make_document(1), mode="auto")  # type: ignore[arg-type]

    def test_pages_of_maps_items(self) -> None:
        document = make_document(3, line_items=(make_item("a"), make_item("b"), make_item("c")))
        orchestrator = PaginationOrchestrator(TEST_CONFIG, mock.Mock())
        result = orchestrator.refresh(document, mode="fixed", items_per_page=2)
        names = [[item.name for item in page] for page in result.pages_of(document.line_items)]
        self.assertEqual(names, [["a", "b"], ["c"]])


if __name__ == "__main__":
    unittest.main()
