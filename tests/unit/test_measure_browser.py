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

from invoice_pager.measure.browser import BrowserMeasurer, measurement_from_payload
from invoice_pager.pager.types import PagerConfig
from tests.test_support import TEST_CONFIG, make_document


def _browser_with_payload(payload: object) -> tuple[mock.Mock, mock.Mock]:
    page = mock.Mock()
    page.evaluate.return_value = payload
    browser = mock.Mock()
    browser.new_page.return_value = page
    return browser, page


class TestMeasurementFromPayload(unittest.TestCase):
    def test_reads_rows_and_blocks(self) -> None:
        payload = {"rows": [30.5, 44], "top": 120, "bottom": 160, "notes": 32}
        measurement = measurement_from_payload(payload, row_count=2)
        self.assertEqual(measurement.row_heights_px, (30.5, 44.0))
        self.assertEqual(measurement.top_block_px, 120.0)
        self.assertEqual(measurement.bottom_block_px, 160.0)
        self.assertEqual(measurement.notes_px, 32.0)

    def test_row_count_mismatch(self) -> None:
        with self.assertRaisesRegex(RuntimeError, "measured 1 rows"):
            measurement_from_payload({"rows": [30]}, row_count=2)

    def test_rejects_non_dict(self) -> None:
        with self.assertRaises(ValueError):
            measurement_from_payload([30], row_count=1)


class TestBrowserMeasurer(unittest.TestCase):
    def test_viewport_matches_page_size(self) -> None:
        measurer = BrowserMeasurer(config=TEST_CONFIG, browser_factory=mock.Mock())
        self.assertEqual(measurer.viewport(), {"width": 794, "height": 1123})
        a5 = BrowserMeasurer(
            config=PagerConfig(210, 20, 10, 3),
            page_width_mm=148,
            browser_factory=mock.Mock(),
        )
        self.assertEqual(a5.viewport(), {"width": 560, "height": 794})

    def test_measure_reads_heights_after_layout_signal(self) -> None:
        browser, page = _browser_with_payload(
            {"rows": [30, 30, 46], "top": 110, "bottom": 150, "notes": 0}
        )
        events: list[str] = []
        page.set_content.side_effect = lambda *args, **kwargs: events.append("content")
        signal = mock.Mock(side_effect=lambda _page: events.append("signal"))
        measurer = BrowserMeasurer(
            config=TEST_CONFIG,
            layout_signal=signal,
            browser_factory=lambda: browser,
        )

        measurement = measurer.measure(make_document(3))

        self.assertEqual(measurement.row_heights_px, (30.0, 30.0, 46.0))
        self.assertEqual(measurement.top_block_px, 110.0)
        self.assertEqual(events, ["content", "signal"])
        signal.assert_called_once_with(page)
        browser.new_page.assert_called_once_with(viewport={"width": 794, "height": 1123})
        html = page.set_content.call_args.args[0]
        self.assertEqual(html.count("data-measure-row"), 3)
        page.emulate_media.assert_called_once_with(media="print")
        page.close.assert_called_once()

    def test_page_closed_when_signal_fails(self) -> None:
        browser, page = _browser_with_payload({"rows": []})
        measurer = BrowserMeasurer(
            config=TEST_CONFIG,
            layout_signal=mock.Mock(side_effect=RuntimeError("boom")),
            browser_factory=lambda: browser,
        )
        with self.assertRaisesRegex(RuntimeError, "boom"):
            measurer.measure(make_document(1))
        page.close.assert_called_once()

    def test_row_mismatch_surfaces(self) -> None:
        browser, _page = _browser_with_payload({"rows": [30]})
        measurer = BrowserMeasurer(
            config=TEST_CONFIG,
            layout_signal=mock.Mock(),
            browser_factory=lambda: browser,
        )
        with self.assertRaises(RuntimeError):
            measurer.measure(make_document(2))


if __name__ == "__main__":
    unittest.main()
