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
from dataclasses import replace
from unittest import mock

from invoice_pager.cli.flows import pagination as flows
from invoice_pager.config.installer import DEFAULT_CONFIG_PATH
from invoice_pager.config.loader import load_app_config
from invoice_pager.measure.browser import BrowserMeasurer
from invoice_pager.measure.measurers import EstimateMeasurer, FixtureMeasurer
from tests.test_support import make_document, temp_dir, write_json


class TestPaginationFlow(unittest.TestCase):
    def setUp(self) -> None:
        self.config = load_app_config(DEFAULT_CONFIG_PATH)

    def test_select_measurer(self) -> None:
        self.assertIsInstance(flows.select_measurer(self.config, estimate=True), EstimateMeasurer)
        browser_measurer = flows.select_measurer(self.config)
        self.assertIsInstance(browser_measurer, BrowserMeasurer)
        self.assertEqual(browser_measurer.template_path, self.config.template_path)
        with temp_dir() as tmp:
            heights = write_json(tmp / "heights.json", [10, 20])
            measurer = flows.select_measurer(self.config, heights=heights, estimate=True)
        self.assertIsInstance(measurer, FixtureMeasurer)

    def test_resolve_mode(self) -> None:
        self.assertEqual(flows.resolve_mode(self.config, None, None, quiet=True), ("measured", 10))
        self.assertEqual(flows.resolve_mode(self.config, "fixed", 4, quiet=True), ("fixed", 4))
        fixed_config = replace(self.config, mode="fixed", items_per_page=7)
        self.assertEqual(flows.resolve_mode(fixed_config, None, None, quiet=True), ("fixed", 7))

    def test_resolve_mode_rejects_non_positive_per_page(self) -> None:
        with self.assertRaisesRegex(ValueError, "--per-page"):
            flows.resolve_mode(self.config, "fixed", 0, quiet=True)

    @mock.patch("invoice_pager.cli.flows.pagination._warn")
    def test_resolve_mode_warns_when_per_page_is_ignored(self, warn: mock.Mock) -> None:
        flows.resolve_mode(self.config, "measured", 5, quiet=False)
        warn.assert_called_once()
        self.assertFalse(warn.call_args.kwargs["quiet"])

    @mock.patch("invoice_pager.cli.flows.pagination._warn")
    def test_run_pagination_warns_for_each_oversized_row(self, warn: mock.Mock) -> None:
        measurer = FixtureMeasurer(row_heights_px=(40.0, 5000.0, 40.0, 6000.0))
        result = flows.run_pagination(
            make_document(4),
            self.config,
            mode="measured",
            items_per_page=10,
            measurer=measurer,
            quiet=False,
        )
        self.assertEqual(sum(len(page) for page in result.pages), 4)
        messages = [call.args[0] for call in warn.call_args_list]
        self.assertEqual(len(messages), 2)
        self.assertTrue(messages[0].startswith("line item 1 "))
        self.assertTrue(messages[1].startswith("line item 3 "))

    @mock.patch("invoice_pager.cli.flows.pagination._warn")
    def test_run_pagination_fixed_never_warns(self, warn: mock.Mock) -> None:
        result = flows.run_pagination(
            make_document(4),
            self.config,
            mode="fixed",
            items_per_page=3,
            measurer=mock.Mock(),
            quiet=False,
        )
        self.assertEqual(result.page_count, 2)
        warn.assert_not_called()


if __name__ == "__main__":
    unittest.main()
