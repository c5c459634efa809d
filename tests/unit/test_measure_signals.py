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

from invoice_pager.measure import signals


class TestLayoutSignals(unittest.TestCase):
    def test_immediate_does_not_touch_page(self) -> None:
        page = mock.Mock()
        signals.immediate(page)
        page.evaluate.assert_not_called()

    def test_animation_frames_passes_count(self) -> None:
        page = mock.Mock()
        signals.animation_frames()(page)
        signals.animation_frames(count=0)(page)
        counts = [call.args[1] for call in page.evaluate.call_args_list]
        self.assertEqual(counts, [2, 1])

    def test_stable_heights_stops_when_height_settles(self) -> None:
        page = mock.Mock()
        page.evaluate.side_effect = [100, 120, 120, 999]
        signals.stable_heights(interval_ms=5)(page)
        self.assertEqual(page.evaluate.call_count, 3)
        self.assertEqual(page.wait_for_timeout.call_args_list, [mock.call(5), mock.call(5)])

    def test_stable_heights_gives_up_after_max_polls(self) -> None:
        page = mock.Mock()
        page.evaluate.side_effect = list(range(10))
        signals.stable_heights(interval_ms=1, max_polls=4)(page)
        self.assertEqual(page.evaluate.call_count, 4)


if __name__ == "__main__":
    unittest.main()
