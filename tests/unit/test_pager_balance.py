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

from invoice_pager.pager.balance import balance_last_page


class TestBalanceLastPage(unittest.TestCase):
    def test_moves_one_row_from_previous_page(self) -> None:
        pages = [[0, 1, 2], [3, 4, 5], [6]]
        self.assertEqual(balance_last_page(pages, 3), [[0, 1, 2], [3, 4], [5, 6]])

    def test_single_borrow_only(self) -> None:
        balanced = balance_last_page([[0, 1, 2, 3], [4]], 3)
        self.assertEqual(balanced, [[0, 1, 2], [3, 4]])
        self.assertLess(len(balanced[-1]), 3)

    def test_last_page_already_full_enough(self) -> None:
        pages = [[0, 1], [2, 3, 4]]
        self.assertEqual(balance_last_page(pages, 3), pages)

    def test_single_page_unchanged(self) -> None:
        self.assertEqual(balance_last_page([[0]], 3), [[0]])
        self.assertEqual(balance_last_page([], 3), [])

    def test_zero_minimum_disables(self) -> None:
        self.assertEqual(balance_last_page([[0, 1], [2]], 0), [[0, 1], [2]])

    def test_emptied_donor_is_dropped(self) -> None:
        self.assertEqual(balance_last_page([[0], [1], [2]], 2), [[0], [1, 2]])

    def test_empty_donor_is_left_alone(self) -> None:
        self.assertEqual(balance_last_page([[0], [], [1]], 2), [[0], [], [1]])

    def test_input_is_not_mutated(self) -> None:
        pages = [[0, 1, 2], [3]]
        balance_last_page(pages, 3)
        self.assertEqual(pages, [[0, 1, 2], [3]])


if __name__ == "__main__":
    unittest.main()
