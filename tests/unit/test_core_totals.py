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

from invoice_pager.core.totals import compute_totals, line_gross, line_net, line_vat
from tests.test_support import make_item


class TestTotals(unittest.TestCase):
    def test_line_amounts(self) -> None:
        item = make_item(quantity=2.0, price=100.0, vat=20.0, discount_rate=10.0)
        self.assertAlmostEqual(line_gross(item), 200.0)
        self.assertAlmostEqual(line_net(item), 180.0)
        self.assertAlmostEqual(line_vat(item), 36.0)

    def test_compute_totals(self) -> None:
        totals = compute_totals(
            [
                make_item(quantity=2.0, price=100.0, vat=20.0, discount_rate=10.0),
                make_item(quantity=1.0, price=50.0, vat=0.0),
            ]
        )
        self.assertAlmostEqual(totals.amount_before_discount, 250.0)
        self.assertAlmostEqual(totals.discount_total, 20.0)
        self.assertAlmostEqual(totals.subtotal, 230.0)
        self.assertAlmostEqual(totals.total_vat, 36.0)
        self.assertAlmostEqual(totals.total, 266.0)

    def test_empty(self) -> None:
        totals = compute_totals([])
        self.assertEqual(totals.total, 0)


if __name__ == "__main__":
    unittest.main()
