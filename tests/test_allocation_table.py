"""
tests/test_allocation_table.py
------------------------------
Unit tests for AllocationTable.

Coverage:
    frame()    – columns, row values, proportion rounding, empty section
    totals()   – footer values
    summary()  – dual and single plan overviews
"""

import unittest

from size_allocator.allocation_table import AllocationTable
from size_allocator.category import Category
from size_allocator.constants import (
    DEFAULT_BOAT_NECK_RUN,
    DEFAULT_V_NECK_RUN,
    SUMMARY_COLUMNS,
    TABLE_COLUMNS,
)
from size_allocator.enums import OrderMode, Variant
from size_allocator.order_planner import OrderPlanner


_BOAT = [Category.from_raw(*row) for row in DEFAULT_BOAT_NECK_RUN]
_VNECK = [Category.from_raw(*row) for row in DEFAULT_V_NECK_RUN]


def _summary_dict(frame) -> dict:
    return dict(zip(frame["Key"], frame["Value"]))


class TestFrame(unittest.TestCase):

    def setUp(self):
        plan = OrderPlanner.plan(_BOAT, _VNECK, total_order=800, primary_share=0.4)
        self.section = plan.section(Variant.BOAT_NECK)
        self.df = AllocationTable.frame(self.section)

    def test_columns(self):
        self.assertEqual(list(self.df.columns), TABLE_COLUMNS)

    def test_one_row_per_size(self):
        self.assertEqual(list(self.df["Size"]), ["XS", "S", "M", "L", "XL", "XXL"])

    def test_orders(self):
        self.assertEqual(list(self.df["Order"]), [11, 130, 61, 105, 8, 5])

    def test_proportion_rounded(self):
        self.assertEqual(self.df["Proportion"].iloc[0], round(4 / 116, 6))

    def test_sales_and_stock_are_parsed_numbers(self):
        self.assertEqual(self.df["Sales"].iloc[1], 47.0)
        self.assertEqual(self.df["Available"].iloc[1], 47.0)

    def test_empty_section_keeps_columns(self):
        plan = OrderPlanner.plan([], total_order=10, mode=OrderMode.SINGLE)
        df = AllocationTable.frame(plan.sections[0])
        self.assertEqual(list(df.columns), TABLE_COLUMNS)
        self.assertEqual(len(df), 0)


class TestTotals(unittest.TestCase):

    def test_footer(self):
        plan = OrderPlanner.plan(_BOAT, total_order=320, mode=OrderMode.SINGLE)
        totals = AllocationTable.totals(plan.sections[0])
        self.assertEqual(totals["Size"], "TOTAL")
        self.assertEqual(totals["Sales"], 116.0)
        self.assertEqual(totals["Available"], 116.0)
        self.assertEqual(totals["Proportion"], 1.0)
        self.assertEqual(totals["Order"], 320)


class TestSummary(unittest.TestCase):

    def test_dual_summary(self):
        plan = OrderPlanner.plan(_BOAT, _VNECK, total_order=800, primary_share=0.4)
        df = AllocationTable.summary(plan)
        self.assertEqual(list(df.columns), SUMMARY_COLUMNS)
        values = _summary_dict(df)
        self.assertEqual(values["Total order"], 800)
        self.assertEqual(values["Mode"], "Boat neck + V-neck")
        self.assertEqual(values["Order (Boat neck)"], 320)
        self.assertEqual(values["Order (V-neck)"], 480)
        self.assertAlmostEqual(values["V-neck share"], 0.6)

    def test_single_summary(self):
        plan = OrderPlanner.plan(_BOAT, total_order=500, mode=OrderMode.SINGLE)
        values = _summary_dict(AllocationTable.summary(plan))
        self.assertEqual(values["Mode"], "Single product")
        self.assertEqual(values["Boat neck share"], 1.0)
        self.assertEqual(values["V-neck share"], 0.0)
        self.assertEqual(values["Order (Boat neck)"], 500)
        self.assertEqual(values["Order (V-neck)"], 0)


if __name__ == "__main__":
    unittest.main()
