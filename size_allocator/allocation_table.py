"""
size_allocator/allocation_table.py
----------------------------------
Tabular views of an :class:`OrderPlan`.

Design contract:
  - Does NOT compute allocations (reads VariantAllocation / OrderPlan only)
  - Does NOT write files; callers decide how to serialise the frames
"""

from __future__ import annotations

from typing import Dict

import pandas as pd

from size_allocator.config import PROPORTION_DIGITS
from size_allocator.constants import SUMMARY_COLUMNS, TABLE_COLUMNS, TOTAL_LABEL
from size_allocator.enums import OrderMode, Variant
from size_allocator.order_planner import OrderPlan, VariantAllocation


class AllocationTable:
    """Build pandas frames for one variant section or for a whole plan."""

    @staticmethod
    def frame(section: VariantAllocation) -> pd.DataFrame:
        """
        One row per size: ``Size | Sales | Proportion | Available | Order``.

        Proportions are rounded to ``PROPORTION_DIGITS`` places.
        """
        rows = [
            {
                "Size":       cat.label,
                "Sales":      cat.weight,
                "Proportion": round(prop, PROPORTION_DIGITS),
                "Available":  cat.available,
                "Order":      order,
            }
            for cat, prop, order in zip(
                section.categories, section.proportions, section.orders
            )
        ]
        return pd.DataFrame(rows, columns=TABLE_COLUMNS)

    @staticmethod
    def totals(section: VariantAllocation) -> Dict:
        """Footer row with the same keys as :meth:`frame`."""
        return {
            "Size":       TOTAL_LABEL,
            "Sales":      section.total_weight,
            "Proportion": round(section.proportion_sum, PROPORTION_DIGITS),
            "Available":  section.total_available,
            "Order":      section.allocated,
        }

    @staticmethod
    def summary(plan: OrderPlan) -> pd.DataFrame:
        """Key/value overview of the order settings and per-variant totals."""
        dual = plan.mode == OrderMode.DUAL
        if dual:
            primary = plan.section(Variant.BOAT_NECK).order_quantity
            secondary = plan.section(Variant.V_NECK).order_quantity
        else:
            primary, secondary = plan.total_order, 0

        rows = [
            ("Total order",       plan.total_order),
            ("Mode",              plan.mode.value),
            ("Boat neck share",   plan.primary_share),
            ("V-neck share",      plan.secondary_share),
            ("Order (Boat neck)", primary),
            ("Order (V-neck)",    secondary),
        ]
        return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
