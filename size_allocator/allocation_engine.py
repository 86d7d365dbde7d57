"""
size_allocator/allocation_engine.py
-----------------------------------
Pure transformation engine: demand weights + stock levels → integer order
quantities per size.

Design contract:
  - No parsing of form state beyond numeric coercion
  - No rendering, no export, no persistence
  - Fully deterministic and stateless (all methods are @staticmethod)
  - Never raises for empty input, zero demand, zero deficit or a
    non-positive order
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Sequence

import numpy as np

from size_allocator.category import Category
from size_allocator.config import SUM_TOLERANCE
from size_allocator.input_parser import to_number, to_quantity

logger = logging.getLogger(__name__)


class AllocationEngine:
    """
    Split a total order across categories by target-stock leveling.

    Each category's target stock is its demand proportion times the combined
    stock after the order arrives (current stock + order).  Categories below
    target share the order in proportion to their shortfall (deficit); the
    scaled shares are then rounded with the largest-remainder method so the
    integer orders add up to the total exactly.

    Entry points::

        proportions = AllocationEngine.normalize([4, 47])
        orders      = AllocationEngine.allocate(proportions, [4, 47], 100)
        # orders -> [8, 92]
    """

    # ------------------------------------------------------------------ #
    #  Public entry points
    # ------------------------------------------------------------------ #

    @staticmethod
    def normalize(weights: Sequence) -> List[float]:
        """
        Turn demand weights into proportions that sum to 1.

        Weights are coerced to non-negative floats first (unparseable,
        negative or non-finite → 0).  Falls back to equal proportions when
        every weight is zero so a size run without sales history still
        receives stock.  An empty input gives an empty list.
        """
        values = [to_quantity(w) for w in weights]
        if not values:
            return []

        total = sum(values)
        if total > 0:
            return [v / total for v in values]
        return [1 / len(values)] * len(values)

    @staticmethod
    def allocate(
        proportions: Sequence,
        available: Sequence,
        total_order,
    ) -> List[int]:
        """
        Allocate *total_order* pieces across categories.

        Parameters
        ----------
        proportions:
            Demand share per category.  Re-normalised internally, so raw
            weights are accepted as well.
        available:
            Current stock per category, parallel to *proportions*.
        total_order:
            Pieces to order.  Rounded half-up to a whole number; zero or
            negative yields all zeros.

        Returns
        -------
        List of non-negative ints, parallel to the input.  Sums exactly to
        the rounded total whenever the total is positive and at least one
        category is below its target; otherwise every entry is 0.

        Raises
        ------
        ValueError
            If *proportions* and *available* differ in length.
        """
        steps = AllocationEngine._apportion(proportions, available, total_order)
        return [int(v) for v in steps["order"]]

    @staticmethod
    def allocate_categories(
        categories: Sequence[Category],
        total_order,
    ) -> List[int]:
        """Normalise the categories' sales and allocate against their stock."""
        proportions = AllocationEngine.normalize([c.weight for c in categories])
        return AllocationEngine.allocate(
            proportions,
            [c.available for c in categories],
            total_order,
        )

    @staticmethod
    def breakdown(
        proportions: Sequence,
        available: Sequence,
        total_order,
    ) -> List[Dict]:
        """
        Same computation as :meth:`allocate`, with every intermediate exposed.

        Returns one dict per category with keys ``"proportion"``,
        ``"available"``, ``"target"``, ``"deficit"``, ``"raw"``, ``"base"``,
        ``"bonus"`` (True when the category received a remainder unit) and
        ``"order"``.
        """
        steps = AllocationEngine._apportion(proportions, available, total_order)
        rows = []
        for i in range(len(steps["order"])):
            rows.append({
                "proportion": float(steps["proportion"][i]),
                "available":  float(steps["available"][i]),
                "target":     float(steps["target"][i]),
                "deficit":    float(steps["deficit"][i]),
                "raw":        float(steps["raw"][i]),
                "base":       int(steps["base"][i]),
                "bonus":      bool(steps["bonus"][i]),
                "order":      int(steps["order"][i]),
            })
        return rows

    # ------------------------------------------------------------------ #
    #  Private helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _apportion(
        proportions: Sequence,
        available: Sequence,
        total_order,
    ) -> Dict[str, np.ndarray]:
        """Run target leveling + largest-remainder rounding; return all steps."""
        share = np.asarray(AllocationEngine.normalize(proportions), dtype=float)
        stock = np.asarray([to_quantity(a) for a in available], dtype=float)

        if len(share) != len(stock):
            raise ValueError(
                f"Got {len(share)} proportions but {len(stock)} stock levels; "
                "both must come from the same category list."
            )

        n = len(share)
        units = AllocationEngine._order_units(total_order)

        target_total = stock.sum() + max(units, 0)
        target = share * target_total
        deficit = np.maximum(0.0, target - stock)
        deficit_sum = float(deficit.sum())

        steps = {
            "proportion": share,
            "available":  stock,
            "target":     target,
            "deficit":    deficit,
            "raw":        np.zeros(n, dtype=float),
            "base":       np.zeros(n, dtype=np.int64),
            "bonus":      np.zeros(n, dtype=bool),
            "order":      np.zeros(n, dtype=np.int64),
        }

        if deficit_sum == 0 or units <= 0:
            logger.debug(
                "Nothing to allocate (order=%s, deficit_sum=%.6g, categories=%d)",
                units, deficit_sum, n,
            )
            return steps

        raw = AllocationEngine._snap_to_integers(deficit * (units / deficit_sum))
        base = np.floor(raw).astype(np.int64)
        bonus = AllocationEngine._largest_remainder(raw, base, units)

        steps["raw"] = raw
        steps["base"] = base
        steps["bonus"] = bonus
        steps["order"] = base + bonus.astype(np.int64)
        return steps

    @staticmethod
    def _largest_remainder(
        raw: np.ndarray,
        base: np.ndarray,
        units: int,
    ) -> np.ndarray:
        """
        Mark the categories that receive one leftover unit each.

        Leftover = *units* minus the floored total.  Categories are ranked by
        descending fractional part; the stable sort keeps ties in the order
        the categories were supplied.
        """
        remainder = max(units - int(base.sum()), 0)
        ranking = np.argsort(-(raw - base), kind="stable")

        bonus = np.zeros(len(raw), dtype=bool)
        bonus[ranking[:remainder]] = True

        logger.debug(
            "Largest remainder: %d leftover unit(s) to indices %s",
            remainder, ranking[:remainder].tolist(),
        )
        return bonus

    @staticmethod
    def _snap_to_integers(raw: np.ndarray) -> np.ndarray:
        """Round values within SUM_TOLERANCE of an integer onto it."""
        nearest = np.rint(raw)
        return np.where(np.abs(raw - nearest) <= SUM_TOLERANCE, nearest, raw)

    @staticmethod
    def _order_units(total_order) -> int:
        """Coerce the order total to whole pieces (half-up rounding)."""
        return int(math.floor(to_number(total_order) + 0.5))


# Plain-function aliases for callers that don't need the class.
normalize = AllocationEngine.normalize
allocate = AllocationEngine.allocate
