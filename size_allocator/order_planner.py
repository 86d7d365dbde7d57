"""
size_allocator/order_planner.py
-------------------------------
Splits one total order between product variants and allocates each
variant's share across its size run.

Single mode sends the whole order to one size run.  Dual mode routes
``round(total * primary_share)`` pieces to the boat-neck run and the rest to
the V-neck run, so the two variant orders always add up to the total.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from size_allocator.allocation_engine import AllocationEngine
from size_allocator.category import Category
from size_allocator.config import DEFAULT_PRIMARY_SHARE, DEFAULT_TOTAL_ORDER
from size_allocator.enums import OrderMode, Variant
from size_allocator.input_parser import to_order_total, to_share

logger = logging.getLogger(__name__)


@dataclass
class VariantAllocation:
    """Allocation result for one variant's size run."""
    variant: Variant
    categories: List[Category]
    order_quantity: int
    proportions: List[float] = field(default_factory=list)
    orders: List[int] = field(default_factory=list)

    @property
    def total_weight(self) -> float:
        return sum(c.weight for c in self.categories)

    @property
    def total_available(self) -> float:
        return sum(c.available for c in self.categories)

    @property
    def proportion_sum(self) -> float:
        return sum(self.proportions)

    @property
    def allocated(self) -> int:
        """Pieces actually allocated (equals order_quantity unless nothing was short)."""
        return sum(self.orders)


@dataclass
class OrderPlan:
    """A total order broken down per variant."""
    mode: OrderMode
    total_order: int
    primary_share: float
    sections: List[VariantAllocation] = field(default_factory=list)

    @property
    def secondary_share(self) -> float:
        return 1.0 - self.primary_share if self.mode == OrderMode.DUAL else 0.0

    @property
    def allocated_total(self) -> int:
        return sum(s.allocated for s in self.sections)

    def section(self, variant: Variant) -> VariantAllocation:
        """Return the allocation for *variant*; KeyError if it isn't planned."""
        for s in self.sections:
            if s.variant == variant:
                return s
        raise KeyError(f"No {variant.value!r} section in a {self.mode.value!r} plan.")


class OrderPlanner:
    """
    Build :class:`OrderPlan` objects from size runs and order settings.

    Stateless; every method is a ``@staticmethod``::

        plan = OrderPlanner.plan(boat_run, v_run, total_order=800,
                                 primary_share=0.4, mode=OrderMode.DUAL)
        plan.section(Variant.BOAT_NECK).orders
    """

    @staticmethod
    def resolve_mode(mode: Union[OrderMode, str]) -> OrderMode:
        """Accept an OrderMode, its name (``"dual"``) or its label."""
        if isinstance(mode, OrderMode):
            return mode
        text = str(mode).strip()
        for candidate in OrderMode:
            if text.upper() == candidate.name or text == candidate.value:
                return candidate
        raise ValueError(
            f"Unknown order mode: {mode!r}. "
            f"Choose from {', '.join(repr(m.name.lower()) for m in OrderMode)}."
        )

    @staticmethod
    def split_order(
        total_order=DEFAULT_TOTAL_ORDER,
        primary_share=DEFAULT_PRIMARY_SHARE,
        mode: Union[OrderMode, str] = OrderMode.DUAL,
    ) -> Tuple[int, int]:
        """
        Return ``(primary, secondary)`` piece counts.

        The primary count is rounded half-up and the secondary variant takes
        whatever is left, so the pair always sums to the whole total.
        """
        mode = OrderPlanner.resolve_mode(mode)
        total = to_order_total(total_order)
        if mode == OrderMode.SINGLE:
            return total, 0

        primary = int(math.floor(total * to_share(primary_share) + 0.5))
        return primary, total - primary

    @staticmethod
    def plan(
        primary: Sequence[Category],
        secondary: Optional[Sequence[Category]] = None,
        total_order=DEFAULT_TOTAL_ORDER,
        primary_share=DEFAULT_PRIMARY_SHARE,
        mode: Union[OrderMode, str] = OrderMode.DUAL,
    ) -> OrderPlan:
        """
        Split *total_order* and allocate each variant's share.

        Raises
        ------
        ValueError
            Unknown *mode*, or dual mode without *secondary* categories.
        """
        mode = OrderPlanner.resolve_mode(mode)
        if mode == OrderMode.DUAL and secondary is None:
            raise ValueError("Dual mode needs a secondary size run.")

        total = to_order_total(total_order)
        share = to_share(primary_share) if mode == OrderMode.DUAL else 1.0
        primary_qty, secondary_qty = OrderPlanner.split_order(total, share, mode)

        if mode == OrderMode.SINGLE:
            sections = [OrderPlanner._section(Variant.PRODUCT, primary, primary_qty)]
        else:
            sections = [
                OrderPlanner._section(Variant.BOAT_NECK, primary, primary_qty),
                OrderPlanner._section(Variant.V_NECK, secondary, secondary_qty),
            ]

        plan = OrderPlan(mode=mode, total_order=total,
                         primary_share=share, sections=sections)
        logger.debug(
            "Planned %s order of %d: %s",
            mode.name.lower(), total,
            ", ".join(f"{s.variant.value}={s.allocated}" for s in sections),
        )
        return plan

    @staticmethod
    def _section(
        variant: Variant,
        categories: Sequence[Category],
        quantity: int,
    ) -> VariantAllocation:
        cats = list(categories)
        return VariantAllocation(
            variant=variant,
            categories=cats,
            order_quantity=quantity,
            proportions=AllocationEngine.normalize([c.weight for c in cats]),
            orders=AllocationEngine.allocate_categories(cats, quantity),
        )
