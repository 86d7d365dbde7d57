"""
size_allocator/config.py
------------------------
Shared numeric configuration.

Keeping these separate from size_allocator/constants.py (which holds column
names and sample size runs) keeps the tunable parameters in one place.
"""

# ---------------------------------------------------------------------------
# Order defaults
# ---------------------------------------------------------------------------
# Total pieces ordered when the caller supplies nothing, and the share of that
# total routed to the primary variant in dual mode.

DEFAULT_TOTAL_ORDER: int = 800
DEFAULT_PRIMARY_SHARE: float = 0.4

# ---------------------------------------------------------------------------
# Floating-point tolerance
# ---------------------------------------------------------------------------
# Used when checking that proportions sum to 1 and when snapping scaled
# shares such as 4.9999999999 back onto the integer they represent, so the
# floor step does not lose a unit to rounding noise.

SUM_TOLERANCE: float = 1e-9

# Digits kept for the proportion column of tabular views.
PROPORTION_DIGITS: int = 6
