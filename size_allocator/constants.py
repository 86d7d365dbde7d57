"""
size_allocator/constants.py
---------------------------
Column names and sample size runs shared across modules.
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Tabular views
# ---------------------------------------------------------------------------

TABLE_COLUMNS: list[str] = ["Size", "Sales", "Proportion", "Available", "Order"]
SUMMARY_COLUMNS: list[str] = ["Key", "Value"]
TOTAL_LABEL: str = "TOTAL"


# ---------------------------------------------------------------------------
# Default size runs
# ---------------------------------------------------------------------------
# (label, sales, available) kept as raw text, the way they arrive from a form.

DEFAULT_BOAT_NECK_RUN: list[tuple[str, str, str]] = [
    ("XS",  "4",  "4"),
    ("S",   "47", "47"),
    ("M",   "22", "22"),
    ("L",   "38", "38"),
    ("XL",  "3",  "3"),
    ("XXL", "2",  "2"),
]

DEFAULT_V_NECK_RUN: list[tuple[str, str, str]] = [
    ("XS",  "12", "18"),
    ("S",   "31", "37"),
    ("M",   "62", "31"),
    ("L",   "53", "11"),
    ("XL",  "23", "7"),
    ("XXL", "26", "0"),
]
