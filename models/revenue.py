"""
models/revenue.py
-----------------
Monthly revenue figure shown on the dashboard chart.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Revenue:
    """
    Attributes:
        month: Short month label (e.g. 'Jan').
        revenue: Total revenue for that month, in whole dollars.
    """
    month: str
    revenue: int
