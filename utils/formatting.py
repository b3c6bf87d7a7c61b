"""
utils/formatting.py
-------------------
Display helpers shared by the repositories and services:
currency, dates, pagination links and revenue chart labels.
"""

import math
from datetime import date
from decimal import Decimal
from typing import Iterable, Union

from models.revenue import Revenue

Cents = Union[int, Decimal, str, None]


def cents_to_dollars(cents: Cents) -> Decimal:
    """Convert an integer amount in cents to a dollar Decimal (None counts as 0)."""
    return Decimal(cents or 0) / 100


def format_currency(cents: Cents) -> str:
    """
    Format an amount stored in cents as US dollars.

    Examples:
        >>> format_currency(123456)
        '$1,234.56'
    """
    dollars = cents_to_dollars(cents)
    sign = "-" if dollars < 0 else ""
    return f"{sign}${abs(dollars):,.2f}"


def format_date_to_local(value: date) -> str:
    """Format a date as e.g. 'Dec 6, 2022'."""
    return f"{value.strftime('%b')} {value.day}, {value.year}"


def total_pages(count: int, per_page: int) -> int:
    """Number of pages needed to show `count` rows, `per_page` at a time."""
    return math.ceil(int(count or 0) / per_page)


def generate_pagination(current_page: int, total: int) -> list:
    """
    Build the list of page links to show under a table.

    Gaps are represented by the string '...'.
    """
    # Few enough pages to show them all
    if total <= 7:
        return list(range(1, total + 1))

    if current_page <= 3:
        return [1, 2, 3, "...", total - 1, total]

    if current_page >= total - 2:
        return [1, 2, "...", total - 2, total - 1, total]

    return [1, "...", current_page - 1, current_page, current_page + 1, "...", total]


def generate_y_axis(revenue: Iterable[Revenue]) -> tuple[list[str], int]:
    """
    Compute the revenue chart y-axis labels in $1K steps.

    Returns:
        (labels from top to bottom, top label value in dollars)
    """
    highest = max((r.revenue for r in revenue), default=0)
    top_label = math.ceil(highest / 1000) * 1000
    labels = [f"${step // 1000}K" for step in range(top_label, -1, -1000)]
    return labels, top_label
