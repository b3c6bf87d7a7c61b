"""
models/dashboard.py
-------------------
Summary figures shown on the dashboard overview cards.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CardData:
    number_of_invoices: int
    number_of_customers: int
    total_paid_invoices: str
    total_pending_invoices: str
