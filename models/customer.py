"""
models/customer.py
------------------
View records built from the customers table.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CustomerField:
    """Minimal customer entry used to fill select boxes."""
    id: str
    name: str


@dataclass(frozen=True)
class CustomerTableRow:
    """
    One row of the customers table page, with invoice aggregates.

    Attributes:
        id: UUID primary key.
        name: Customer name.
        email: Customer email.
        image_url: Path to the customer's avatar.
        total_invoices: Number of invoices issued to the customer.
        total_pending: Formatted sum of pending invoices (e.g. '$1,234.56').
        total_paid: Formatted sum of paid invoices.
    """
    id: str
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: str
    total_paid: str
