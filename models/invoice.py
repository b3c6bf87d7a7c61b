"""
models/invoice.py
-----------------
View records built from the invoices table, flattened with their customer.
Amounts are stored as integer cents in the database.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class LatestInvoice:
    """A recent invoice card; `amount` is already formatted for display."""
    id: str
    name: str
    email: str
    image_url: str
    amount: str


@dataclass(frozen=True)
class InvoiceTableRow:
    """
    One row of the invoices table page.

    Attributes:
        id: Invoice UUID.
        customer_id: UUID of the billed customer.
        name: Customer name.
        email: Customer email.
        image_url: Customer avatar path.
        date: Issue date.
        amount: Amount in cents, as stored.
        status: 'pending' or 'paid'.
    """
    id: str
    customer_id: str
    name: str
    email: str
    image_url: str
    date: date
    amount: int
    status: str


@dataclass(frozen=True)
class InvoiceForm:
    """Invoice as loaded into the edit form; `amount` is in dollars."""
    id: str
    customer_id: str
    amount: Decimal
    status: str
