"""
services/dashboard_service.py
------------------------------
Every read the dashboard pages need, in one place.
Orchestrates the repositories; the overview cards run their
three independent queries concurrently.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from config import CARD_QUERY_WORKERS, LATEST_INVOICES_LIMIT
from db.exceptions import DataFetchError
from models.customer import CustomerField, CustomerTableRow
from models.dashboard import CardData
from models.invoice import InvoiceForm, InvoiceTableRow, LatestInvoice
from models.revenue import Revenue
from models.user import User
from repositories.customer_repo import CustomerRepository
from repositories.invoice_repo import InvoiceRepository
from repositories.revenue_repo import RevenueRepository
from repositories.user_repo import UserRepository
from utils.formatting import format_currency
from utils.logger import get_logger

logger = get_logger(__name__)


class DashboardService:
    """
    Read-only facade over the dashboard repositories.

    Every method either returns display-ready view models or raises
    DataFetchError naming the fetch that failed.
    """

    def __init__(self):
        self.revenue_repo = RevenueRepository()
        self.invoice_repo = InvoiceRepository()
        self.customer_repo = CustomerRepository()
        self.user_repo = UserRepository()

    # ── OVERVIEW ──────────────────────────────────────────

    def fetch_revenue(self) -> list[Revenue]:
        return self.revenue_repo.get_all()

    def fetch_latest_invoices(self, limit: int = LATEST_INVOICES_LIMIT) -> list[LatestInvoice]:
        return self.invoice_repo.get_latest(limit)

    def fetch_card_data(self) -> CardData:
        """
        Invoice count, customer count and paid/pending totals.

        The three queries are independent and run in parallel, each on its
        own pooled connection. If any of them fails the whole call fails.
        """
        try:
            with ThreadPoolExecutor(max_workers=CARD_QUERY_WORKERS) as executor:
                invoice_count = executor.submit(self.invoice_repo.count_all)
                customer_count = executor.submit(self.customer_repo.count_all)
                status_totals = executor.submit(self.invoice_repo.get_status_totals)

                number_of_invoices = invoice_count.result()
                number_of_customers = customer_count.result()
                totals = status_totals.result()
        except Exception as e:
            logger.error(f"Database Error: {e}")
            raise DataFetchError("Failed to fetch card data.") from e

        return CardData(
            number_of_invoices=number_of_invoices,
            number_of_customers=number_of_customers,
            total_paid_invoices=format_currency(totals["paid"]),
            total_pending_invoices=format_currency(totals["pending"]),
        )

    # ── INVOICES ──────────────────────────────────────────

    def fetch_filtered_invoices(self, query: str, current_page: int) -> list[InvoiceTableRow]:
        return self.invoice_repo.get_filtered(query, current_page)

    def fetch_invoices_pages(self, query: str) -> int:
        return self.invoice_repo.count_pages(query)

    def fetch_invoice_by_id(self, invoice_id: str) -> Optional[InvoiceForm]:
        return self.invoice_repo.get_by_id(invoice_id)

    # ── CUSTOMERS ─────────────────────────────────────────

    def fetch_customers(self) -> list[CustomerField]:
        return self.customer_repo.get_all()

    def fetch_filtered_customers(self, query: str) -> list[CustomerTableRow]:
        return self.customer_repo.get_filtered(query)

    # ── AUTH LOOKUP ───────────────────────────────────────

    def get_user(self, email: str) -> Optional[User]:
        """Credential record for `email`, or None if no such user."""
        return self.user_repo.get_by_email(email)
