"""
repositories/invoice_repo.py
-----------------------------
Data access layer for invoices.
All SQL queries related to the `invoices` table live here.
Amounts come out of the database in cents and are only converted
on the way into a view model.
"""

from typing import Optional

from config import ITEMS_PER_PAGE, LATEST_INVOICES_LIMIT
from models.invoice import InvoiceForm, InvoiceTableRow, LatestInvoice
from repositories.base import BaseRepository, fetch_errors, like_pattern
from utils.formatting import cents_to_dollars, format_currency, total_pages

_SEARCH_WHERE = """
    WHERE
        customers.name ILIKE %(pattern)s OR
        customers.email ILIKE %(pattern)s OR
        invoices.amount::text ILIKE %(pattern)s OR
        invoices.date::text ILIKE %(pattern)s OR
        invoices.status ILIKE %(pattern)s
"""


class InvoiceRepository(BaseRepository):
    """Read-only queries on the invoices table joined with customers."""

    # ── DASHBOARD ─────────────────────────────────────────

    @fetch_errors("Failed to fetch the latest invoices.")
    def get_latest(self, limit: int = LATEST_INVOICES_LIMIT) -> list[LatestInvoice]:
        """
        Fetch the most recent invoices with their customer.

        Args:
            limit: How many invoices to return.

        Returns:
            List of LatestInvoice, newest first, amounts formatted.
        """
        sql = """
            SELECT invoices.amount, customers.name, customers.image_url, customers.email, invoices.id
            FROM invoices
            JOIN customers ON invoices.customer_id = customers.id
            ORDER BY invoices.date DESC
            LIMIT %s;
        """
        return [
            LatestInvoice(
                id=str(r["id"]),
                name=r["name"],
                email=r["email"],
                image_url=r["image_url"],
                amount=format_currency(r["amount"]),
            )
            for r in self._fetch_all(sql, (limit,))
        ]

    @fetch_errors("Failed to count invoices.")
    def count_all(self) -> int:
        """Total number of invoices."""
        row = self._fetch_one("SELECT COUNT(*) AS count FROM invoices;")
        return int(row["count"] or 0)

    @fetch_errors("Failed to sum invoices by status.")
    def get_status_totals(self) -> dict:
        """
        Sum invoice amounts by status.

        Returns:
            Dict {'paid': cents, 'pending': cents}; missing sums are 0.
        """
        sql = """
            SELECT
                SUM(CASE WHEN status = 'paid' THEN amount ELSE 0 END) AS paid,
                SUM(CASE WHEN status = 'pending' THEN amount ELSE 0 END) AS pending
            FROM invoices;
        """
        row = self._fetch_one(sql) or {}
        return {"paid": row.get("paid") or 0, "pending": row.get("pending") or 0}

    # ── TABLE PAGE ────────────────────────────────────────

    @fetch_errors("Failed to fetch invoices.")
    def get_filtered(self, query: str, current_page: int = 1) -> list[InvoiceTableRow]:
        """
        Fetch one page of invoices matching a search string.

        Args:
            query: Substring matched case-insensitively against customer
                name/email and invoice amount/date/status.
            current_page: 1-based page number; values below 1 mean page 1.

        Returns:
            Up to ITEMS_PER_PAGE InvoiceTableRow objects, newest first.
        """
        offset = (max(current_page, 1) - 1) * ITEMS_PER_PAGE
        return self.search(query, limit=ITEMS_PER_PAGE, offset=offset)

    def search(self, query: str, limit: Optional[int] = None, offset: int = 0) -> list[InvoiceTableRow]:
        """Matching invoices without a page size (`limit=None` returns all)."""
        sql = f"""
            SELECT
                invoices.id,
                invoices.customer_id,
                invoices.amount,
                invoices.date,
                invoices.status,
                customers.name,
                customers.email,
                customers.image_url
            FROM invoices
            JOIN customers ON invoices.customer_id = customers.id
            {_SEARCH_WHERE}
            ORDER BY invoices.date DESC, invoices.id
            LIMIT %(limit)s OFFSET %(offset)s;
        """
        params = {"pattern": like_pattern(query), "limit": limit, "offset": offset}
        return [self._row_to_table_row(r) for r in self._fetch_all(sql, params)]

    @fetch_errors("Failed to fetch total number of invoices.")
    def count_pages(self, query: str) -> int:
        """
        Number of table pages needed for invoices matching `query`.

        Returns:
            ceil(matching rows / ITEMS_PER_PAGE); 0 when nothing matches.
        """
        sql = f"""
            SELECT COUNT(*) AS count
            FROM invoices
            JOIN customers ON invoices.customer_id = customers.id
            {_SEARCH_WHERE};
        """
        row = self._fetch_one(sql, {"pattern": like_pattern(query)})
        return total_pages(row["count"], ITEMS_PER_PAGE)

    # ── EDIT FORM ─────────────────────────────────────────

    @fetch_errors("Failed to fetch invoice.")
    def get_by_id(self, invoice_id: str) -> Optional[InvoiceForm]:
        """
        Fetch a single invoice for the edit form.

        Returns:
            An InvoiceForm with the amount in dollars, or None if not found.
        """
        sql = """
            SELECT id, customer_id, amount, status
            FROM invoices
            WHERE id = %s;
        """
        row = self._fetch_one(sql, (invoice_id,))
        if row is None:
            return None
        return InvoiceForm(
            id=str(row["id"]),
            customer_id=str(row["customer_id"]),
            amount=cents_to_dollars(row["amount"]),
            status=row["status"],
        )

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_table_row(row: dict) -> InvoiceTableRow:
        """Convert a joined invoice/customer row to an InvoiceTableRow."""
        return InvoiceTableRow(
            id=str(row["id"]),
            customer_id=str(row["customer_id"]),
            name=row["name"],
            email=row["email"],
            image_url=row["image_url"],
            date=row["date"],
            amount=int(row["amount"]),
            status=row["status"],
        )
