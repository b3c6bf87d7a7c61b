"""
repositories/customer_repo.py
------------------------------
Data access layer for customers and their invoice totals.
"""

from models.customer import CustomerField, CustomerTableRow
from repositories.base import BaseRepository, fetch_errors, like_pattern
from utils.formatting import format_currency


class CustomerRepository(BaseRepository):
    """Read-only queries on the customers table."""

    @fetch_errors("Failed to fetch all customers.")
    def get_all(self) -> list[CustomerField]:
        """All customers as (id, name), ordered by name."""
        sql = """
            SELECT id, name
            FROM customers
            ORDER BY name ASC;
        """
        return [CustomerField(id=str(r["id"]), name=r["name"]) for r in self._fetch_all(sql)]

    @fetch_errors("Failed to count customers.")
    def count_all(self) -> int:
        """Total number of customers."""
        row = self._fetch_one("SELECT COUNT(*) AS count FROM customers;")
        return int(row["count"] or 0)

    @fetch_errors("Failed to fetch customer table.")
    def get_filtered(self, query: str) -> list[CustomerTableRow]:
        """
        Customers whose name or email contains `query`, with invoice aggregates.

        Customers without invoices are included with zero totals.

        Returns:
            List of CustomerTableRow ordered by name, totals formatted as currency.
        """
        sql = """
            SELECT
                customers.id,
                customers.name,
                customers.email,
                customers.image_url,
                COUNT(invoices.id) AS total_invoices,
                SUM(CASE WHEN invoices.status = 'pending' THEN invoices.amount ELSE 0 END) AS total_pending,
                SUM(CASE WHEN invoices.status = 'paid' THEN invoices.amount ELSE 0 END) AS total_paid
            FROM customers
            LEFT JOIN invoices ON customers.id = invoices.customer_id
            WHERE
                customers.name ILIKE %(pattern)s OR
                customers.email ILIKE %(pattern)s
            GROUP BY customers.id, customers.name, customers.email, customers.image_url
            ORDER BY customers.name ASC;
        """
        rows = self._fetch_all(sql, {"pattern": like_pattern(query)})
        return [
            CustomerTableRow(
                id=str(r["id"]),
                name=r["name"],
                email=r["email"],
                image_url=r["image_url"],
                total_invoices=int(r["total_invoices"] or 0),
                total_pending=format_currency(r["total_pending"]),
                total_paid=format_currency(r["total_paid"]),
            )
            for r in rows
        ]
