"""
services/export_service.py
---------------------------
Generates CSV and Excel exports of the invoice and customer tables.
"""

import io

import pandas as pd

from repositories.base import fetch_errors
from repositories.customer_repo import CustomerRepository
from repositories.invoice_repo import InvoiceRepository
from utils.formatting import format_currency, format_date_to_local
from utils.logger import get_logger

logger = get_logger(__name__)


class ExportService:
    """Generates downloadable copies of the dashboard tables."""

    def __init__(self):
        self.invoice_repo = InvoiceRepository()
        self.customer_repo = CustomerRepository()

    def _invoices_frame(self, query: str) -> pd.DataFrame:
        invoices = self.invoice_repo.search(query)
        data = [
            {
                "Customer": i.name,
                "Email": i.email,
                "Amount": format_currency(i.amount),
                "Date": format_date_to_local(i.date),
                "Status": i.status,
            }
            for i in invoices
        ]
        return pd.DataFrame(data, columns=["Customer", "Email", "Amount", "Date", "Status"])

    @fetch_errors("Failed to export invoices.")
    def export_invoices_csv(self, query: str = "") -> io.BytesIO:
        """
        Export every invoice matching `query` (no pagination) as CSV.

        Returns:
            A BytesIO buffer containing the CSV data.
        """
        df = self._invoices_frame(query)
        buffer = io.BytesIO()
        df.to_csv(buffer, index=False, encoding="utf-8-sig")
        buffer.seek(0)
        logger.info(f"Exported {len(df)} invoices as CSV (query={query!r})")
        return buffer

    @fetch_errors("Failed to export customers.")
    def export_customers_excel(self, query: str = "") -> io.BytesIO:
        """
        Export the customers table matching `query` as an Excel (.xlsx) file,
        with a second sheet listing their invoices.

        Returns:
            A BytesIO buffer containing the Excel data.
        """
        customers = self.customer_repo.get_filtered(query)
        df = pd.DataFrame(
            [
                {
                    "Name": c.name,
                    "Email": c.email,
                    "Total Invoices": c.total_invoices,
                    "Total Pending": c.total_pending,
                    "Total Paid": c.total_paid,
                }
                for c in customers
            ],
            columns=["Name", "Email", "Total Invoices", "Total Pending", "Total Paid"],
        )

        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name="Customers", index=False)
            self._invoices_frame(query).to_excel(writer, sheet_name="Invoices", index=False)

        buffer.seek(0)
        logger.info(f"Exported {len(df)} customers as Excel (query={query!r})")
        return buffer
