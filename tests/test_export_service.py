from __future__ import annotations

from datetime import date

import pandas as pd
import psycopg2
import pytest

from db.exceptions import DataFetchError
from services.export_service import ExportService

INVOICE = {
    "id": "i1",
    "customer_id": "c1",
    "amount": 20348,
    "date": date(2022, 11, 14),
    "status": "pending",
    "name": "Delba de Oliveira",
    "email": "delba@oliveira.com",
    "image_url": "/customers/delba-de-oliveira.png",
}


def test_invoice_csv_contains_every_match_formatted(fake_db) -> None:
    fake_db.respond("LIMIT %(limit)s", rows=[INVOICE])

    buffer = ExportService().export_invoices_csv("delba")

    df = pd.read_csv(buffer, encoding="utf-8-sig")
    assert df.to_dict("records") == [
        {
            "Customer": "Delba de Oliveira",
            "Email": "delba@oliveira.com",
            "Amount": "$203.48",
            "Date": "Nov 14, 2022",
            "Status": "pending",
        }
    ]
    # Export is not paginated
    assert fake_db.executed[-1][1] == {"pattern": "%delba%", "limit": None, "offset": 0}


def test_customer_excel_has_both_sheets(fake_db) -> None:
    fake_db.respond(
        "LEFT JOIN invoices",
        rows=[
            {
                "id": "c1",
                "name": "Delba de Oliveira",
                "email": "delba@oliveira.com",
                "image_url": "/customers/delba-de-oliveira.png",
                "total_invoices": 1,
                "total_pending": 20348,
                "total_paid": 0,
            }
        ],
    )
    fake_db.respond("LIMIT %(limit)s", rows=[INVOICE])

    buffer = ExportService().export_customers_excel("delba")

    sheets = pd.read_excel(buffer, sheet_name=None)
    assert list(sheets) == ["Customers", "Invoices"]
    customers = sheets["Customers"]
    assert customers.loc[0, "Name"] == "Delba de Oliveira"
    assert customers.loc[0, "Total Pending"] == "$203.48"
    assert len(sheets["Invoices"]) == 1


def test_export_failure_is_wrapped(fake_db) -> None:
    fake_db.respond("", error=psycopg2.OperationalError("down"))

    with pytest.raises(DataFetchError, match="Failed to export invoices."):
        ExportService().export_invoices_csv()
