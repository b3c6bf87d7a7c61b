from __future__ import annotations

from datetime import date

import pytest

from main import _parse_args, show_invoices


def test_invoices_command_defaults() -> None:
    args = _parse_args(["invoices"])
    assert args.command == "invoices"
    assert args.query == ""
    assert args.page == 1


def test_invoices_command_accepts_query_and_page() -> None:
    args = _parse_args(["invoices", "rabbit", "--page", "2"])
    assert args.query == "rabbit"
    assert args.page == 2


def test_command_is_required() -> None:
    with pytest.raises(SystemExit):
        _parse_args([])


def test_show_invoices_prints_rows_and_pages(fake_db, capsys) -> None:
    from services.dashboard_service import DashboardService

    fake_db.respond("COUNT(*)", "JOIN customers", rows=[{"count": 60}])
    fake_db.respond(
        "LIMIT %(limit)s",
        rows=[
            {
                "id": "i1",
                "customer_id": "c1",
                "amount": 3040,
                "date": date(2022, 10, 29),
                "status": "paid",
                "name": "Amy Burns",
                "email": "amy@burns.com",
                "image_url": "/customers/amy-burns.png",
            }
        ],
    )

    show_invoices(DashboardService(), "amy", 5)

    out = capsys.readouterr().out
    assert "Amy Burns" in out
    assert "$30.40" in out
    assert "Oct 29, 2022" in out
    assert "Page 5 of 10: 1 ... 4 5 6 ... 10" in out
