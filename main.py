"""
main.py
-------
Command-line entry point for the dashboard data layer.

Commands:
    init-db    Create the schema.
    seed       Create the schema and load placeholder data.
    overview   Print the overview cards, revenue chart axis and latest invoices.
    invoices   Print one page of the invoices table for a search string.
"""

import argparse
from typing import Sequence

from db.connection import close_pool, init_pool
from db.init_db import create_tables
from db.seed import seed_database
from services.dashboard_service import DashboardService
from utils.formatting import format_currency, format_date_to_local, generate_pagination, generate_y_axis
from utils.logger import get_logger

logger = get_logger(__name__)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Invoice dashboard data utilities")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init-db", help="Create the dashboard tables")
    subparsers.add_parser("seed", help="Create the tables and load placeholder data")
    subparsers.add_parser("overview", help="Show the dashboard overview")

    invoices_parser = subparsers.add_parser("invoices", help="Show one page of the invoices table")
    invoices_parser.add_argument("query", nargs="?", default="", help="Search string")
    invoices_parser.add_argument("--page", type=int, default=1, help="Page number (default: 1)")

    return parser.parse_args(argv)


def show_overview(service: DashboardService) -> None:
    cards = service.fetch_card_data()
    print(f"Collected: {cards.total_paid_invoices}")
    print(f"Pending:   {cards.total_pending_invoices}")
    print(f"Invoices:  {cards.number_of_invoices}")
    print(f"Customers: {cards.number_of_customers}")

    revenue = service.fetch_revenue()
    labels, _ = generate_y_axis(revenue)
    print(f"\nRevenue axis: {' '.join(labels)}")
    for r in revenue:
        print(f"  {r.month}: ${r.revenue:,}")

    print("\nLatest invoices:")
    for invoice in service.fetch_latest_invoices():
        print(f"  {invoice.name:<20} {invoice.email:<25} {invoice.amount:>12}")


def show_invoices(service: DashboardService, query: str, page: int) -> None:
    pages = service.fetch_invoices_pages(query)
    for invoice in service.fetch_filtered_invoices(query, page):
        print(
            f"  {invoice.name:<20} {invoice.email:<25} {format_currency(invoice.amount):>12} "
            f"{format_date_to_local(invoice.date):>14} {invoice.status}"
        )
    links = " ".join(str(p) for p in generate_pagination(page, pages))
    print(f"\nPage {page} of {pages}: {links}")


def main(argv: Sequence[str] | None = None) -> None:
    """Run a single CLI command against the configured database."""
    args = _parse_args(argv)
    logger.info(f"Running command '{args.command}'")

    init_pool()
    try:
        if args.command == "init-db":
            create_tables()
        elif args.command == "seed":
            create_tables()
            seed_database()
        elif args.command == "overview":
            show_overview(DashboardService())
        elif args.command == "invoices":
            show_invoices(DashboardService(), args.query, args.page)
    finally:
        close_pool()


if __name__ == "__main__":
    main()
