"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "dashboard")
DB_USER: str = os.getenv("DB_USER", "dashboard_user")
DB_PASS: str = os.getenv("DB_PASS", "")

# A full connection string (e.g. from a managed Postgres provider) wins
DATABASE_URL: str = os.getenv("POSTGRES_URL") or (
    f"postgresql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)

DB_POOL_MIN: int = int(os.getenv("DB_POOL_MIN", "1"))
DB_POOL_MAX: int = int(os.getenv("DB_POOL_MAX", "5"))

# ── Dashboard ─────────────────────────────────────────────
ITEMS_PER_PAGE: int = 6
LATEST_INVOICES_LIMIT: int = 5
CARD_QUERY_WORKERS: int = 3

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
