"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
CREATE EXTENSION IF NOT EXISTS "uuid-ossp";

-- Users table: dashboard logins (password holds a bcrypt hash)
CREATE TABLE IF NOT EXISTS users (
    id              UUID DEFAULT uuid_generate_v4() PRIMARY KEY,
    name            VARCHAR(255) NOT NULL,
    email           TEXT NOT NULL UNIQUE,
    password        TEXT NOT NULL
);

-- Customers table: who invoices are billed to
CREATE TABLE IF NOT EXISTS customers (
    id              UUID DEFAULT uuid_generate_v4() PRIMARY KEY,
    name            VARCHAR(255) NOT NULL,
    email           VARCHAR(255) NOT NULL,
    image_url       VARCHAR(255) NOT NULL
);

-- Invoices table: amount is stored in cents
CREATE TABLE IF NOT EXISTS invoices (
    id              UUID DEFAULT uuid_generate_v4() PRIMARY KEY,
    customer_id     UUID NOT NULL REFERENCES customers(id) ON DELETE CASCADE,
    amount          INT NOT NULL,
    status          VARCHAR(255) NOT NULL CHECK (status IN ('pending', 'paid')),
    date            DATE NOT NULL
);

-- Revenue table: one row per month, in whole dollars
CREATE TABLE IF NOT EXISTS revenue (
    month           VARCHAR(4) NOT NULL UNIQUE,
    revenue         INT NOT NULL
);

-- Indexes for faster queries
CREATE INDEX IF NOT EXISTS idx_invoices_customer ON invoices(customer_id);
CREATE INDEX IF NOT EXISTS idx_invoices_date ON invoices(date);
"""


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        release_connection(conn)


if __name__ == "__main__":
    from db.connection import init_pool
    init_pool()
    create_tables()
    print("Database schema created successfully.")
