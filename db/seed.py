"""
db/seed.py
----------
Loads placeholder customers, invoices, revenue and a demo user.
Existing rows are left untouched, so it can be re-run.
    python -m db.seed
"""

import bcrypt
from psycopg2 import extras

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

USERS = [
    {
        "id": "410544b2-4001-4271-9855-fec4b6a6442a",
        "name": "User",
        "email": "user@nextmail.com",
        "password": "123456",
    },
]

CUSTOMERS = [
    ("d6e15727-9fe1-4961-8c5b-ea44a9bd81aa", "Evil Rabbit", "evil@rabbit.com", "/customers/evil-rabbit.png"),
    ("3958dc9e-712f-4377-85e9-fec4b6a6442a", "Delba de Oliveira", "delba@oliveira.com", "/customers/delba-de-oliveira.png"),
    ("3958dc9e-742f-4377-85e9-fec4b6a6442a", "Lee Robinson", "lee@robinson.com", "/customers/lee-robinson.png"),
    ("76d65c26-f784-44a2-ac19-586678f7c2f2", "Michael Novotny", "michael@novotny.com", "/customers/michael-novotny.png"),
    ("cc27c14a-0acf-4f4a-a6c9-d45682c144b9", "Amy Burns", "amy@burns.com", "/customers/amy-burns.png"),
    ("13d07535-c59e-4157-a011-f8d2ef4e0cbb", "Balazs Orban", "balazs@orban.com", "/customers/balazs-orban.png"),
]

# (customer_id, amount in cents, status, date)
INVOICES = [
    (CUSTOMERS[0][0], 15795, "pending", "2022-12-06"),
    (CUSTOMERS[1][0], 20348, "pending", "2022-11-14"),
    (CUSTOMERS[4][0], 3040, "paid", "2022-10-29"),
    (CUSTOMERS[3][0], 44800, "paid", "2023-09-10"),
    (CUSTOMERS[5][0], 34577, "pending", "2023-08-05"),
    (CUSTOMERS[2][0], 54246, "pending", "2023-07-16"),
    (CUSTOMERS[0][0], 666, "pending", "2023-06-27"),
    (CUSTOMERS[3][0], 32545, "paid", "2023-06-09"),
    (CUSTOMERS[4][0], 1250, "paid", "2023-06-17"),
    (CUSTOMERS[5][0], 8546, "paid", "2023-06-07"),
    (CUSTOMERS[1][0], 500, "paid", "2023-08-19"),
    (CUSTOMERS[5][0], 8945, "paid", "2023-06-03"),
    (CUSTOMERS[2][0], 1000, "paid", "2022-06-05"),
]

REVENUE = [
    ("Jan", 2000), ("Feb", 1800), ("Mar", 2200), ("Apr", 2500),
    ("May", 2300), ("Jun", 3200), ("Jul", 3500), ("Aug", 3700),
    ("Sep", 2500), ("Oct", 2800), ("Nov", 3000), ("Dec", 4800),
]


def hash_password(password: str) -> str:
    """Hash a plain-text password with bcrypt (cost 10)."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=10)).decode("utf-8")


def seed_database() -> dict:
    """
    Insert all placeholder rows in a single transaction.

    Returns:
        Dict with the number of rows submitted per table.
    """
    users = [(u["id"], u["name"], u["email"], hash_password(u["password"])) for u in USERS]

    conn = get_connection()
    try:
        with conn.cursor() as cur:
            extras.execute_values(
                cur,
                "INSERT INTO users (id, name, email, password) VALUES %s ON CONFLICT (id) DO NOTHING",
                users,
            )
            extras.execute_values(
                cur,
                "INSERT INTO customers (id, name, email, image_url) VALUES %s ON CONFLICT (id) DO NOTHING",
                CUSTOMERS,
            )
            # Invoice ids are generated, so only seed an empty table
            cur.execute("SELECT COUNT(*) FROM invoices;")
            if cur.fetchone()[0] == 0:
                extras.execute_values(
                    cur,
                    "INSERT INTO invoices (customer_id, amount, status, date) VALUES %s",
                    INVOICES,
                )
            extras.execute_values(
                cur,
                "INSERT INTO revenue (month, revenue) VALUES %s ON CONFLICT (month) DO NOTHING",
                REVENUE,
            )
        conn.commit()
        counts = {
            "users": len(users),
            "customers": len(CUSTOMERS),
            "invoices": len(INVOICES),
            "revenue": len(REVENUE),
        }
        logger.info(f"Seeded placeholder data: {counts}")
        return counts
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to seed database: {e}")
        raise
    finally:
        release_connection(conn)


if __name__ == "__main__":
    from db.connection import init_pool
    from db.init_db import create_tables
    init_pool()
    create_tables()
    seed_database()
    print("Placeholder data loaded.")
