"""
repositories/base.py
--------------------
Shared plumbing for the read-only repositories: borrowing a pooled
connection, running a query with dict rows, and turning any failure
into a DataFetchError.
"""

from functools import wraps
from typing import Any, Callable, Optional

from psycopg2 import extras

from db.connection import get_connection, release_connection
from db.exceptions import DataFetchError
from utils.logger import get_logger

logger = get_logger(__name__)


def fetch_errors(message: str) -> Callable:
    """
    Decorator that logs any error raised by a fetch and re-raises it
    as ``DataFetchError(message)``.

    Usage:
        @fetch_errors("Failed to fetch revenue data.")
        def get_all(self):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except DataFetchError:
                raise
            except Exception as e:
                logger.error(f"Database Error: {e}")
                raise DataFetchError(message) from e
        return wrapper
    return decorator


def like_pattern(query: Optional[str]) -> str:
    """
    Build an ILIKE substring pattern; '%' and '_' typed by the user
    match themselves rather than acting as wildcards.
    """
    text = (query or "").replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{text}%"


class BaseRepository:
    """Run SELECT statements on a pooled connection and return dict rows."""

    @staticmethod
    def _fetch_all(sql: str, params: Any = None) -> list[dict]:
        conn = get_connection()
        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, params)
                return cur.fetchall()
        finally:
            release_connection(conn)

    @staticmethod
    def _fetch_one(sql: str, params: Any = None) -> Optional[dict]:
        conn = get_connection()
        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, params)
                return cur.fetchone()
        finally:
            release_connection(conn)
