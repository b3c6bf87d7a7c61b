"""
db/exceptions.py
----------------
Error raised by every dashboard fetch when the underlying query fails.
"""


class DataFetchError(RuntimeError):
    """
    A dashboard query failed.

    The message names the fetch ("Failed to fetch invoices.") and the
    original database error is chained as ``__cause__``.
    """
