"""
models/user.py
--------------
Credential lookup record for dashboard users.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """
    A dashboard user as stored in the users table.

    Attributes:
        id: UUID primary key.
        name: Display name.
        email: Login email (unique).
        password: bcrypt hash of the password, never the plain text.
    """
    id: str
    name: str
    email: str
    password: str

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, name={self.name!r}, email={self.email!r})"
