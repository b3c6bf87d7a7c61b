"""
repositories/user_repo.py
--------------------------
Data access layer for user records (credential lookup only).
"""

from typing import Optional

from models.user import User
from repositories.base import BaseRepository, fetch_errors


class UserRepository(BaseRepository):
    """Read-only queries on the users table."""

    @fetch_errors("Failed to fetch user.")
    def get_by_email(self, email: str) -> Optional[User]:
        """
        Fetch a user by their login email.

        Returns:
            A User (with the stored password hash) or None.
        """
        sql = "SELECT id, name, email, password FROM users WHERE email = %s;"
        row = self._fetch_one(sql, (email,))
        if row is None:
            return None
        return User(
            id=str(row["id"]),
            name=row["name"],
            email=row["email"],
            password=row["password"],
        )
