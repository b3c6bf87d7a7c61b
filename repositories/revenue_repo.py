"""
repositories/revenue_repo.py
----------------------------
Data access layer for the monthly revenue series.
"""

from models.revenue import Revenue
from repositories.base import BaseRepository, fetch_errors


class RevenueRepository(BaseRepository):
    """Read-only queries on the revenue table."""

    @fetch_errors("Failed to fetch revenue data.")
    def get_all(self) -> list[Revenue]:
        """
        Fetch the revenue series in calendar order (Jan..Dec).

        Returns:
            List of Revenue objects.
        """
        sql = """
            SELECT month, revenue
            FROM revenue
            ORDER BY EXTRACT(MONTH FROM to_date(month, 'Mon'));
        """
        return [Revenue(month=r["month"], revenue=int(r["revenue"])) for r in self._fetch_all(sql)]
