"""
Health repository.
Provides database connectivity and schema checks.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import inspect, text

from app.db.base import Base


class HealthRepository:
    """Repository for health check operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def check_database(self) -> bool:
        """
        Check database connectivity.

        Returns:
            True if database answers a trivial query
        """
        result = await self.session.execute(text("SELECT 1"))
        return result.scalar() == 1

    async def missing_tables(self) -> List[str]:
        """
        List model tables that do not exist in the connected database.

        Returns:
            Table names, empty when the schema is complete
        """
        connection = await self.session.connection()
        existing = await connection.run_sync(
            lambda sync_conn: set(inspect(sync_conn).get_table_names())
        )
        return sorted(name for name in Base.metadata.tables if name not in existing)
