"""
Client repository for database operations.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.db.repositories.base_repository import BaseRepository
from app.models.client import Client


class ClientRepository(BaseRepository[Client]):
    """Repository for client operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Client, session)

    async def list_by_name(
        self,
        name: str,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Client]:
        """List clients whose name contains the given text (case-insensitive)."""
        query = (
            select(Client)
            .where(Client.name.ilike(f"%{name}%"))
            .order_by(Client.id)
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())
