"""
Material repository for database operations.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.db.repositories.base_repository import BaseRepository
from app.models.material import Material


class MaterialRepository(BaseRepository[Material]):
    """Repository for material operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Material, session)

    async def get_by_name(self, name: str) -> Optional[Material]:
        """Get the first material with this exact name."""
        result = await self.session.execute(
            select(Material).where(Material.name == name).order_by(Material.id).limit(1)
        )
        return result.scalar_one_or_none()
