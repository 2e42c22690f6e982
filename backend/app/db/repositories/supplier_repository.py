"""
Supplier repository for database operations.
"""

from typing import List
from decimal import Decimal
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.db.repositories.base_repository import BaseRepository
from app.models.supplier import Supplier


class SupplierRepository(BaseRepository[Supplier]):
    """Repository for supplier operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Supplier, session)

    async def list_by_min_rating(
        self,
        min_rating: Decimal,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Supplier]:
        """List suppliers rated at or above min_rating, best first."""
        query = (
            select(Supplier)
            .where(Supplier.rating >= min_rating)
            .order_by(Supplier.rating.desc(), Supplier.id)
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())
