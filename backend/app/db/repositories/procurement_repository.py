"""
Procurement record repository for database operations.
"""

from typing import Optional, List
from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.db.repositories.base_repository import BaseRepository
from app.models.procurement import ProcurementRecord


class ProcurementRecordRepository(BaseRepository[ProcurementRecord]):
    """Repository for procurement record operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(ProcurementRecord, session)

    async def list_by_date_range(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[ProcurementRecord]:
        """List procurement records purchased within the inclusive date range."""
        query = select(ProcurementRecord)
        if start_date:
            query = query.where(ProcurementRecord.purchase_date >= start_date)
        if end_date:
            query = query.where(ProcurementRecord.purchase_date <= end_date)
        query = query.order_by(ProcurementRecord.id).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())
