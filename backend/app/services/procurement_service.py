"""
Procurement service with business logic.
"""

from typing import List, Optional
from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.base_service import EntityService
from app.db.repositories.procurement_repository import ProcurementRecordRepository
from app.schemas.procurement import (
    ProcurementRecordCreate,
    ProcurementRecordUpdate,
    ProcurementRecordResponse,
)
from app.models.procurement import ProcurementRecord


class ProcurementService(EntityService[ProcurementRecord]):
    """Service for procurement record operations."""

    def __init__(self, session: AsyncSession):
        self.procurement_repo = ProcurementRecordRepository(session)
        super().__init__(session, self.procurement_repo)

    async def create_procurement(
        self,
        procurement_data: ProcurementRecordCreate,
    ) -> ProcurementRecordResponse:
        """Record a purchase. Project, supplier and material must already exist."""
        record = await self._create_record(procurement_data.model_dump(exclude_unset=True))
        return ProcurementRecordResponse.model_validate(record)

    async def get_procurement(self, procurement_id: int) -> Optional[ProcurementRecordResponse]:
        """Get procurement record by ID."""
        record = await self.procurement_repo.get(procurement_id)
        if not record:
            return None
        return ProcurementRecordResponse.model_validate(record)

    async def list_procurement(
        self,
        skip: int = 0,
        limit: int = 100,
        project_id: Optional[int] = None,
        supplier_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> tuple[List[ProcurementRecordResponse], int]:
        """List procurement records with optional filters."""
        if start_date or end_date:
            records = await self.procurement_repo.list_by_date_range(start_date, end_date, skip, limit)
            total = len(records)
        else:
            filters = {}
            if project_id:
                filters["project_id"] = project_id
            if supplier_id:
                filters["supplier_id"] = supplier_id
            records = await self.procurement_repo.list(skip=skip, limit=limit, **filters)
            total = await self.procurement_repo.count(**filters)
        return [ProcurementRecordResponse.model_validate(record) for record in records], total

    async def update_procurement(
        self,
        procurement_id: int,
        procurement_data: ProcurementRecordUpdate,
    ) -> Optional[ProcurementRecordResponse]:
        """Update a procurement record."""
        updated = await self._update_record(
            procurement_id,
            procurement_data.model_dump(exclude_unset=True),
        )
        if not updated:
            return None
        return ProcurementRecordResponse.model_validate(updated)

    async def delete_procurement(self, procurement_id: int, cascade: bool = False) -> bool:
        """Delete a procurement record. Nothing depends on it, so cascade changes nothing."""
        return await self._delete_record(procurement_id, cascade=cascade)
