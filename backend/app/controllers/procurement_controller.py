"""
Procurement controller.
"""

from typing import Optional
from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.procurement_service import ProcurementService
from app.schemas.procurement import (
    ProcurementRecordCreate,
    ProcurementRecordUpdate,
    ProcurementRecordResponse,
    ProcurementRecordListResponse,
)


class ProcurementController(BaseController):
    """Controller for procurement record operations."""

    def __init__(self, session: AsyncSession):
        self.procurement_service = ProcurementService(session)

    async def create_procurement(
        self,
        procurement_data: ProcurementRecordCreate,
    ) -> ProcurementRecordResponse:
        """Create a procurement record."""
        return await self.procurement_service.create_procurement(procurement_data)

    async def get_procurement(self, procurement_id: int) -> Optional[ProcurementRecordResponse]:
        """Get procurement record by ID."""
        return await self.procurement_service.get_procurement(procurement_id)

    async def list_procurement(
        self,
        skip: int = 0,
        limit: int = 100,
        project_id: Optional[int] = None,
        supplier_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> ProcurementRecordListResponse:
        """List procurement records with optional filters."""
        records, total = await self.procurement_service.list_procurement(
            skip=skip,
            limit=limit,
            project_id=project_id,
            supplier_id=supplier_id,
            start_date=start_date,
            end_date=end_date,
        )
        return ProcurementRecordListResponse(items=records, total=total)

    async def update_procurement(
        self,
        procurement_id: int,
        procurement_data: ProcurementRecordUpdate,
    ) -> Optional[ProcurementRecordResponse]:
        """Update a procurement record."""
        return await self.procurement_service.update_procurement(procurement_id, procurement_data)

    async def delete_procurement(self, procurement_id: int) -> bool:
        """Delete a procurement record."""
        return await self.procurement_service.delete_procurement(procurement_id)
