"""
Supplier service with business logic.
"""

from typing import List, Optional
from decimal import Decimal
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.base_service import EntityService
from app.db.repositories.supplier_repository import SupplierRepository
from app.schemas.supplier import SupplierCreate, SupplierUpdate, SupplierResponse
from app.models.supplier import Supplier


class SupplierService(EntityService[Supplier]):
    """Service for supplier operations."""

    def __init__(self, session: AsyncSession):
        self.supplier_repo = SupplierRepository(session)
        super().__init__(session, self.supplier_repo)

    async def create_supplier(self, supplier_data: SupplierCreate) -> SupplierResponse:
        """Create a new supplier."""
        supplier = await self._create_record(supplier_data.model_dump(exclude_unset=True))
        return SupplierResponse.model_validate(supplier)

    async def get_supplier(self, supplier_id: int) -> Optional[SupplierResponse]:
        """Get supplier by ID."""
        supplier = await self.supplier_repo.get(supplier_id)
        if not supplier:
            return None
        return SupplierResponse.model_validate(supplier)

    async def list_suppliers(
        self,
        skip: int = 0,
        limit: int = 100,
        min_rating: Optional[Decimal] = None,
    ) -> tuple[List[SupplierResponse], int]:
        """List suppliers, optionally only those rated at least min_rating."""
        if min_rating is not None:
            suppliers = await self.supplier_repo.list_by_min_rating(min_rating, skip, limit)
            total = len(suppliers)
        else:
            suppliers = await self.supplier_repo.list(skip=skip, limit=limit)
            total = await self.supplier_repo.count()
        return [SupplierResponse.model_validate(supplier) for supplier in suppliers], total

    async def update_supplier(
        self,
        supplier_id: int,
        supplier_data: SupplierUpdate,
    ) -> Optional[SupplierResponse]:
        """Update a supplier."""
        updated = await self._update_record(supplier_id, supplier_data.model_dump(exclude_unset=True))
        if not updated:
            return None
        return SupplierResponse.model_validate(updated)

    async def delete_supplier(self, supplier_id: int, cascade: bool = False) -> bool:
        """Delete a supplier; cascade also removes its procurement records."""
        return await self._delete_record(supplier_id, cascade=cascade)
