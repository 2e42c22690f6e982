"""
Material service with business logic.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.base_service import EntityService
from app.db.repositories.material_repository import MaterialRepository
from app.schemas.material import MaterialCreate, MaterialUpdate, MaterialResponse
from app.models.material import Material


class MaterialService(EntityService[Material]):
    """Service for material operations."""

    def __init__(self, session: AsyncSession):
        self.material_repo = MaterialRepository(session)
        super().__init__(session, self.material_repo)

    async def create_material(self, material_data: MaterialCreate) -> MaterialResponse:
        """Create a new material."""
        material = await self._create_record(material_data.model_dump(exclude_unset=True))
        return MaterialResponse.model_validate(material)

    async def get_material(self, material_id: int) -> Optional[MaterialResponse]:
        """Get material by ID."""
        material = await self.material_repo.get(material_id)
        if not material:
            return None
        return MaterialResponse.model_validate(material)

    async def get_material_by_name(self, name: str) -> Optional[MaterialResponse]:
        """Get material by exact name."""
        material = await self.material_repo.get_by_name(name)
        if not material:
            return None
        return MaterialResponse.model_validate(material)

    async def list_materials(
        self,
        skip: int = 0,
        limit: int = 100,
    ) -> tuple[List[MaterialResponse], int]:
        """List materials."""
        materials = await self.material_repo.list(skip=skip, limit=limit)
        total = await self.material_repo.count()
        return [MaterialResponse.model_validate(material) for material in materials], total

    async def update_material(
        self,
        material_id: int,
        material_data: MaterialUpdate,
    ) -> Optional[MaterialResponse]:
        """Update a material."""
        updated = await self._update_record(material_id, material_data.model_dump(exclude_unset=True))
        if not updated:
            return None
        return MaterialResponse.model_validate(updated)

    async def delete_material(self, material_id: int, cascade: bool = False) -> bool:
        """Delete a material; cascade also removes procurement records that bought it."""
        return await self._delete_record(material_id, cascade=cascade)
