"""
Material controller.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.material_service import MaterialService
from app.schemas.material import MaterialCreate, MaterialUpdate, MaterialResponse, MaterialListResponse


class MaterialController(BaseController):
    """Controller for material operations."""

    def __init__(self, session: AsyncSession):
        self.material_service = MaterialService(session)

    async def create_material(self, material_data: MaterialCreate) -> MaterialResponse:
        """Create a new material."""
        return await self.material_service.create_material(material_data)

    async def get_material(self, material_id: int) -> Optional[MaterialResponse]:
        """Get material by ID."""
        return await self.material_service.get_material(material_id)

    async def list_materials(
        self,
        skip: int = 0,
        limit: int = 100,
        name: Optional[str] = None,
    ) -> MaterialListResponse:
        """List materials, or look one up by exact name."""
        if name:
            material = await self.material_service.get_material_by_name(name)
            items = [material] if material else []
            return MaterialListResponse(items=items, total=len(items))
        materials, total = await self.material_service.list_materials(skip=skip, limit=limit)
        return MaterialListResponse(items=materials, total=total)

    async def update_material(
        self,
        material_id: int,
        material_data: MaterialUpdate,
    ) -> Optional[MaterialResponse]:
        """Update a material."""
        return await self.material_service.update_material(material_id, material_data)

    async def delete_material(self, material_id: int, cascade: bool = False) -> bool:
        """Delete a material."""
        return await self.material_service.delete_material(material_id, cascade=cascade)
