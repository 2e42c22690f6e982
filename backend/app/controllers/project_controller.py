"""
Project controller.
"""

from typing import Optional
from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.project_service import ProjectService
from app.schemas.project import ProjectCreate, ProjectUpdate, ProjectResponse, ProjectListResponse


class ProjectController(BaseController):
    """Controller for project operations."""

    def __init__(self, session: AsyncSession):
        self.project_service = ProjectService(session)

    async def create_project(self, project_data: ProjectCreate) -> ProjectResponse:
        """Create a new project."""
        return await self.project_service.create_project(project_data)

    async def get_project(self, project_id: int) -> Optional[ProjectResponse]:
        """Get project by ID."""
        return await self.project_service.get_project(project_id)

    async def list_projects(
        self,
        skip: int = 0,
        limit: int = 100,
        client_id: Optional[int] = None,
        status: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> ProjectListResponse:
        """List projects with optional filters."""
        projects, total = await self.project_service.list_projects(
            skip=skip,
            limit=limit,
            client_id=client_id,
            status=status,
            start_date=start_date,
            end_date=end_date,
        )
        return ProjectListResponse(items=projects, total=total)

    async def update_project(
        self,
        project_id: int,
        project_data: ProjectUpdate,
    ) -> Optional[ProjectResponse]:
        """Update a project."""
        return await self.project_service.update_project(project_id, project_data)

    async def delete_project(self, project_id: int, cascade: bool = False) -> bool:
        """Delete a project."""
        return await self.project_service.delete_project(project_id, cascade=cascade)
