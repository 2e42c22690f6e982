"""
Project service with business logic.
"""

from typing import List, Optional
from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.base_service import EntityService
from app.db.repositories.project_repository import ProjectRepository
from app.schemas.project import ProjectCreate, ProjectUpdate, ProjectResponse
from app.models.project import Project


class ProjectService(EntityService[Project]):
    """Service for project operations."""

    def __init__(self, session: AsyncSession):
        self.project_repo = ProjectRepository(session)
        super().__init__(session, self.project_repo)

    async def create_project(self, project_data: ProjectCreate) -> ProjectResponse:
        """Create a new project."""
        project = await self._create_record(project_data.model_dump(exclude_unset=True))
        # Reload with client relationship
        project = await self.project_repo.get(project.id)
        return self._to_response(project)

    async def get_project(self, project_id: int) -> Optional[ProjectResponse]:
        """Get project by ID."""
        project = await self.project_repo.get(project_id)
        if not project:
            return None
        return self._to_response(project)

    async def list_projects(
        self,
        skip: int = 0,
        limit: int = 100,
        client_id: Optional[int] = None,
        status: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> tuple[List[ProjectResponse], int]:
        """List projects with optional filters."""
        if client_id:
            projects = await self.project_repo.list_by_client(client_id, skip, limit)
            total = await self.project_repo.count(client_id=client_id)
        elif status:
            projects = await self.project_repo.list_by_status(status, skip, limit)
            total = await self.project_repo.count(status=status)
        elif start_date or end_date:
            projects = await self.project_repo.list_by_date_range(start_date, end_date, skip, limit)
            total = len(projects)
        else:
            projects = await self.project_repo.list(skip=skip, limit=limit)
            total = await self.project_repo.count()
        return [self._to_response(proj) for proj in projects], total

    async def update_project(
        self,
        project_id: int,
        project_data: ProjectUpdate,
    ) -> Optional[ProjectResponse]:
        """Update a project, e.g. a status transition or cost finalization."""
        updated = await self._update_record(project_id, project_data.model_dump(exclude_unset=True))
        if not updated:
            return None
        return self._to_response(updated)

    async def delete_project(self, project_id: int, cascade: bool = False) -> bool:
        """Delete a project; cascade also removes its procurement and assignments."""
        return await self._delete_record(project_id, cascade=cascade)

    def _to_response(self, project) -> ProjectResponse:
        """Convert project model to response schema."""
        client_name = None
        if project.client is not None:
            client_name = project.client.name

        project_dict = {
            "id": project.id,
            "name": project.name,
            "client_id": project.client_id,
            "start_date": project.start_date,
            "estimated_end_date": project.estimated_end_date,
            "actual_end_date": project.actual_end_date,
            "estimated_cost": project.estimated_cost,
            "actual_cost": project.actual_cost,
            "status": project.status,
            "client_name": client_name,
        }
        return ProjectResponse.model_validate(project_dict)
