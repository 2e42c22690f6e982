"""
Assignment service with business logic.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.base_service import EntityService
from app.db.repositories.assignment_repository import AssignmentRepository
from app.schemas.assignment import AssignmentCreate, AssignmentUpdate, AssignmentResponse
from app.models.assignment import Assignment


class AssignmentService(EntityService[Assignment]):
    """Service for project assignment operations."""

    def __init__(self, session: AsyncSession):
        self.assignment_repo = AssignmentRepository(session)
        super().__init__(session, self.assignment_repo)

    async def create_assignment(self, assignment_data: AssignmentCreate) -> AssignmentResponse:
        """Assign an employee to a project. Both must already exist."""
        assignment = await self._create_record(assignment_data.model_dump(exclude_unset=True))
        return AssignmentResponse.model_validate(assignment)

    async def get_assignment(self, assignment_id: int) -> Optional[AssignmentResponse]:
        """Get assignment by ID."""
        assignment = await self.assignment_repo.get(assignment_id)
        if not assignment:
            return None
        return AssignmentResponse.model_validate(assignment)

    async def list_assignments(
        self,
        skip: int = 0,
        limit: int = 100,
        project_id: Optional[int] = None,
        employee_id: Optional[int] = None,
    ) -> tuple[List[AssignmentResponse], int]:
        """List assignments, optionally for one project and/or employee."""
        filters = {}
        if project_id:
            filters["project_id"] = project_id
        if employee_id:
            filters["employee_id"] = employee_id
        assignments = await self.assignment_repo.list(skip=skip, limit=limit, **filters)
        total = await self.assignment_repo.count(**filters)
        return [AssignmentResponse.model_validate(a) for a in assignments], total

    async def update_assignment(
        self,
        assignment_id: int,
        assignment_data: AssignmentUpdate,
    ) -> Optional[AssignmentResponse]:
        """Update an assignment."""
        updated = await self._update_record(assignment_id, assignment_data.model_dump(exclude_unset=True))
        if not updated:
            return None
        return AssignmentResponse.model_validate(updated)

    async def delete_assignment(self, assignment_id: int, cascade: bool = False) -> bool:
        """Delete an assignment."""
        return await self._delete_record(assignment_id, cascade=cascade)
