"""
Assignment controller.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.assignment_service import AssignmentService
from app.schemas.assignment import (
    AssignmentCreate,
    AssignmentUpdate,
    AssignmentResponse,
    AssignmentListResponse,
)


class AssignmentController(BaseController):
    """Controller for project assignment operations."""

    def __init__(self, session: AsyncSession):
        self.assignment_service = AssignmentService(session)

    async def create_assignment(self, assignment_data: AssignmentCreate) -> AssignmentResponse:
        """Create an assignment."""
        return await self.assignment_service.create_assignment(assignment_data)

    async def get_assignment(self, assignment_id: int) -> Optional[AssignmentResponse]:
        """Get assignment by ID."""
        return await self.assignment_service.get_assignment(assignment_id)

    async def list_assignments(
        self,
        skip: int = 0,
        limit: int = 100,
        project_id: Optional[int] = None,
        employee_id: Optional[int] = None,
    ) -> AssignmentListResponse:
        """List assignments with optional filters."""
        assignments, total = await self.assignment_service.list_assignments(
            skip=skip,
            limit=limit,
            project_id=project_id,
            employee_id=employee_id,
        )
        return AssignmentListResponse(items=assignments, total=total)

    async def update_assignment(
        self,
        assignment_id: int,
        assignment_data: AssignmentUpdate,
    ) -> Optional[AssignmentResponse]:
        """Update an assignment."""
        return await self.assignment_service.update_assignment(assignment_id, assignment_data)

    async def delete_assignment(self, assignment_id: int) -> bool:
        """Delete an assignment."""
        return await self.assignment_service.delete_assignment(assignment_id)
