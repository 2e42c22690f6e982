"""
Employee service with business logic.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.base_service import EntityService
from app.db.repositories.employee_repository import EmployeeRepository
from app.schemas.employee import EmployeeCreate, EmployeeUpdate, EmployeeResponse
from app.models.employee import Employee


class EmployeeService(EntityService[Employee]):
    """Service for employee operations."""

    def __init__(self, session: AsyncSession):
        self.employee_repo = EmployeeRepository(session)
        super().__init__(session, self.employee_repo)

    async def create_employee(self, employee_data: EmployeeCreate) -> EmployeeResponse:
        """Create a new employee."""
        employee = await self._create_record(employee_data.model_dump(exclude_unset=True))
        return EmployeeResponse.model_validate(employee)

    async def get_employee(self, employee_id: int) -> Optional[EmployeeResponse]:
        """Get employee by ID."""
        employee = await self.employee_repo.get(employee_id)
        if not employee:
            return None
        return EmployeeResponse.model_validate(employee)

    async def get_employee_by_email(self, email: str) -> Optional[EmployeeResponse]:
        """Get employee by email."""
        employee = await self.employee_repo.get_by_email(email)
        if not employee:
            return None
        return EmployeeResponse.model_validate(employee)

    async def list_employees(
        self,
        skip: int = 0,
        limit: int = 100,
        status: Optional[str] = None,
    ) -> tuple[List[EmployeeResponse], int]:
        """List employees, optionally by status label."""
        if status:
            employees = await self.employee_repo.list_by_status(status, skip, limit)
            total = await self.employee_repo.count(status=status)
        else:
            employees = await self.employee_repo.list(skip=skip, limit=limit)
            total = await self.employee_repo.count()
        return [EmployeeResponse.model_validate(emp) for emp in employees], total

    async def update_employee(
        self,
        employee_id: int,
        employee_data: EmployeeUpdate,
    ) -> Optional[EmployeeResponse]:
        """Update an employee."""
        updated = await self._update_record(employee_id, employee_data.model_dump(exclude_unset=True))
        if not updated:
            return None
        return EmployeeResponse.model_validate(updated)

    async def delete_employee(self, employee_id: int, cascade: bool = False) -> bool:
        """Delete an employee; cascade also removes their assignments."""
        return await self._delete_record(employee_id, cascade=cascade)
