"""
Employee controller.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.employee_service import EmployeeService
from app.schemas.employee import EmployeeCreate, EmployeeUpdate, EmployeeResponse, EmployeeListResponse


class EmployeeController(BaseController):
    """Controller for employee operations."""

    def __init__(self, session: AsyncSession):
        self.employee_service = EmployeeService(session)

    async def create_employee(self, employee_data: EmployeeCreate) -> EmployeeResponse:
        """Create a new employee."""
        return await self.employee_service.create_employee(employee_data)

    async def get_employee(self, employee_id: int) -> Optional[EmployeeResponse]:
        """Get employee by ID."""
        return await self.employee_service.get_employee(employee_id)

    async def list_employees(
        self,
        skip: int = 0,
        limit: int = 100,
        status: Optional[str] = None,
        email: Optional[str] = None,
    ) -> EmployeeListResponse:
        """List employees with optional filters."""
        if email:
            employee = await self.employee_service.get_employee_by_email(email)
            items = [employee] if employee else []
            return EmployeeListResponse(items=items, total=len(items))
        employees, total = await self.employee_service.list_employees(
            skip=skip,
            limit=limit,
            status=status,
        )
        return EmployeeListResponse(items=employees, total=total)

    async def update_employee(
        self,
        employee_id: int,
        employee_data: EmployeeUpdate,
    ) -> Optional[EmployeeResponse]:
        """Update an employee."""
        return await self.employee_service.update_employee(employee_id, employee_data)

    async def delete_employee(self, employee_id: int, cascade: bool = False) -> bool:
        """Delete an employee."""
        return await self.employee_service.delete_employee(employee_id, cascade=cascade)
