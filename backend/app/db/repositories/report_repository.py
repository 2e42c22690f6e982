"""
Report repository: read-only join and aggregation queries behind the analytics reports.
"""

from typing import Optional, List, Any
from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, and_

from app.models.project import Project, PROJECT_STATUS_COMPLETED
from app.models.supplier import Supplier
from app.models.procurement import ProcurementRecord
from app.models.employee import Employee
from app.models.assignment import Assignment


def _date_window(column, start_date: Optional[date], end_date: Optional[date]) -> List[Any]:
    """Build inclusive bound conditions for a date column."""
    conditions = []
    if start_date is not None:
        conditions.append(column >= start_date)
    if end_date is not None:
        conditions.append(column <= end_date)
    return conditions


class ReportRepository:
    """Repository for analytics queries. Never writes."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_completed_projects_with_costs(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Project]:
        """
        List projects whose status is exactly "Completed" and whose
        estimated and actual costs are both recorded.

        Args:
            start_date: Lower bound on actual_end_date
            end_date: Upper bound on actual_end_date

        Returns:
            Projects ordered by ID
        """
        query = select(Project).where(
            Project.status == PROJECT_STATUS_COMPLETED,
            Project.estimated_cost.is_not(None),
            Project.actual_cost.is_not(None),
            *_date_window(Project.actual_end_date, start_date, end_date),
        )
        result = await self.session.execute(query.order_by(Project.id))
        return list(result.scalars().all())

    async def list_finished_projects(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Project]:
        """List projects with an actual end date, ordered by ID."""
        query = select(Project).where(
            Project.actual_end_date.is_not(None),
            *_date_window(Project.actual_end_date, start_date, end_date),
        )
        result = await self.session.execute(query.order_by(Project.id))
        return list(result.scalars().all())

    async def supplier_order_totals(
        self,
        include_inactive: bool = False,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Any]:
        """
        Count procurement rows and sum purchase cost per supplier.

        Args:
            include_inactive: Left join so suppliers without orders appear with zero totals
            start_date: Lower bound on purchase_date
            end_date: Upper bound on purchase_date

        Returns:
            Rows of (supplier_id, supplier_name, total_orders, total_value), most orders first
        """
        # Date bounds live in the ON clause so the left join keeps zero-order suppliers
        on_clause = and_(
            ProcurementRecord.supplier_id == Supplier.id,
            *_date_window(ProcurementRecord.purchase_date, start_date, end_date),
        )
        total_orders = func.count(ProcurementRecord.id).label("total_orders")
        query = (
            select(
                Supplier.id.label("supplier_id"),
                Supplier.name.label("supplier_name"),
                total_orders,
                func.coalesce(func.sum(ProcurementRecord.purchase_cost), 0).label("total_value"),
            )
            .select_from(Supplier)
            .join(ProcurementRecord, on_clause, isouter=include_inactive)
            .group_by(Supplier.id, Supplier.name)
            .order_by(total_orders.desc(), Supplier.id.asc())
        )
        result = await self.session.execute(query)
        return list(result.all())

    async def employee_assignment_counts(
        self,
        include_inactive: bool = False,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Any]:
        """
        Count assignment rows per employee. Repeated assignments to the same
        project are counted once per row.

        Args:
            include_inactive: Left join so employees without assignments appear with zero
            start_date: Lower bound on task_start_date
            end_date: Upper bound on task_start_date

        Returns:
            Rows of (employee_id, full_name, projects_assigned), busiest first
        """
        on_clause = and_(
            Assignment.employee_id == Employee.id,
            *_date_window(Assignment.task_start_date, start_date, end_date),
        )
        projects_assigned = func.count(Assignment.id).label("projects_assigned")
        query = (
            select(
                Employee.id.label("employee_id"),
                Employee.full_name.label("full_name"),
                projects_assigned,
            )
            .select_from(Employee)
            .join(Assignment, on_clause, isouter=include_inactive)
            .group_by(Employee.id, Employee.full_name)
            .order_by(projects_assigned.desc(), Employee.id.asc())
        )
        result = await self.session.execute(query)
        return list(result.all())
