"""
Report service.

The four management reports. Each call reads the current data and returns
freshly computed rows; nothing is cached and nothing is written, so calls
may be repeated or run alongside other reads freely.
"""

from typing import List, Optional
from datetime import date
from decimal import Decimal
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.exceptions import ValidationError
from app.core.logging import get_logger
from app.db.repositories.report_repository import ReportRepository
from app.services.base_service import BaseService
from app.schemas.report import (
    ReportFilter,
    CostVarianceRow,
    DurationPerformanceRow,
    SupplierRankingRow,
    EmployeeWorkloadRow,
)

logger = get_logger(__name__)


def days_between(start: Optional[date], end: Optional[date]) -> Optional[int]:
    """Whole days from start to end, or None when either date is missing."""
    if start is None or end is None:
        return None
    return (end - start).days


def cost_variance(estimated_cost: Decimal, actual_cost: Decimal) -> Decimal:
    """Actual minus estimated: positive is an overrun, negative an underrun."""
    return actual_cost - estimated_cost


class ReportService(BaseService):
    """Service computing the analytics reports."""

    def __init__(self, session: AsyncSession, include_inactive_default: Optional[bool] = None):
        self.session = session
        self.report_repo = ReportRepository(session)
        if include_inactive_default is None:
            include_inactive_default = settings.REPORT_INCLUDE_INACTIVE
        self.include_inactive_default = include_inactive_default

    def resolve_include_inactive(self, include_inactive: Optional[bool]) -> bool:
        if include_inactive is None:
            return self.include_inactive_default
        return include_inactive

    @staticmethod
    def _window(report_filter: Optional[ReportFilter]) -> ReportFilter:
        """Default to an open window and reject one that ends before it starts."""
        report_filter = report_filter or ReportFilter()
        start, end = report_filter.start_date, report_filter.end_date
        if start is not None and end is not None and end < start:
            raise ValidationError(
                "end_date must not be before start_date",
                details={"start_date": str(start), "end_date": str(end)},
            )
        return report_filter

    async def cost_variance_report(
        self,
        report_filter: Optional[ReportFilter] = None,
    ) -> List[CostVarianceRow]:
        """
        Cost variance for completed projects.

        Only projects whose status is exactly "Completed" and whose estimated
        and actual costs are both recorded are included; a missing cost is
        never read as zero.

        Args:
            report_filter: Optional window on actual_end_date

        Returns:
            One row per qualifying project, ordered by project ID
        """
        report_filter = self._window(report_filter)
        projects = await self.report_repo.list_completed_projects_with_costs(
            report_filter.start_date,
            report_filter.end_date,
        )
        rows = [
            CostVarianceRow(
                project_id=project.id,
                project_name=project.name,
                estimated_cost=project.estimated_cost,
                actual_cost=project.actual_cost,
                variance=cost_variance(project.estimated_cost, project.actual_cost),
            )
            for project in projects
        ]
        logger.info("Cost variance report generated", extra={"rows": len(rows)})
        return rows

    async def duration_performance_report(
        self,
        report_filter: Optional[ReportFilter] = None,
    ) -> List[DurationPerformanceRow]:
        """
        Planned vs. actual duration for projects that have finished.

        Args:
            report_filter: Optional window on actual_end_date

        Returns:
            One row per project with an actual end date, ordered by project ID.
            estimated_days is None without a start or estimated end date;
            actual_days is None without a start date.
        """
        report_filter = self._window(report_filter)
        projects = await self.report_repo.list_finished_projects(
            report_filter.start_date,
            report_filter.end_date,
        )
        rows = [
            DurationPerformanceRow(
                project_id=project.id,
                project_name=project.name,
                estimated_days=days_between(project.start_date, project.estimated_end_date),
                actual_days=days_between(project.start_date, project.actual_end_date),
            )
            for project in projects
        ]
        logger.info("Duration performance report generated", extra={"rows": len(rows)})
        return rows

    async def supplier_ranking_report(
        self,
        report_filter: Optional[ReportFilter] = None,
        include_inactive: Optional[bool] = None,
    ) -> List[SupplierRankingRow]:
        """
        Suppliers ranked by number of procurement records.

        Args:
            report_filter: Optional window on purchase_date
            include_inactive: Also list suppliers without orders (zero totals);
                defaults to the REPORT_INCLUDE_INACTIVE setting

        Returns:
            Rows sorted by total_orders descending, then supplier ID ascending
        """
        report_filter = self._window(report_filter)
        include_inactive = self.resolve_include_inactive(include_inactive)
        totals = await self.report_repo.supplier_order_totals(
            include_inactive=include_inactive,
            start_date=report_filter.start_date,
            end_date=report_filter.end_date,
        )
        rows = [
            SupplierRankingRow(
                supplier_id=row.supplier_id,
                supplier_name=row.supplier_name,
                total_orders=row.total_orders,
                total_value=Decimal(str(row.total_value)),
            )
            for row in totals
        ]
        logger.info(
            "Supplier ranking report generated",
            extra={"rows": len(rows), "include_inactive": include_inactive},
        )
        return rows

    async def employee_workload_report(
        self,
        report_filter: Optional[ReportFilter] = None,
        include_inactive: Optional[bool] = None,
    ) -> List[EmployeeWorkloadRow]:
        """
        Employees ranked by number of assignment rows.

        An employee assigned twice to the same project counts twice.

        Args:
            report_filter: Optional window on task_start_date
            include_inactive: Also list employees without assignments (zero);
                defaults to the REPORT_INCLUDE_INACTIVE setting

        Returns:
            Rows sorted by projects_assigned descending, then employee ID ascending
        """
        report_filter = self._window(report_filter)
        include_inactive = self.resolve_include_inactive(include_inactive)
        counts = await self.report_repo.employee_assignment_counts(
            include_inactive=include_inactive,
            start_date=report_filter.start_date,
            end_date=report_filter.end_date,
        )
        rows = [
            EmployeeWorkloadRow(
                employee_id=row.employee_id,
                full_name=row.full_name,
                projects_assigned=row.projects_assigned,
            )
            for row in counts
        ]
        logger.info(
            "Employee workload report generated",
            extra={"rows": len(rows), "include_inactive": include_inactive},
        )
        return rows
