"""
Report controller.
Wraps report rows in list envelopes for the API.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.report_service import ReportService
from app.schemas.report import (
    ReportFilter,
    CostVarianceReport,
    DurationPerformanceReport,
    SupplierRankingReport,
    EmployeeWorkloadReport,
)


class ReportController(BaseController):
    """Controller for analytics reports."""

    def __init__(self, session: AsyncSession, include_inactive_default: Optional[bool] = None):
        self.report_service = ReportService(session, include_inactive_default)

    async def get_cost_variance(self, report_filter: ReportFilter) -> CostVarianceReport:
        rows = await self.report_service.cost_variance_report(report_filter)
        return CostVarianceReport(items=rows, total=len(rows))

    async def get_duration_performance(self, report_filter: ReportFilter) -> DurationPerformanceReport:
        rows = await self.report_service.duration_performance_report(report_filter)
        return DurationPerformanceReport(items=rows, total=len(rows))

    async def get_supplier_ranking(
        self,
        report_filter: ReportFilter,
        include_inactive: Optional[bool] = None,
    ) -> SupplierRankingReport:
        rows = await self.report_service.supplier_ranking_report(report_filter, include_inactive)
        return SupplierRankingReport(
            items=rows,
            total=len(rows),
            include_inactive=self.report_service.resolve_include_inactive(include_inactive),
        )

    async def get_employee_workload(
        self,
        report_filter: ReportFilter,
        include_inactive: Optional[bool] = None,
    ) -> EmployeeWorkloadReport:
        rows = await self.report_service.employee_workload_report(report_filter, include_inactive)
        return EmployeeWorkloadReport(
            items=rows,
            total=len(rows),
            include_inactive=self.report_service.resolve_include_inactive(include_inactive),
        )
