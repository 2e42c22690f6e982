"""
Report API endpoints.
Read-only analytics over the current data; every call recomputes its rows.
"""

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from datetime import date

from app.db.session import get_db
from app.core.rate_limit import limiter, REPORT_RATE_LIMIT
from app.controllers.report_controller import ReportController
from app.deps.di_container import get_container
from app.schemas.report import (
    ReportFilter,
    CostVarianceReport,
    DurationPerformanceReport,
    SupplierRankingReport,
    EmployeeWorkloadReport,
)

router = APIRouter()


def get_report_filter(
    start_date: Optional[date] = Query(None, description="Inclusive lower bound"),
    end_date: Optional[date] = Query(None, description="Inclusive upper bound"),
) -> ReportFilter:
    """Build the date window shared by all report endpoints."""
    return ReportFilter(start_date=start_date, end_date=end_date)


def get_report_controller(db: AsyncSession = Depends(get_db)) -> ReportController:
    container = get_container()
    return container.report_controller(session=db)


@router.get("/cost-variance", response_model=CostVarianceReport)
@limiter.limit(REPORT_RATE_LIMIT)
async def get_cost_variance(
    request: Request,
    report_filter: ReportFilter = Depends(get_report_filter),
    controller: ReportController = Depends(get_report_controller),
) -> CostVarianceReport:
    """Actual minus estimated cost for completed projects."""
    return await controller.get_cost_variance(report_filter)


@router.get("/duration-performance", response_model=DurationPerformanceReport)
@limiter.limit(REPORT_RATE_LIMIT)
async def get_duration_performance(
    request: Request,
    report_filter: ReportFilter = Depends(get_report_filter),
    controller: ReportController = Depends(get_report_controller),
) -> DurationPerformanceReport:
    """Estimated vs. actual duration in days for finished projects."""
    return await controller.get_duration_performance(report_filter)


@router.get("/supplier-ranking", response_model=SupplierRankingReport)
@limiter.limit(REPORT_RATE_LIMIT)
async def get_supplier_ranking(
    request: Request,
    include_inactive: Optional[bool] = Query(None, description="Also list suppliers without orders"),
    report_filter: ReportFilter = Depends(get_report_filter),
    controller: ReportController = Depends(get_report_controller),
) -> SupplierRankingReport:
    """Suppliers ranked by number of procurement records."""
    return await controller.get_supplier_ranking(report_filter, include_inactive)


@router.get("/employee-workload", response_model=EmployeeWorkloadReport)
@limiter.limit(REPORT_RATE_LIMIT)
async def get_employee_workload(
    request: Request,
    include_inactive: Optional[bool] = Query(None, description="Also list employees without assignments"),
    report_filter: ReportFilter = Depends(get_report_filter),
    controller: ReportController = Depends(get_report_controller),
) -> EmployeeWorkloadReport:
    """Employees ranked by number of assignment rows."""
    return await controller.get_employee_workload(report_filter, include_inactive)
