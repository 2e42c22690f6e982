"""
Report Pydantic schemas for the analytics endpoints.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date
from decimal import Decimal


class ReportFilter(BaseModel):
    """Optional inclusive date window applied to a report's natural date column."""
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class CostVarianceRow(BaseModel):
    """One completed project; positive variance is an overrun."""
    project_id: int
    project_name: str
    estimated_cost: Decimal
    actual_cost: Decimal
    variance: Decimal


class DurationPerformanceRow(BaseModel):
    """Planned vs. actual duration in whole days; None when a date is missing."""
    project_id: int
    project_name: str
    estimated_days: Optional[int] = None
    actual_days: Optional[int] = None


class SupplierRankingRow(BaseModel):
    """Order count and spend for one supplier."""
    supplier_id: int
    supplier_name: str
    total_orders: int = Field(..., ge=0)
    total_value: Decimal


class EmployeeWorkloadRow(BaseModel):
    """Assignment row count for one employee."""
    employee_id: int
    full_name: str
    projects_assigned: int = Field(..., ge=0)


class CostVarianceReport(BaseModel):
    items: List[CostVarianceRow]
    total: int


class DurationPerformanceReport(BaseModel):
    items: List[DurationPerformanceRow]
    total: int


class SupplierRankingReport(BaseModel):
    items: List[SupplierRankingRow]
    total: int
    include_inactive: bool


class EmployeeWorkloadReport(BaseModel):
    items: List[EmployeeWorkloadRow]
    total: int
    include_inactive: bool
