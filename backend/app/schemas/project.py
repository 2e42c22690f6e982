"""
Project Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date
from decimal import Decimal


class ProjectBase(BaseModel):
    """Base project schema with common fields."""
    name: str = Field(..., min_length=1, max_length=100)
    client_id: Optional[int] = None
    start_date: Optional[date] = None
    estimated_end_date: Optional[date] = None
    actual_end_date: Optional[date] = None
    estimated_cost: Optional[Decimal] = Field(None, max_digits=15, decimal_places=2)
    actual_cost: Optional[Decimal] = Field(None, max_digits=15, decimal_places=2)
    status: Optional[str] = Field(None, max_length=100)


class ProjectCreate(ProjectBase):
    """Schema for creating a project."""
    id: int = Field(..., ge=1, description="Caller-assigned project identifier")


class ProjectUpdate(BaseModel):
    """Schema for updating a project (all fields optional)."""
    id: Optional[int] = Field(None, description="Must match the current identifier if sent")
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    client_id: Optional[int] = None
    start_date: Optional[date] = None
    estimated_end_date: Optional[date] = None
    actual_end_date: Optional[date] = None
    estimated_cost: Optional[Decimal] = Field(None, max_digits=15, decimal_places=2)
    actual_cost: Optional[Decimal] = Field(None, max_digits=15, decimal_places=2)
    status: Optional[str] = Field(None, max_length=100)


class ProjectResponse(ProjectBase):
    """Schema for project response."""
    id: int
    client_name: Optional[str] = None  # Name from client relationship

    class Config:
        from_attributes = True


class ProjectListResponse(BaseModel):
    """Schema for project list response."""
    items: List[ProjectResponse]
    total: int
