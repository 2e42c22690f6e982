"""
Assignment Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field, model_validator
from typing import Optional, List
from datetime import date


class AssignmentBase(BaseModel):
    """Base assignment schema with common fields."""
    project_id: int
    employee_id: int
    role: Optional[str] = Field(None, max_length=100)
    task_start_date: Optional[date] = None
    task_end_date: Optional[date] = None


class AssignmentCreate(AssignmentBase):
    """Schema for creating an assignment."""
    id: int = Field(..., ge=1, description="Caller-assigned task identifier")

    @model_validator(mode='after')
    def validate_dates(self):
        """Validate that task_end_date is not before task_start_date."""
        if self.task_start_date is not None and self.task_end_date is not None:
            if self.task_end_date < self.task_start_date:
                raise ValueError('Task end date must not be before task start date')
        return self


class AssignmentUpdate(BaseModel):
    """Schema for updating an assignment (all fields optional)."""
    id: Optional[int] = Field(None, description="Must match the current identifier if sent")
    project_id: Optional[int] = None
    employee_id: Optional[int] = None
    role: Optional[str] = Field(None, max_length=100)
    task_start_date: Optional[date] = None
    task_end_date: Optional[date] = None


class AssignmentResponse(AssignmentBase):
    """Schema for assignment response."""
    id: int

    class Config:
        from_attributes = True


class AssignmentListResponse(BaseModel):
    """Schema for assignment list response."""
    items: List[AssignmentResponse]
    total: int
