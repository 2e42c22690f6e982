"""
Employee Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List


class EmployeeBase(BaseModel):
    """Base employee schema with common fields."""
    full_name: str = Field(..., min_length=1, max_length=100)
    job_role: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    status: str = Field(..., min_length=1, max_length=100)
    address: Optional[str] = Field(None, max_length=100)
    phone: str = Field(..., min_length=1, max_length=100)


class EmployeeCreate(EmployeeBase):
    """Schema for creating an employee."""
    id: int = Field(..., ge=1, description="Caller-assigned employee identifier")


class EmployeeUpdate(BaseModel):
    """Schema for updating an employee (all fields optional)."""
    id: Optional[int] = Field(None, description="Must match the current identifier if sent")
    full_name: Optional[str] = Field(None, min_length=1, max_length=100)
    job_role: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    status: Optional[str] = Field(None, min_length=1, max_length=100)
    address: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, min_length=1, max_length=100)


class EmployeeResponse(EmployeeBase):
    """Schema for employee response."""
    id: int

    class Config:
        from_attributes = True


class EmployeeListResponse(BaseModel):
    """Schema for employee list response."""
    items: List[EmployeeResponse]
    total: int
