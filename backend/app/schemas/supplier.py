"""
Supplier Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List
from decimal import Decimal


class SupplierBase(BaseModel):
    """Base supplier schema with common fields."""
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=100)
    rating: Optional[Decimal] = Field(None, max_digits=10, decimal_places=2)


class SupplierCreate(SupplierBase):
    """Schema for creating a supplier."""
    id: int = Field(..., ge=1, description="Caller-assigned supplier identifier")


class SupplierUpdate(BaseModel):
    """Schema for updating a supplier (all fields optional)."""
    id: Optional[int] = Field(None, description="Must match the current identifier if sent")
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=1, max_length=100)
    rating: Optional[Decimal] = Field(None, max_digits=10, decimal_places=2)


class SupplierResponse(SupplierBase):
    """Schema for supplier response."""
    id: int

    class Config:
        from_attributes = True


class SupplierListResponse(BaseModel):
    """Schema for supplier list response."""
    items: List[SupplierResponse]
    total: int
