"""
Procurement record Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date
from decimal import Decimal


class ProcurementRecordBase(BaseModel):
    """Base procurement schema with common fields."""
    project_id: int
    supplier_id: int
    material_id: int
    quantity_purchased: Optional[Decimal] = Field(None, max_digits=15, decimal_places=2)
    purchase_cost: Optional[Decimal] = Field(None, max_digits=15, decimal_places=2)
    purchase_date: Optional[date] = None


class ProcurementRecordCreate(ProcurementRecordBase):
    """Schema for creating a procurement record."""
    id: int = Field(..., ge=1, description="Caller-assigned procurement identifier")


class ProcurementRecordUpdate(BaseModel):
    """Schema for updating a procurement record (all fields optional)."""
    id: Optional[int] = Field(None, description="Must match the current identifier if sent")
    project_id: Optional[int] = None
    supplier_id: Optional[int] = None
    material_id: Optional[int] = None
    quantity_purchased: Optional[Decimal] = Field(None, max_digits=15, decimal_places=2)
    purchase_cost: Optional[Decimal] = Field(None, max_digits=15, decimal_places=2)
    purchase_date: Optional[date] = None


class ProcurementRecordResponse(ProcurementRecordBase):
    """Schema for procurement record response."""
    id: int

    class Config:
        from_attributes = True


class ProcurementRecordListResponse(BaseModel):
    """Schema for procurement record list response."""
    items: List[ProcurementRecordResponse]
    total: int
