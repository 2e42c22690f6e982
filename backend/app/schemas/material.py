"""
Material Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from decimal import Decimal


class MaterialBase(BaseModel):
    """Base material schema. Only the identifier is mandatory."""
    name: Optional[str] = Field(None, max_length=100)
    unit_of_measure: Optional[str] = Field(None, max_length=100)
    unit_cost: Optional[Decimal] = Field(None, max_digits=10, decimal_places=2)
    total_material_cost: Optional[Decimal] = Field(None, max_digits=15, decimal_places=2)


class MaterialCreate(MaterialBase):
    """Schema for creating a material."""
    id: int = Field(..., ge=1, description="Caller-assigned material identifier")


class MaterialUpdate(MaterialBase):
    """Schema for updating a material."""
    id: Optional[int] = Field(None, description="Must match the current identifier if sent")


class MaterialResponse(MaterialBase):
    """Schema for material response."""
    id: int

    class Config:
        from_attributes = True


class MaterialListResponse(BaseModel):
    """Schema for material list response."""
    items: List[MaterialResponse]
    total: int
