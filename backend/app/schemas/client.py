"""
Client Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List


class ClientBase(BaseModel):
    """Base client schema with common fields."""
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=100)
    address: Optional[str] = Field(None, max_length=100)


class ClientCreate(ClientBase):
    """Schema for creating a client."""
    id: int = Field(..., ge=1, description="Caller-assigned client identifier")


class ClientUpdate(BaseModel):
    """Schema for updating a client (all fields optional)."""
    id: Optional[int] = Field(None, description="Must match the current identifier if sent")
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=1, max_length=100)
    address: Optional[str] = Field(None, max_length=100)


class ClientResponse(ClientBase):
    """Schema for client response."""
    id: int

    class Config:
        from_attributes = True


class ClientListResponse(BaseModel):
    """Schema for client list response."""
    items: List[ClientResponse]
    total: int
