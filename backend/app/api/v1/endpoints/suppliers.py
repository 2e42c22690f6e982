"""
Supplier API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from decimal import Decimal

from app.db.session import get_db
from app.controllers.supplier_controller import SupplierController
from app.schemas.supplier import (
    SupplierCreate,
    SupplierUpdate,
    SupplierResponse,
    SupplierListResponse,
)

router = APIRouter()


@router.post("", response_model=SupplierResponse, status_code=status.HTTP_201_CREATED)
async def create_supplier(
    supplier_data: SupplierCreate,
    db: AsyncSession = Depends(get_db),
) -> SupplierResponse:
    """Create a new supplier."""
    controller = SupplierController(db)
    return await controller.create_supplier(supplier_data)


@router.get("", response_model=SupplierListResponse)
async def list_suppliers(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    min_rating: Optional[Decimal] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> SupplierListResponse:
    """List suppliers with optional filters."""
    controller = SupplierController(db)
    return await controller.list_suppliers(skip=skip, limit=limit, min_rating=min_rating)


@router.get("/{supplier_id}", response_model=SupplierResponse)
async def get_supplier(
    supplier_id: int,
    db: AsyncSession = Depends(get_db),
) -> SupplierResponse:
    """Get supplier by ID."""
    controller = SupplierController(db)
    supplier = await controller.get_supplier(supplier_id)
    if not supplier:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Supplier not found",
        )
    return supplier


@router.put("/{supplier_id}", response_model=SupplierResponse)
async def update_supplier(
    supplier_id: int,
    supplier_data: SupplierUpdate,
    db: AsyncSession = Depends(get_db),
) -> SupplierResponse:
    """Update a supplier."""
    controller = SupplierController(db)
    supplier = await controller.update_supplier(supplier_id, supplier_data)
    if not supplier:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Supplier not found",
        )
    return supplier


@router.delete("/{supplier_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_supplier(
    supplier_id: int,
    cascade: bool = Query(False, description="Also delete the supplier's procurement records"),
    db: AsyncSession = Depends(get_db),
):
    """Delete a supplier."""
    controller = SupplierController(db)
    deleted = await controller.delete_supplier(supplier_id, cascade=cascade)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Supplier not found",
        )
