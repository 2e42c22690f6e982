"""
Procurement API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from datetime import date

from app.db.session import get_db
from app.controllers.procurement_controller import ProcurementController
from app.schemas.procurement import (
    ProcurementRecordCreate,
    ProcurementRecordUpdate,
    ProcurementRecordResponse,
    ProcurementRecordListResponse,
)

router = APIRouter()


@router.post("", response_model=ProcurementRecordResponse, status_code=status.HTTP_201_CREATED)
async def create_procurement(
    procurement_data: ProcurementRecordCreate,
    db: AsyncSession = Depends(get_db),
) -> ProcurementRecordResponse:
    """Create a procurement record."""
    controller = ProcurementController(db)
    return await controller.create_procurement(procurement_data)


@router.get("", response_model=ProcurementRecordListResponse)
async def list_procurement(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    project_id: Optional[int] = Query(None),
    supplier_id: Optional[int] = Query(None),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> ProcurementRecordListResponse:
    """List procurement records with optional filters."""
    controller = ProcurementController(db)
    return await controller.list_procurement(
        skip=skip,
        limit=limit,
        project_id=project_id,
        supplier_id=supplier_id,
        start_date=start_date,
        end_date=end_date,
    )


@router.get("/{procurement_id}", response_model=ProcurementRecordResponse)
async def get_procurement(
    procurement_id: int,
    db: AsyncSession = Depends(get_db),
) -> ProcurementRecordResponse:
    """Get procurement record by ID."""
    controller = ProcurementController(db)
    record = await controller.get_procurement(procurement_id)
    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Procurement record not found",
        )
    return record


@router.put("/{procurement_id}", response_model=ProcurementRecordResponse)
async def update_procurement(
    procurement_id: int,
    procurement_data: ProcurementRecordUpdate,
    db: AsyncSession = Depends(get_db),
) -> ProcurementRecordResponse:
    """Update a procurement record."""
    controller = ProcurementController(db)
    record = await controller.update_procurement(procurement_id, procurement_data)
    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Procurement record not found",
        )
    return record


@router.delete("/{procurement_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_procurement(
    procurement_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a procurement record."""
    controller = ProcurementController(db)
    deleted = await controller.delete_procurement(procurement_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Procurement record not found",
        )
