"""
Assignment API endpoints.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from app.db.session import get_db
from app.controllers.assignment_controller import AssignmentController
from app.schemas.assignment import (
    AssignmentCreate,
    AssignmentUpdate,
    AssignmentResponse,
    AssignmentListResponse,
)

router = APIRouter()


@router.post("", response_model=AssignmentResponse, status_code=status.HTTP_201_CREATED)
async def create_assignment(
    assignment_data: AssignmentCreate,
    db: AsyncSession = Depends(get_db),
) -> AssignmentResponse:
    """Assign an employee to a project."""
    controller = AssignmentController(db)
    return await controller.create_assignment(assignment_data)


@router.get("", response_model=AssignmentListResponse)
async def list_assignments(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    project_id: Optional[int] = Query(None),
    employee_id: Optional[int] = Query(None),
    db: AsyncSession = Depends(get_db),
) -> AssignmentListResponse:
    """List assignments with optional filters."""
    controller = AssignmentController(db)
    return await controller.list_assignments(
        skip=skip,
        limit=limit,
        project_id=project_id,
        employee_id=employee_id,
    )


@router.get("/{assignment_id}", response_model=AssignmentResponse)
async def get_assignment(
    assignment_id: int,
    db: AsyncSession = Depends(get_db),
) -> AssignmentResponse:
    """Get assignment by ID."""
    controller = AssignmentController(db)
    assignment = await controller.get_assignment(assignment_id)
    if not assignment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Assignment not found",
        )
    return assignment


@router.put("/{assignment_id}", response_model=AssignmentResponse)
async def update_assignment(
    assignment_id: int,
    assignment_data: AssignmentUpdate,
    db: AsyncSession = Depends(get_db),
) -> AssignmentResponse:
    """Update an assignment."""
    controller = AssignmentController(db)
    assignment = await controller.update_assignment(assignment_id, assignment_data)
    if not assignment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Assignment not found",
        )
    return assignment


@router.delete("/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_assignment(
    assignment_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete an assignment."""
    controller = AssignmentController(db)
    deleted = await controller.delete_assignment(assignment_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Assignment not found",
        )
