"""
Health check endpoint.
Returns system status and uptime information.
"""

from fastapi import APIRouter

from app.schemas.health import HealthResponse
from app.deps.di_container import get_container

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def get_health() -> HealthResponse:
    """
    Health check endpoint.
    Returns system status, uptime, database connectivity and schema checks.
    """
    container = get_container()
    controller = container.health_controller()
    return await controller.get_health()
