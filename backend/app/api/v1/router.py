"""
API v1 router that aggregates all endpoint routers.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    health,
    employees,
    clients,
    projects,
    suppliers,
    materials,
    procurement,
    assignments,
    reports,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(employees.router, prefix="/employees", tags=["employees"])
api_router.include_router(clients.router, prefix="/clients", tags=["clients"])
api_router.include_router(projects.router, prefix="/projects", tags=["projects"])
api_router.include_router(suppliers.router, prefix="/suppliers", tags=["suppliers"])
api_router.include_router(materials.router, prefix="/materials", tags=["materials"])
api_router.include_router(procurement.router, prefix="/procurement", tags=["procurement"])
api_router.include_router(assignments.router, prefix="/assignments", tags=["assignments"])
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
