"""
Database models.
Import all models here to ensure they're registered with Base.
"""

from app.models.employee import Employee
from app.models.client import Client
from app.models.project import Project
from app.models.supplier import Supplier
from app.models.material import Material
from app.models.procurement import ProcurementRecord
from app.models.assignment import Assignment

__all__ = [
    "Employee",
    "Client",
    "Project",
    "Supplier",
    "Material",
    "ProcurementRecord",
    "Assignment",
]
