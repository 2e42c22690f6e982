"""
Database initialization and bootstrapping.

Two schema operations live here: ``create_tables`` (idempotent) and
``reset_schema`` (drop every table, then recreate). ``reset_schema`` is for
setup and tests only and has nothing to do with record-level cascade
delete, which is handled by the integrity service.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from app.db.base import Base
from app.db import session as db_session
from app.core.logging import get_logger
import app.models  # registers every table with Base.metadata
from app.schemas.employee import EmployeeCreate
from app.schemas.client import ClientCreate
from app.schemas.project import ProjectCreate
from app.schemas.supplier import SupplierCreate
from app.schemas.material import MaterialCreate
from app.schemas.procurement import ProcurementRecordCreate
from app.schemas.assignment import AssignmentCreate
from app.services.employee_service import EmployeeService
from app.services.client_service import ClientService
from app.services.project_service import ProjectService
from app.services.supplier_service import SupplierService
from app.services.material_service import MaterialService
from app.services.procurement_service import ProcurementService
from app.services.assignment_service import AssignmentService

logger = get_logger(__name__)


def _resolve_engine(engine: Optional[AsyncEngine]) -> AsyncEngine:
    if engine is not None:
        return engine
    if db_session.engine is None:
        db_session.create_engine()
    return db_session.engine


async def create_tables(engine: Optional[AsyncEngine] = None) -> None:
    """
    Create all tables and indexes that do not exist yet.
    """
    engine = _resolve_engine(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database tables initialized", extra={"tables": sorted(Base.metadata.tables)})


async def reset_schema(engine: Optional[AsyncEngine] = None) -> None:
    """
    Drop every table, dependents first, and recreate the empty schema.
    All data is lost.
    """
    engine = _resolve_engine(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    logger.warning("Database schema reset", extra={"tables": sorted(Base.metadata.tables)})


async def seed_sample_data(session: AsyncSession) -> None:
    """
    Load the reference sample rows through the services, so every row
    passes the integrity checks like any other caller's data.
    """
    await EmployeeService(session).create_employee(EmployeeCreate(
        id=1,
        full_name="Alice Smith",
        job_role="Lead Architect",
        email="alice@parsel.com",
        status="Active",
        address="123 Pine St",
        phone="555-0199",
    ))
    await ClientService(session).create_client(ClientCreate(
        id=1,
        name="Global Build Inc",
        email="contact@globalbuild.com",
        phone="555-0200",
        address="456 Enterprise Way",
    ))
    await ProjectService(session).create_project(ProjectCreate(
        id=101,
        name="Skyline Bridge",
        client_id=1,
        start_date=date(2023, 1, 15),
        estimated_end_date=date(2023, 12, 1),
        actual_end_date=date(2023, 11, 20),
        estimated_cost=Decimal("1000000.00"),
        actual_cost=Decimal("950000.00"),
        status="Completed",
    ))
    await SupplierService(session).create_supplier(SupplierCreate(
        id=1,
        name="Steel Co",
        email="sales@steelco.com",
        phone="555-0300",
        rating=Decimal("4.5"),
    ))
    await MaterialService(session).create_material(MaterialCreate(
        id=1,
        name="Steel Beams",
        unit_of_measure="Ton",
        unit_cost=Decimal("500.00"),
        total_material_cost=Decimal("5000.00"),
    ))
    await ProcurementService(session).create_procurement(ProcurementRecordCreate(
        id=5001,
        project_id=101,
        supplier_id=1,
        material_id=1,
        quantity_purchased=Decimal("10"),
        purchase_cost=Decimal("5000.00"),
        purchase_date=date(2023, 2, 10),
    ))
    await AssignmentService(session).create_assignment(AssignmentCreate(
        id=1,
        project_id=101,
        employee_id=1,
        role="Project Lead",
        task_start_date=date(2023, 1, 15),
        task_end_date=date(2023, 11, 20),
    ))

    logger.info("Sample data seeded")
