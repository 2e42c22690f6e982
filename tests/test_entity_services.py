"""
Entity service tests: create, update and delete through the integrity ruleset.
"""

import pytest
from datetime import date
from decimal import Decimal
from sqlalchemy import select, func

from app.core.exceptions import ValidationError, ConflictError, ReferenceError, DependencyError
from app.models import Client, Project, ProcurementRecord, Assignment
from app.schemas.employee import EmployeeCreate, EmployeeUpdate
from app.schemas.client import ClientCreate
from app.schemas.project import ProjectCreate, ProjectUpdate
from app.schemas.supplier import SupplierCreate
from app.schemas.material import MaterialCreate, MaterialUpdate
from app.schemas.procurement import ProcurementRecordCreate
from app.schemas.assignment import AssignmentCreate
from app.services.employee_service import EmployeeService
from app.services.client_service import ClientService
from app.services.project_service import ProjectService
from app.services.supplier_service import SupplierService
from app.services.material_service import MaterialService
from app.services.procurement_service import ProcurementService
from app.services.assignment_service import AssignmentService
from app.services.integrity_service import IntegrityService


def _employee(**overrides) -> EmployeeCreate:
    values = {
        "id": 2,
        "full_name": "Bob Jones",
        "job_role": "Site Engineer",
        "email": "bob@parsel.com",
        "status": "Active",
        "phone": "555-0101",
    }
    values.update(overrides)
    return EmployeeCreate(**values)


async def _count(session, model) -> int:
    return await session.scalar(select(func.count()).select_from(model))


@pytest.mark.asyncio
async def test_create_and_get_employee(test_db_session):
    service = EmployeeService(test_db_session)

    created = await service.create_employee(_employee())
    fetched = await service.get_employee(2)
    by_email = await service.get_employee_by_email("bob@parsel.com")

    assert created.id == 2
    assert fetched.full_name == "Bob Jones"
    assert by_email.id == 2
    assert await service.get_employee(99) is None


@pytest.mark.asyncio
async def test_duplicate_email_is_a_conflict(sample_data):
    service = EmployeeService(sample_data)

    with pytest.raises(ConflictError) as exc_info:
        await service.create_employee(_employee(email="alice@parsel.com"))

    assert exc_info.value.details["field"] == "email"
    assert await service.get_employee(2) is None


@pytest.mark.asyncio
async def test_duplicate_phone_is_a_conflict(sample_data):
    service = ClientService(sample_data)

    with pytest.raises(ConflictError):
        await service.create_client(ClientCreate(
            id=2,
            name="Harbor Works",
            email="info@harborworks.com",
            phone="555-0200",
        ))


@pytest.mark.asyncio
async def test_duplicate_identifier_is_a_conflict(sample_data):
    service = ProjectService(sample_data)

    with pytest.raises(ConflictError):
        await service.create_project(ProjectCreate(id=101, name="Second Bridge"))


@pytest.mark.asyncio
async def test_missing_reference_is_rejected_and_nothing_is_written(sample_data):
    service = ProcurementService(sample_data)

    with pytest.raises(ReferenceError) as exc_info:
        await service.create_procurement(ProcurementRecordCreate(
            id=5002,
            project_id=101,
            supplier_id=42,
            material_id=1,
            purchase_cost=Decimal("100.00"),
        ))

    assert exc_info.value.details["field"] == "supplier_id"
    assert await _count(sample_data, ProcurementRecord) == 1


@pytest.mark.asyncio
async def test_project_without_client_is_allowed(test_db_session):
    service = ProjectService(test_db_session)

    project = await service.create_project(ProjectCreate(id=7, name="Depot Survey", status="In Progress"))

    assert project.client_id is None
    assert project.client_name is None


@pytest.mark.asyncio
async def test_project_response_carries_client_name(sample_data):
    project = await ProjectService(sample_data).get_project(101)

    assert project.client_name == "Global Build Inc"


@pytest.mark.asyncio
async def test_update_finalizes_project(test_db_session):
    service = ProjectService(test_db_session)
    await service.create_project(ProjectCreate(
        id=7,
        name="Depot Survey",
        start_date=date(2024, 1, 1),
        estimated_cost=Decimal("2000.00"),
        status="In Progress",
    ))

    updated = await service.update_project(7, ProjectUpdate(
        status="Completed",
        actual_end_date=date(2024, 2, 1),
        actual_cost=Decimal("2500.00"),
    ))

    assert updated.status == "Completed"
    assert updated.actual_cost == Decimal("2500.00")
    assert updated.estimated_cost == Decimal("2000.00")


@pytest.mark.asyncio
async def test_update_cannot_change_identifier(sample_data):
    service = EmployeeService(sample_data)

    with pytest.raises(ValidationError):
        await service.update_employee(1, EmployeeUpdate(id=3, status="Inactive"))

    employee = await service.get_employee(1)
    assert employee.status == "Active"


@pytest.mark.asyncio
async def test_update_with_same_identifier_is_allowed(sample_data):
    service = EmployeeService(sample_data)

    updated = await service.update_employee(1, EmployeeUpdate(id=1, status="On Leave"))

    assert updated.status == "On Leave"


@pytest.mark.asyncio
async def test_update_cannot_clear_required_field(sample_data):
    service = EmployeeService(sample_data)

    with pytest.raises(ValidationError) as exc_info:
        await service.update_employee(1, EmployeeUpdate(job_role=None))

    assert exc_info.value.details["fields"] == ["job_role"]


@pytest.mark.asyncio
async def test_update_unique_field_collision(sample_data):
    service = EmployeeService(sample_data)
    await service.create_employee(_employee())

    with pytest.raises(ConflictError):
        await service.update_employee(2, EmployeeUpdate(phone="555-0199"))

    # Keeping one's own value is not a collision
    updated = await service.update_employee(1, EmployeeUpdate(phone="555-0199"))
    assert updated.phone == "555-0199"


@pytest.mark.asyncio
async def test_update_to_missing_reference_is_rejected(sample_data):
    service = ProjectService(sample_data)

    with pytest.raises(ReferenceError):
        await service.update_project(101, ProjectUpdate(client_id=9))


@pytest.mark.asyncio
async def test_update_missing_record_returns_none(test_db_session):
    service = MaterialService(test_db_session)

    assert await service.update_material(3, MaterialUpdate(name="Glass")) is None


@pytest.mark.asyncio
async def test_delete_with_dependents_is_rejected(sample_data):
    service = ProjectService(sample_data)

    with pytest.raises(DependencyError) as exc_info:
        await service.delete_project(101)

    assert exc_info.value.details["dependents"] == {
        "ProcurementRecord": [5001],
        "Assignment": [1],
    }
    assert await service.get_project(101) is not None


@pytest.mark.asyncio
async def test_cascade_delete_of_client_removes_projects_and_their_records(sample_data):
    service = ClientService(sample_data)

    assert await service.delete_client(1, cascade=True) is True

    assert await service.get_client(1) is None
    assert await _count(sample_data, Project) == 0
    assert await _count(sample_data, ProcurementRecord) == 0
    assert await _count(sample_data, Assignment) == 0
    assert await SupplierService(sample_data).get_supplier(1) is not None
    assert await EmployeeService(sample_data).get_employee(1) is not None


@pytest.mark.asyncio
async def test_delete_leaf_records(sample_data):
    assert await AssignmentService(sample_data).delete_assignment(1) is True
    assert await ProcurementService(sample_data).delete_procurement(5001) is True

    # Nothing references the project any more
    assert await ProjectService(sample_data).delete_project(101) is True


@pytest.mark.asyncio
async def test_delete_missing_record_returns_false(test_db_session):
    assert await SupplierService(test_db_session).delete_supplier(77) is False


@pytest.mark.asyncio
async def test_material_needs_only_an_identifier(test_db_session):
    service = MaterialService(test_db_session)

    material = await service.create_material(MaterialCreate(id=3))

    assert material.id == 3
    assert material.name is None


@pytest.mark.asyncio
async def test_employee_may_be_assigned_twice_to_one_project(sample_data):
    service = AssignmentService(sample_data)

    await service.create_assignment(AssignmentCreate(id=2, project_id=101, employee_id=1, role="Reviewer"))
    assignments, total = await service.list_assignments(employee_id=1)

    assert total == 2
    assert [a.id for a in assignments] == [1, 2]


@pytest.mark.asyncio
async def test_list_filters(sample_data):
    await SupplierService(sample_data).create_supplier(SupplierCreate(
        id=2,
        name="Concrete Corp",
        email="orders@concretecorp.com",
        phone="555-0301",
        rating=Decimal("3.0"),
    ))

    suppliers, total = await SupplierService(sample_data).list_suppliers(min_rating=Decimal("4.0"))
    projects, project_total = await ProjectService(sample_data).list_projects(status="Completed")
    employees, _ = await EmployeeService(sample_data).list_employees(status="Inactive")

    assert [s.id for s in suppliers] == [1]
    assert total == 1
    assert [p.id for p in projects] == [101]
    assert project_total == 1
    assert employees == []


async def _passes(self, *args, **kwargs):
    """Stand-in for a pre-check that another writer raced past."""
    return None


@pytest.mark.asyncio
async def test_database_foreign_key_on_delete_is_a_dependency_error(fk_db_session, monkeypatch):
    monkeypatch.setattr(IntegrityService, "check_deletable", _passes)

    with pytest.raises(DependencyError) as exc_info:
        await ClientService(fk_db_session).delete_client(1)

    assert exc_info.value.details["action"] == "delete"
    # Rolled back: the session is usable and the client is still there
    assert await _count(fk_db_session, Client) == 1
    assert await _count(fk_db_session, Project) == 1


@pytest.mark.asyncio
async def test_database_foreign_key_on_create_is_a_reference_error(fk_db_session, monkeypatch):
    monkeypatch.setattr(IntegrityService, "check_references", _passes)

    with pytest.raises(ReferenceError):
        await ProcurementService(fk_db_session).create_procurement(ProcurementRecordCreate(
            id=7,
            project_id=999,
            supplier_id=1,
            material_id=1,
        ))

    assert await _count(fk_db_session, ProcurementRecord) == 1


@pytest.mark.asyncio
async def test_database_foreign_key_on_update_is_a_reference_error(fk_db_session, monkeypatch):
    monkeypatch.setattr(IntegrityService, "check_references", _passes)
    service = ProjectService(fk_db_session)

    with pytest.raises(ReferenceError):
        await service.update_project(101, ProjectUpdate(client_id=9))

    project = await service.get_project(101)
    assert project.client_id == 1


@pytest.mark.asyncio
async def test_database_unique_violation_is_a_conflict(fk_db_session, monkeypatch):
    monkeypatch.setattr(IntegrityService, "check_unique", _passes)

    with pytest.raises(ConflictError):
        await EmployeeService(fk_db_session).create_employee(_employee(email="alice@parsel.com"))

    assert await EmployeeService(fk_db_session).get_employee(2) is None


@pytest.mark.asyncio
async def test_cascade_delete_satisfies_enforced_foreign_keys(fk_db_session):
    assert await ClientService(fk_db_session).delete_client(1, cascade=True) is True

    assert await _count(fk_db_session, Client) == 0
    assert await _count(fk_db_session, Assignment) == 0
