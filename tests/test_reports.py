"""
Analytics report tests.
"""

import pytest
from datetime import date
from decimal import Decimal
from sqlalchemy import select, func

from app.core.config import settings
from app.core.exceptions import ValidationError
from app.deps.di_container import build_container
from app.models import Employee, Project, Supplier, Material, Assignment, ProcurementRecord
from app.schemas.report import ReportFilter
from app.services.report_service import ReportService, days_between, cost_variance


def _project(id, **overrides) -> Project:
    values = {"id": id, "name": f"Project {id}"}
    values.update(overrides)
    return Project(**values)


def test_days_between():
    assert days_between(date(2023, 1, 15), date(2023, 12, 1)) == 320
    assert days_between(date(2023, 1, 15), date(2023, 11, 20)) == 309
    assert days_between(None, date(2023, 11, 20)) is None
    assert days_between(date(2023, 1, 15), None) is None


def test_cost_variance_sign():
    assert cost_variance(Decimal("100.00"), Decimal("120.00")) == Decimal("20.00")
    assert cost_variance(Decimal("100.00"), Decimal("80.00")) == Decimal("-20.00")
    assert cost_variance(Decimal("100.00"), Decimal("100.00")) == Decimal("0")


@pytest.mark.asyncio
async def test_reference_scenario(sample_data):
    service = ReportService(sample_data, include_inactive_default=False)

    variance = await service.cost_variance_report()
    duration = await service.duration_performance_report()
    ranking = await service.supplier_ranking_report()
    workload = await service.employee_workload_report()

    assert [(r.project_id, r.project_name, r.variance) for r in variance] == [
        (101, "Skyline Bridge", Decimal("-50000.00")),
    ]
    assert [(r.project_id, r.estimated_days, r.actual_days) for r in duration] == [(101, 320, 309)]
    assert [(r.supplier_name, r.total_orders, r.total_value) for r in ranking] == [
        ("Steel Co", 1, Decimal("5000.00")),
    ]
    assert [(r.full_name, r.projects_assigned) for r in workload] == [("Alice Smith", 1)]


@pytest.mark.asyncio
async def test_cost_variance_requires_exact_status_and_both_costs(test_db_session):
    test_db_session.add_all([
        _project(1, status="Completed", estimated_cost=Decimal("100.00"), actual_cost=Decimal("120.00")),
        _project(2, status="completed", estimated_cost=Decimal("100.00"), actual_cost=Decimal("90.00")),
        _project(3, status="Completed", estimated_cost=Decimal("100.00")),
        _project(4, status="Completed", actual_cost=Decimal("100.00")),
        _project(5, status="In Progress", estimated_cost=Decimal("100.00"), actual_cost=Decimal("50.00")),
        _project(6, status="Completed", estimated_cost=Decimal("75.00"), actual_cost=Decimal("75.00")),
    ])
    await test_db_session.commit()

    rows = await ReportService(test_db_session).cost_variance_report()

    assert [(r.project_id, r.variance) for r in rows] == [
        (1, Decimal("20.00")),
        (6, Decimal("0.00")),
    ]


@pytest.mark.asyncio
async def test_duration_leaves_unknown_day_counts_empty(test_db_session):
    test_db_session.add_all([
        _project(1, start_date=date(2024, 1, 1), estimated_end_date=date(2024, 1, 31), actual_end_date=date(2024, 2, 10)),
        _project(2, actual_end_date=date(2024, 3, 1)),
        _project(3, start_date=date(2024, 1, 1), actual_end_date=date(2024, 1, 11)),
        _project(4, start_date=date(2024, 1, 1), estimated_end_date=date(2024, 6, 1)),
    ])
    await test_db_session.commit()

    rows = await ReportService(test_db_session).duration_performance_report()

    assert [(r.project_id, r.estimated_days, r.actual_days) for r in rows] == [
        (1, 30, 40),
        (2, None, None),
        (3, None, 10),
    ]


async def _ranking_fixture(session) -> None:
    """Three suppliers: two tied on two orders each, one without orders."""
    session.add_all([
        _project(1),
        Material(id=1, name="Mixed stock"),
        Supplier(id=1, name="Alpha Steel", email="a@steel.com", phone="555-1001"),
        Supplier(id=2, name="Beta Timber", email="b@timber.com", phone="555-1002"),
        Supplier(id=3, name="Gamma Glass", email="g@glass.com", phone="555-1003"),
        Employee(id=1, full_name="Ann", job_role="PM", email="ann@parsel.com", status="Active", phone="555-2001"),
        Employee(id=2, full_name="Ben", job_role="QS", email="ben@parsel.com", status="Active", phone="555-2002"),
        Employee(id=3, full_name="Cat", job_role="QS", email="cat@parsel.com", status="Active", phone="555-2003"),
    ])
    await session.flush()
    session.add_all([
        ProcurementRecord(id=1, project_id=1, supplier_id=2, material_id=1, purchase_cost=Decimal("10.00"), purchase_date=date(2024, 1, 5)),
        ProcurementRecord(id=2, project_id=1, supplier_id=2, material_id=1, purchase_cost=Decimal("15.50"), purchase_date=date(2024, 2, 5)),
        ProcurementRecord(id=3, project_id=1, supplier_id=1, material_id=1, purchase_cost=Decimal("100.00"), purchase_date=date(2024, 1, 20)),
        ProcurementRecord(id=4, project_id=1, supplier_id=1, material_id=1, purchase_cost=None, purchase_date=date(2024, 3, 1)),
        Assignment(id=1, project_id=1, employee_id=2, task_start_date=date(2024, 1, 1)),
        Assignment(id=2, project_id=1, employee_id=2, task_start_date=date(2024, 4, 1)),
        Assignment(id=3, project_id=1, employee_id=1, task_start_date=date(2024, 1, 10)),
    ])
    await session.commit()


@pytest.mark.asyncio
async def test_supplier_ranking_breaks_ties_by_supplier_id(test_db_session):
    await _ranking_fixture(test_db_session)

    rows = await ReportService(test_db_session).supplier_ranking_report(include_inactive=False)

    assert [(r.supplier_id, r.total_orders, r.total_value) for r in rows] == [
        (1, 2, Decimal("100.00")),
        (2, 2, Decimal("25.50")),
    ]


@pytest.mark.asyncio
async def test_supplier_ranking_can_include_suppliers_without_orders(test_db_session):
    await _ranking_fixture(test_db_session)

    rows = await ReportService(test_db_session).supplier_ranking_report(include_inactive=True)

    assert [(r.supplier_id, r.total_orders) for r in rows] == [(1, 2), (2, 2), (3, 0)]
    assert rows[-1].total_value == Decimal("0")


@pytest.mark.asyncio
async def test_include_inactive_default_comes_from_the_service(test_db_session):
    await _ranking_fixture(test_db_session)

    inclusive = ReportService(test_db_session, include_inactive_default=True)
    rows = await inclusive.employee_workload_report()
    overridden = await inclusive.employee_workload_report(include_inactive=False)

    assert [r.employee_id for r in rows] == [2, 1, 3]
    assert [r.employee_id for r in overridden] == [2, 1]


@pytest.mark.asyncio
async def test_workload_counts_assignment_rows(test_db_session):
    await _ranking_fixture(test_db_session)

    rows = await ReportService(test_db_session).employee_workload_report(include_inactive=False)

    # Ben holds two assignments on the same project
    assert [(r.full_name, r.projects_assigned) for r in rows] == [("Ben", 2), ("Ann", 1)]


@pytest.mark.asyncio
async def test_date_window_applies_to_each_report(test_db_session):
    await _ranking_fixture(test_db_session)
    january = ReportFilter(start_date=date(2024, 1, 1), end_date=date(2024, 1, 31))
    service = ReportService(test_db_session, include_inactive_default=False)

    ranking = await service.supplier_ranking_report(january)
    workload = await service.employee_workload_report(january)
    inclusive_ranking = await service.supplier_ranking_report(january, include_inactive=True)

    assert [(r.supplier_id, r.total_orders) for r in ranking] == [(1, 1), (2, 1)]
    assert [(r.employee_id, r.projects_assigned) for r in workload] == [(1, 1), (2, 1)]
    assert [(r.supplier_id, r.total_orders) for r in inclusive_ranking] == [(1, 1), (2, 1), (3, 0)]


@pytest.mark.asyncio
async def test_project_reports_filter_on_actual_end_date(sample_data):
    service = ReportService(sample_data)
    before = ReportFilter(end_date=date(2023, 6, 30))
    after = ReportFilter(start_date=date(2023, 11, 1))

    assert await service.cost_variance_report(before) == []
    assert await service.duration_performance_report(before) == []
    assert [r.project_id for r in await service.cost_variance_report(after)] == [101]
    assert [r.project_id for r in await service.duration_performance_report(after)] == [101]


@pytest.mark.asyncio
async def test_reversed_window_is_rejected_by_every_report(test_db_session):
    service = ReportService(test_db_session)
    reversed_window = ReportFilter(start_date=date(2024, 2, 1), end_date=date(2024, 1, 1))

    for report in (
        service.cost_variance_report,
        service.duration_performance_report,
        service.supplier_ranking_report,
        service.employee_workload_report,
    ):
        with pytest.raises(ValidationError) as exc_info:
            await report(reversed_window)
        assert exc_info.value.details["end_date"] == "2024-01-01"

    # A single-day window is valid
    same_day = ReportFilter(start_date=date(2024, 1, 1), end_date=date(2024, 1, 1))
    assert await service.cost_variance_report(same_day) == []


@pytest.mark.asyncio
async def test_reports_do_not_write(sample_data):
    service = ReportService(sample_data, include_inactive_default=True)

    first = await service.supplier_ranking_report()
    second = await service.supplier_ranking_report()

    assert first == second
    assert await sample_data.scalar(select(func.count()).select_from(ProcurementRecord)) == 1
    assert not sample_data.new
    assert not sample_data.dirty


@pytest.mark.asyncio
async def test_container_config_holds_only_report_settings(test_db_session):
    container = build_container()

    assert container.config() == {"report_include_inactive": settings.REPORT_INCLUDE_INACTIVE}

    controller = container.report_controller(session=test_db_session)
    assert controller.report_service.include_inactive_default is settings.REPORT_INCLUDE_INACTIVE
