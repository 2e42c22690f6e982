"""
Schema management tests: table creation, full reset and sample data.
"""

import pytest
from sqlalchemy import inspect, select, func

from app.core.exceptions import ConflictError
from app.db.init_db import create_tables, reset_schema, seed_sample_data
from app.models import Employee, Client, Project, Supplier, Material, ProcurementRecord, Assignment

EXPECTED_TABLES = {
    "employees",
    "clients",
    "projects",
    "suppliers",
    "materials",
    "procurement",
    "project_assignments",
}


async def _table_names(engine) -> set:
    async with engine.connect() as conn:
        return set(await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names()))


@pytest.mark.asyncio
async def test_create_tables_is_idempotent(test_engine):
    await create_tables(test_engine)
    await create_tables(test_engine)

    assert await _table_names(test_engine) == EXPECTED_TABLES


@pytest.mark.asyncio
async def test_foreign_key_columns_are_indexed(test_engine):
    async with test_engine.connect() as conn:
        indexed = await conn.run_sync(
            lambda sync_conn: {
                column
                for index in inspect(sync_conn).get_indexes("procurement")
                for column in index["column_names"]
            }
        )

    assert {"project_id", "supplier_id", "material_id", "purchase_date"} <= indexed


@pytest.mark.asyncio
async def test_seed_sample_data_loads_one_row_per_table(test_db_session):
    await seed_sample_data(test_db_session)

    for model in (Employee, Client, Project, Supplier, Material, ProcurementRecord, Assignment):
        count = await test_db_session.scalar(select(func.count()).select_from(model))
        assert count == 1, model.__name__

    project = await test_db_session.get(Project, 101)
    assert project.name == "Skyline Bridge"
    assert project.client_id == 1


@pytest.mark.asyncio
async def test_seeding_twice_is_rejected(test_db_session):
    await seed_sample_data(test_db_session)

    with pytest.raises(ConflictError):
        await seed_sample_data(test_db_session)


@pytest.mark.asyncio
async def test_reset_schema_drops_all_data(test_engine, test_db_session):
    await seed_sample_data(test_db_session)
    await test_db_session.close()

    await reset_schema(test_engine)

    assert await _table_names(test_engine) == EXPECTED_TABLES
    async with test_engine.connect() as conn:
        for model in (Employee, Project, ProcurementRecord):
            count = await conn.scalar(select(func.count()).select_from(model))
            assert count == 0
