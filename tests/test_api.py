"""
HTTP API tests: status codes and error bodies for CRUD and report endpoints.
"""

import pytest

API = "/api/v1"

ALICE = {
    "id": 1,
    "full_name": "Alice Smith",
    "job_role": "Lead Architect",
    "email": "alice@parsel.com",
    "status": "Active",
    "address": "123 Pine St",
    "phone": "555-0199",
}


@pytest.mark.asyncio
async def test_create_and_fetch_employee(test_client):
    response = await test_client.post(f"{API}/employees", json=ALICE)
    assert response.status_code == 201
    assert response.json()["email"] == "alice@parsel.com"

    response = await test_client.get(f"{API}/employees/1")
    assert response.status_code == 200
    assert response.json()["full_name"] == "Alice Smith"

    response = await test_client.get(f"{API}/employees", params={"email": "alice@parsel.com"})
    assert response.status_code == 200
    assert response.json()["total"] == 1


@pytest.mark.asyncio
async def test_duplicate_email_returns_409(test_client):
    await test_client.post(f"{API}/employees", json=ALICE)

    response = await test_client.post(
        f"{API}/employees",
        json={**ALICE, "id": 2, "phone": "555-0999"},
    )

    assert response.status_code == 409
    error = response.json()["error"]
    assert error["type"] == "ConflictError"
    assert error["details"]["field"] == "email"


@pytest.mark.asyncio
async def test_missing_required_field_returns_422(test_client):
    payload = {key: value for key, value in ALICE.items() if key != "job_role"}

    response = await test_client.post(f"{API}/employees", json=payload)

    assert response.status_code == 422
    assert response.json()["error"]["type"] == "ValidationError"


@pytest.mark.asyncio
async def test_identifier_change_returns_422(test_client):
    await test_client.post(f"{API}/employees", json=ALICE)

    response = await test_client.put(f"{API}/employees/1", json={"id": 5})

    assert response.status_code == 422
    assert response.json()["error"]["type"] == "ValidationError"


@pytest.mark.asyncio
async def test_unknown_reference_returns_422(test_client):
    response = await test_client.post(
        f"{API}/projects",
        json={"id": 101, "name": "Skyline Bridge", "client_id": 9},
    )

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["type"] == "ReferenceError"
    assert error["details"]["field"] == "client_id"


@pytest.mark.asyncio
async def test_missing_record_returns_404(test_client):
    assert (await test_client.get(f"{API}/clients/3")).status_code == 404
    assert (await test_client.put(f"{API}/materials/3", json={"name": "Glass"})).status_code == 404
    assert (await test_client.delete(f"{API}/suppliers/3")).status_code == 404


@pytest.mark.asyncio
async def test_delete_with_dependents_returns_409_until_cascade(test_client, sample_data):
    response = await test_client.delete(f"{API}/clients/1")
    assert response.status_code == 409
    assert response.json()["error"]["type"] == "DependencyError"

    response = await test_client.delete(f"{API}/clients/1", params={"cascade": "true"})
    assert response.status_code == 204

    assert (await test_client.get(f"{API}/projects/101")).status_code == 404
    assert (await test_client.get(f"{API}/procurement/5001")).status_code == 404
    assert (await test_client.get(f"{API}/assignments/1")).status_code == 404


@pytest.mark.asyncio
async def test_project_lifecycle_update(test_client):
    await test_client.post(
        f"{API}/projects",
        json={"id": 7, "name": "Depot Survey", "estimated_cost": "2000.00", "status": "In Progress"},
    )

    response = await test_client.put(
        f"{API}/projects/7",
        json={"status": "Completed", "actual_cost": "1800.00", "actual_end_date": "2024-02-01"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "Completed"
    assert body["actual_end_date"] == "2024-02-01"


@pytest.mark.asyncio
async def test_report_endpoints(test_client, sample_data):
    response = await test_client.get(f"{API}/reports/cost-variance")
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert body["items"][0]["project_id"] == 101
    assert float(body["items"][0]["variance"]) == -50000.0

    response = await test_client.get(f"{API}/reports/duration-performance")
    assert response.json()["items"] == [
        {"project_id": 101, "project_name": "Skyline Bridge", "estimated_days": 320, "actual_days": 309},
    ]

    response = await test_client.get(f"{API}/reports/supplier-ranking")
    body = response.json()
    assert body["include_inactive"] is False
    assert [(row["supplier_name"], row["total_orders"]) for row in body["items"]] == [("Steel Co", 1)]
    assert float(body["items"][0]["total_value"]) == 5000.0

    response = await test_client.get(f"{API}/reports/employee-workload")
    assert [(row["full_name"], row["projects_assigned"]) for row in response.json()["items"]] == [
        ("Alice Smith", 1),
    ]


@pytest.mark.asyncio
async def test_report_include_inactive_query_parameter(test_client, sample_data):
    await test_client.post(
        f"{API}/suppliers",
        json={"id": 2, "name": "Concrete Corp", "email": "orders@concretecorp.com", "phone": "555-0301"},
    )

    response = await test_client.get(f"{API}/reports/supplier-ranking", params={"include_inactive": "true"})

    body = response.json()
    assert body["include_inactive"] is True
    assert [(row["supplier_id"], row["total_orders"]) for row in body["items"]] == [(1, 1), (2, 0)]


@pytest.mark.asyncio
async def test_report_date_window(test_client, sample_data):
    response = await test_client.get(
        f"{API}/reports/supplier-ranking",
        params={"start_date": "2024-01-01", "end_date": "2024-12-31"},
    )
    assert response.status_code == 200
    assert response.json()["items"] == []

    response = await test_client.get(
        f"{API}/reports/cost-variance",
        params={"start_date": "2024-01-01", "end_date": "2023-01-01"},
    )
    assert response.status_code == 422
    assert response.json()["error"]["type"] == "ValidationError"
