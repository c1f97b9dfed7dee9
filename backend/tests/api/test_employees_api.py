"""Employee API - end-to-end tests through FastAPI with an in-memory database.

Tests cover:
    - create → get → update → delete → 404 lifecycle with store-assigned ids
    - 400 for missing fields (with the required list) and invalid email
    - 409 on duplicate email, with exactly one stored row
    - 404 for unknown ids on get, update, delete
    - department filter exact match; /departments distinct and sorted
    - malformed bodies rejected with 400
    - non-integer and out-of-range ids reported as 404, body validated first on PUT
"""

import pytest
from sqlalchemy import func, select

from employee_registry.models.employee import Employee
from tests.factories import employee_payload


async def _create(client, **overrides):
    return await client.post("/api/employees", json=employee_payload(**overrides))


async def test_full_lifecycle(client):
    res = await _create(client)
    assert res.status_code == 201
    assert res.json() == {"id": 1, **employee_payload()}

    res = await client.get("/api/employees/1")
    assert res.status_code == 200
    assert res.json()["name"] == "Ann"

    res = await client.put(
        "/api/employees/1", json=employee_payload(department="Ops"),
    )
    assert res.status_code == 200
    assert res.json()["department"] == "Ops"
    assert (await client.get("/api/employees/1")).json()["department"] == "Ops"

    res = await client.delete("/api/employees/1")
    assert res.status_code == 200
    assert res.json() == {"message": "Employee deleted successfully"}

    res = await client.get("/api/employees/1")
    assert res.status_code == 404
    assert res.json() == {"error": "Employee not found"}


async def test_create_assigns_fresh_ids(client):
    first = (await _create(client, email="a@x.com")).json()
    await client.delete(f"/api/employees/{first['id']}")
    second = (await _create(client, email="b@x.com")).json()
    assert second["id"] > first["id"]


async def test_duplicate_email_returns_409_and_keeps_one_row(client, test_manager):
    assert (await _create(client)).status_code == 201
    res = await _create(client, name="Another Ann")
    assert res.status_code == 409
    assert res.json() == {"error": "Employee with this email already exists"}

    async with test_manager.session() as db:
        count = await db.execute(
            select(func.count()).select_from(Employee)
            .where(Employee.email == "ann@x.com"),
        )
    assert count.scalar_one() == 1


async def test_update_to_taken_email_returns_409(client):
    await _create(client, email="a@x.com")
    await _create(client, email="b@x.com")
    res = await client.put(
        "/api/employees/2", json=employee_payload(email="a@x.com"),
    )
    assert res.status_code == 409


@pytest.mark.parametrize("field", ["name", "email", "department", "role", "hireDate"])
async def test_create_with_empty_field_returns_400(client, field):
    res = await _create(client, **{field: ""})
    assert res.status_code == 400
    assert res.json() == {
        "error": "All fields are required",
        "required": ["name", "email", "department", "role", "hireDate"],
    }


async def test_create_with_absent_field_returns_400(client):
    body = employee_payload()
    del body["hireDate"]
    res = await client.post("/api/employees", json=body)
    assert res.status_code == 400
    assert res.json()["error"] == "All fields are required"


async def test_create_without_body_returns_400(client):
    res = await client.post("/api/employees")
    assert res.status_code == 400
    assert res.json()["error"] == "All fields are required"


async def test_update_with_missing_field_returns_400(client):
    await _create(client)
    res = await client.put("/api/employees/1", json=employee_payload(role=""))
    assert res.status_code == 400
    assert "required" in res.json()


async def test_invalid_email_returns_400(client):
    res = await _create(client, email="not-an-email")
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid email format"}

    await _create(client)
    res = await client.put(
        "/api/employees/1", json=employee_payload(email="not-an-email"),
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid email format"}


async def test_short_valid_email_accepted(client):
    res = await _create(client, email="a@b.co")
    assert res.status_code == 201


async def test_update_nonexistent_returns_404(client):
    res = await client.put("/api/employees/99", json=employee_payload())
    assert res.status_code == 404
    assert res.json() == {"error": "Employee not found"}


async def test_delete_nonexistent_returns_404(client):
    res = await client.delete("/api/employees/99")
    assert res.status_code == 404
    assert res.json() == {"error": "Employee not found"}


async def test_update_ignores_id_in_body(client):
    await _create(client)
    res = await client.put(
        "/api/employees/1", json={**employee_payload(), "id": 50},
    )
    assert res.status_code == 200
    assert res.json()["id"] == 1


async def test_filter_by_department_is_exact_and_case_sensitive(client):
    await _create(client, email="a@x.com", department="Engineering")
    await _create(client, email="b@x.com", department="engineering")
    await _create(client, email="c@x.com", department="Sales")

    res = await client.get("/api/employees", params={"department": "Engineering"})
    assert res.status_code == 200
    assert [e["email"] for e in res.json()] == ["a@x.com"]

    everyone = await client.get("/api/employees", params={"department": ""})
    assert len(everyone.json()) == 3


async def test_list_without_filter_returns_all(client):
    assert (await client.get("/api/employees")).json() == []
    await _create(client)
    res = await client.get("/api/employees")
    assert res.json() == [{"id": 1, **employee_payload()}]


async def test_departments_sorted_distinct_and_current(client):
    await _create(client, email="a@x.com", department="Sales")
    await _create(client, email="b@x.com", department="Eng")
    await _create(client, email="c@x.com", department="Sales")
    res = await client.get("/api/departments")
    assert res.status_code == 200
    assert res.json() == ["Eng", "Sales"]

    await client.delete("/api/employees/2")
    assert (await client.get("/api/departments")).json() == ["Sales"]


async def test_malformed_json_returns_400(client):
    res = await client.post(
        "/api/employees", content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid request data"


async def test_non_string_field_returns_400(client):
    res = await _create(client, name=123)
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid request data"
    assert "name" in res.json()["message"]


async def test_non_integer_id_is_not_found(client):
    for res in (
        await client.get("/api/employees/abc"),
        await client.delete("/api/employees/abc"),
        await client.put("/api/employees/abc", json=employee_payload()),
    ):
        assert res.status_code == 404
        assert res.json() == {"error": "Employee not found"}


async def test_put_with_bad_id_and_bad_body_reports_body_first(client):
    res = await client.put(
        "/api/employees/abc", json=employee_payload(email="nope"),
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid email format"}


@pytest.mark.parametrize("raw_id", ["9223372036854775808", "0", "-1"])
async def test_id_outside_rowid_range_is_not_found(client, raw_id):
    await _create(client)
    path = f"/api/employees/{raw_id}"
    for res in (
        await client.get(path),
        await client.put(path, json=employee_payload(email="b@x.com")),
        await client.delete(path),
    ):
        assert res.status_code == 404
        assert res.json() == {"error": "Employee not found"}
    assert len((await client.get("/api/employees")).json()) == 1
