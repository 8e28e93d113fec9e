from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from staffboard.core.dependencies import require_backend
from staffboard.main import app
from staffboard.models.employee import Department, Employee

SAMPLE_DEPARTMENTS: list[dict] = [
    {"id": "D1", "name": "Engineering"},
    {"id": "D2", "name": "Sales"},
]

SAMPLE_EMPLOYEE_ROWS: list[dict] = [
    {
        "id": "uuid-3",
        "employee_id": "E3",
        "full_name": "Émile Zola",
        "email": "emile@example.com",
        "phone_number": None,
        "department_id": "D2",
        "departments": {"id": "D2", "name": "Sales"},
        "role": "Account Manager",
        "date_of_joining": "2024-03-01",
        "employment_status": "active",
        "created_at": "2024-03-01T09:00:00+00:00",
        "updated_at": "2024-03-01T09:00:00+00:00",
    },
    {
        "id": "uuid-2",
        "employee_id": "E2",
        "full_name": "Ben Lee",
        "email": "ben.lee@example.com",
        "phone_number": "+1 555 0102",
        "department_id": "D2",
        "departments": {"id": "D2", "name": "Sales"},
        "role": "Manager",
        "date_of_joining": "2022-06-15",
        "employment_status": "inactive",
        "created_at": "2023-02-01T09:00:00+00:00",
        "updated_at": "2023-02-01T09:00:00+00:00",
    },
    {
        "id": "uuid-1",
        "employee_id": "E1",
        "full_name": "Ann Lee",
        "email": "ann.lee@example.com",
        "phone_number": None,
        "department_id": "D1",
        "departments": {"id": "D1", "name": "Engineering"},
        "role": "Engineer",
        "date_of_joining": "2023-01-01",
        "employment_status": "active",
        "created_at": "2023-01-01T09:00:00+00:00",
        "updated_at": "2023-01-01T09:00:00+00:00",
    },
]


def make_employee(**overrides) -> Employee:
    data = {
        "id": overrides.get("employee_code", "E0").lower(),
        "employee_code": "E0",
        "full_name": "Test Person",
        "email": "test@example.com",
        "role": "Engineer",
        "date_of_joining": "2023-01-01",
        "employment_status": "active",
    }
    data.update(overrides)
    return Employee.model_validate(data)


@pytest.fixture
def sample_employees() -> list[Employee]:
    return [Employee.model_validate(row) for row in SAMPLE_EMPLOYEE_ROWS]


@pytest.fixture
def sample_departments() -> list[Department]:
    return [Department.model_validate(row) for row in SAMPLE_DEPARTMENTS]


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def backend_client():
    app.dependency_overrides[require_backend] = lambda: None
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
