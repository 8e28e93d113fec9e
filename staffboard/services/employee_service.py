"""Supabase employee service: snapshot reads and pass-through mutations."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from staffboard.core.config import Settings
from staffboard.models.employee import (
    Department,
    Employee,
    EmployeeInput,
    EmployeeSnapshot,
)

logger = logging.getLogger(__name__)

EMPLOYEE_SELECT = "*,departments(id,name)"


class EmployeeServiceError(Exception):
    def __init__(self, status: int, detail: str) -> None:
        super().__init__(f"Supabase request failed: {status} - {detail}")
        self.status = status
        self.detail = detail


class SupabaseClient:
    """Thin PostgREST client shared by the employee and audit log services."""

    def __init__(self) -> None:
        self.initialized = False
        self.base_url = ""
        self.api_key = ""
        self.timeout = 30

    def configure(self, settings: Settings) -> bool:
        if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
            return False
        self.base_url = f"{settings.SUPABASE_URL.rstrip('/')}/rest/v1"
        self.api_key = settings.SUPABASE_KEY
        self.timeout = settings.SUPABASE_REQUEST_TIMEOUT
        self.initialized = True
        return True

    def reset(self) -> None:
        self.initialized = False
        self.base_url = ""
        self.api_key = ""

    def _headers(self, *, representation: bool = False) -> dict[str, str]:
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        if representation:
            headers["Prefer"] = "return=representation"
        return headers

    async def request(
        self,
        method: str,
        table: str,
        *,
        params: list[tuple[str, str]] | None = None,
        payload: dict[str, Any] | None = None,
        representation: bool = False,
    ) -> Any:
        url = f"{self.base_url}/{table}"
        headers = self._headers(representation=representation)

        timeout = aiohttp.ClientTimeout(total=self.timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.request(method, url, headers=headers, params=params, json=payload) as response:
                if 200 <= response.status < 300:
                    if response.status == 204:
                        return None
                    return await response.json()

                error_text = await response.text()
                raise EmployeeServiceError(response.status, error_text)


class EmployeeService:
    def __init__(self, client: SupabaseClient | None = None) -> None:
        self.client = client or SupabaseClient()

    @property
    def initialized(self) -> bool:
        return self.client.initialized

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not self.client.configure(settings):
            logger.warning("Supabase credentials missing — EmployeeService not initialized")
            return

        logger.info("EmployeeService initialized (url=%s)", self.client.base_url)

    async def close(self) -> None:
        self.client.reset()

    async def get_employees(self) -> list[Employee]:
        if not self.initialized:
            return []

        rows = await self.client.request(
            "GET",
            "employees",
            params=[("select", EMPLOYEE_SELECT), ("order", "created_at.desc")],
        )
        return [Employee.model_validate(row) for row in rows or []]

    async def get_employee(self, employee_id: str) -> Employee | None:
        if not self.initialized:
            return None

        rows = await self.client.request(
            "GET",
            "employees",
            params=[("select", EMPLOYEE_SELECT), ("id", f"eq.{employee_id}")],
        )
        if not rows:
            return None
        return Employee.model_validate(rows[0])

    async def get_departments(self) -> list[Department]:
        if not self.initialized:
            return []

        rows = await self.client.request(
            "GET",
            "departments",
            params=[("select", "*"), ("order", "name.asc")],
        )
        return [Department.model_validate(row) for row in rows or []]

    async def get_snapshot(self) -> EmployeeSnapshot:
        employees = await self.get_employees()
        departments = await self.get_departments()
        return EmployeeSnapshot(employees=employees, departments=departments)

    async def create_employee(self, data: EmployeeInput) -> Employee:
        if not self.initialized:
            raise RuntimeError("EmployeeService not initialized")

        rows = await self.client.request(
            "POST",
            "employees",
            payload=data.to_row(),
            representation=True,
        )
        logger.info("Created employee %s", data.employee_code)
        return Employee.model_validate(rows[0])

    async def update_employee(self, employee_id: str, data: EmployeeInput) -> Employee | None:
        if not self.initialized:
            raise RuntimeError("EmployeeService not initialized")

        rows = await self.client.request(
            "PATCH",
            "employees",
            params=[("id", f"eq.{employee_id}")],
            payload=data.to_row(),
            representation=True,
        )
        if not rows:
            return None
        logger.info("Updated employee %s", employee_id)
        return Employee.model_validate(rows[0])

    async def delete_employee(self, employee_id: str) -> bool:
        if not self.initialized:
            raise RuntimeError("EmployeeService not initialized")

        rows = await self.client.request(
            "DELETE",
            "employees",
            params=[("id", f"eq.{employee_id}")],
            representation=True,
        )
        deleted = bool(rows)
        logger.info("Deleted employee %s (found=%s)", employee_id, deleted)
        return deleted

    async def check_connection(self) -> bool:
        if not self.initialized:
            return False
        try:
            await self.client.request("GET", "departments", params=[("select", "id"), ("limit", "1")])
            return True
        except Exception:
            logger.exception("Supabase connection check failed")
            return False


supabase_client = SupabaseClient()
employee_service = EmployeeService(supabase_client)
