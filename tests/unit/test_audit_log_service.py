from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from staffboard.core.config import Settings
from staffboard.models.audit_log import AuditLog, AuditLogFilters
from staffboard.services.audit_log_service import (
    AuditLogService,
    change_summary,
    employee_info,
    search_audit_logs,
    to_entry,
)
from staffboard.services.employee_service import SupabaseClient


def _log(action: str, old_data=None, new_data=None, log_id: str = "log-1") -> AuditLog:
    return AuditLog(
        id=log_id,
        table_name="employees",
        record_id="uuid-1",
        action=action,
        old_data=old_data,
        new_data=new_data,
        created_at="2024-05-01T12:00:00+00:00",
    )


ANN = {"full_name": "Ann Lee", "employee_id": "E1", "role": "Engineer", "updated_at": "2024-01-01"}


async def _service() -> AuditLogService:
    service = AuditLogService(SupabaseClient())
    await service.initialize(
        Settings(SUPABASE_URL="https://project.supabase.co", SUPABASE_KEY="key", AUDIT_LOG_LIMIT=50)
    )
    return service


def test_change_summary_insert_and_delete():
    assert change_summary(_log("INSERT", new_data=ANN)) == "New employee record created"
    assert change_summary(_log("DELETE", old_data=ANN)) == "Employee record deleted"


def test_change_summary_lists_changed_fields():
    new = {**ANN, "role": "Staff Engineer", "date_of_joining": "2023-01-01", "updated_at": "2024-06-01"}
    old = {**ANN, "date_of_joining": "2022-01-01"}
    assert change_summary(_log("UPDATE", old_data=old, new_data=new)) == "Changed: role, date of joining"


def test_change_summary_ignores_updated_at_only():
    new = {**ANN, "updated_at": "2024-06-01"}
    assert change_summary(_log("UPDATE", old_data=ANN, new_data=new)) == "No visible changes"


def test_change_summary_missing_snapshot():
    assert change_summary(_log("UPDATE", new_data=ANN)) == "Data modified"


def test_employee_info_defaults():
    assert employee_info(_log("DELETE", old_data=ANN)) == ("Ann Lee", "E1")
    assert employee_info(_log("UPDATE")) == ("Unknown", "N/A")
    assert employee_info(_log("UPDATE", new_data={"role": "x"})) == ("Unknown", "N/A")


def test_search_audit_logs():
    logs = [
        _log("INSERT", new_data=ANN, log_id="1"),
        _log("DELETE", old_data={"full_name": "Ben Lee", "employee_id": "E2"}, log_id="2"),
        _log("UPDATE", old_data={}, new_data={}, log_id="3"),
    ]

    assert [log.id for log in search_audit_logs(logs, "")] == ["1", "2", "3"]
    assert [log.id for log in search_audit_logs(logs, "ben")] == ["2"]
    assert [log.id for log in search_audit_logs(logs, "e1")] == ["1"]
    assert [log.id for log in search_audit_logs(logs, "update")] == ["3"]


def test_to_entry():
    entry = to_entry(_log("INSERT", new_data=ANN))
    assert entry.employee_name == "Ann Lee"
    assert entry.employee_code == "E1"
    assert entry.summary == "New employee record created"


@pytest.mark.anyio
async def test_get_audit_logs_builds_filters():
    service = await _service()
    service.client.request = AsyncMock(return_value=[_log("INSERT", new_data=ANN).model_dump()])

    logs = await service.get_audit_logs(
        AuditLogFilters(action="UPDATE", start_date="2024-01-01", end_date="2024-01-31")
    )

    assert len(logs) == 1
    params = service.client.request.call_args.kwargs["params"]
    assert ("table_name", "eq.employees") in params
    assert ("order", "created_at.desc") in params
    assert ("limit", "50") in params
    assert ("action", "eq.UPDATE") in params
    assert ("created_at", "gte.2024-01-01") in params
    assert ("created_at", "lte.2024-01-31T23:59:59") in params


@pytest.mark.anyio
async def test_get_audit_logs_skips_all_action():
    service = await _service()
    service.client.request = AsyncMock(return_value=[])

    await service.get_audit_logs(AuditLogFilters(action="all"))

    params = service.client.request.call_args.kwargs["params"]
    assert not any(key == "action" for key, _ in params)
    assert not any(key == "created_at" for key, _ in params)


@pytest.mark.anyio
async def test_get_audit_logs_not_initialized():
    service = AuditLogService(SupabaseClient())
    assert await service.get_audit_logs() == []
