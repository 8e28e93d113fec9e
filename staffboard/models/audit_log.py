"""Audit log rows written by the employees table triggers."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class AuditLog(BaseModel):
    id: str
    table_name: str
    record_id: str | None = None
    action: str
    old_data: dict[str, Any] | None = None
    new_data: dict[str, Any] | None = None
    user_id: str | None = None
    ip_address: str | None = None
    created_at: str


class AuditLogFilters(BaseModel):
    action: str | None = None
    start_date: str | None = None
    end_date: str | None = None


class AuditLogEntry(BaseModel):
    log: AuditLog
    employee_name: str
    employee_code: str
    summary: str


class AuditLogPage(BaseModel):
    entries: list[AuditLogEntry]
    count: int
