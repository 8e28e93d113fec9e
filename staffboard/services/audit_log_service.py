"""Read-only access to employee audit logs plus the summaries shown next to them."""

from __future__ import annotations

import logging

from staffboard.core.config import Settings
from staffboard.models.audit_log import AuditLog, AuditLogEntry, AuditLogFilters
from staffboard.services.employee_service import SupabaseClient, supabase_client

logger = logging.getLogger(__name__)

AUDITED_TABLE = "employees"
END_OF_DAY = "T23:59:59"
IGNORED_CHANGE_KEYS = frozenset({"updated_at"})


def employee_info(log: AuditLog) -> tuple[str, str]:
    data = log.new_data or log.old_data
    if not data:
        return "Unknown", "N/A"
    return str(data.get("full_name") or "Unknown"), str(data.get("employee_id") or "N/A")


def change_summary(log: AuditLog) -> str:
    if log.action == "INSERT":
        return "New employee record created"
    if log.action == "DELETE":
        return "Employee record deleted"
    if not log.old_data or not log.new_data:
        return "Data modified"

    changes = [
        key.replace("_", " ")
        for key, value in log.new_data.items()
        if key not in IGNORED_CHANGE_KEYS and log.old_data.get(key) != value
    ]
    if not changes:
        return "No visible changes"
    return f"Changed: {', '.join(changes)}"


def search_audit_logs(logs: list[AuditLog], query: str) -> list[AuditLog]:
    if not query:
        return list(logs)
    needle = query.lower()
    matched: list[AuditLog] = []
    for log in logs:
        data = log.new_data or {}
        fallback = log.old_data or {}
        name = str(data.get("full_name") or fallback.get("full_name") or "")
        code = str(data.get("employee_id") or fallback.get("employee_id") or "")
        if needle in name.lower() or needle in code.lower() or needle in log.action.lower():
            matched.append(log)
    return matched


def to_entry(log: AuditLog) -> AuditLogEntry:
    name, code = employee_info(log)
    return AuditLogEntry(log=log, employee_name=name, employee_code=code, summary=change_summary(log))


class AuditLogService:
    def __init__(self, client: SupabaseClient | None = None) -> None:
        self.client = client or SupabaseClient()
        self.limit = 100

    @property
    def initialized(self) -> bool:
        return self.client.initialized

    async def initialize(self, settings: Settings) -> None:
        self.limit = settings.AUDIT_LOG_LIMIT
        if self.initialized:
            return
        if not self.client.configure(settings):
            logger.warning("Supabase credentials missing — AuditLogService not initialized")

    async def close(self) -> None:
        self.client.reset()

    def _params(self, filters: AuditLogFilters) -> list[tuple[str, str]]:
        params = [
            ("select", "*"),
            ("table_name", f"eq.{AUDITED_TABLE}"),
            ("order", "created_at.desc"),
            ("limit", str(self.limit)),
        ]
        if filters.action and filters.action != "all":
            params.append(("action", f"eq.{filters.action}"))
        if filters.start_date:
            params.append(("created_at", f"gte.{filters.start_date}"))
        if filters.end_date:
            params.append(("created_at", f"lte.{filters.end_date}{END_OF_DAY}"))
        return params

    async def get_audit_logs(self, filters: AuditLogFilters | None = None) -> list[AuditLog]:
        if not self.initialized:
            return []

        rows = await self.client.request("GET", "audit_logs", params=self._params(filters or AuditLogFilters()))
        return [AuditLog.model_validate(row) for row in rows or []]


audit_log_service = AuditLogService(supabase_client)
