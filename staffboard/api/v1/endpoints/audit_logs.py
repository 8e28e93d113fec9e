from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from staffboard.core.dependencies import get_audit_log_filters
from staffboard.models.audit_log import AuditLogFilters, AuditLogPage
from staffboard.services.audit_log_service import audit_log_service, search_audit_logs, to_entry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/audit-logs", tags=["audit-logs"])


@router.get("", response_model=AuditLogPage)
async def list_audit_logs(
    search: str = "",
    filters: AuditLogFilters = Depends(get_audit_log_filters),  # noqa: B008
):
    try:
        logs = await audit_log_service.get_audit_logs(filters)
    except Exception as err:
        logger.exception("Failed to list audit logs")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve audit logs",
        ) from err

    entries = [to_entry(log) for log in search_audit_logs(logs, search)]
    return AuditLogPage(entries=entries, count=len(entries))
