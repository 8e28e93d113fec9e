from __future__ import annotations

import logging

from fastapi import HTTPException, Query, status

from staffboard.core.config import settings
from staffboard.models.audit_log import AuditLogFilters
from staffboard.models.list_view import ALL, ListViewState, SortField, SortOrder, StatusFilter, ViewMode
from staffboard.services.employee_service import employee_service
from staffboard.services.list_view_engine import default_view_mode

logger = logging.getLogger(__name__)


async def get_list_view_state(
    search: str = "",
    department: str = ALL,
    status_filter: StatusFilter = Query(StatusFilter.ALL, alias="status"),  # noqa: B008
    sort: SortField = SortField.FULL_NAME,
    order: SortOrder = SortOrder.ASC,
    view: ViewMode | None = None,
    viewport_width: int | None = Query(None, ge=0),  # noqa: B008
) -> ListViewState:
    if view is None:
        view = default_view_mode(viewport_width, settings.MOBILE_BREAKPOINT)
    return ListViewState(
        search_query=search,
        department_filter=department or ALL,
        status_filter=status_filter,
        sort_field=sort,
        sort_order=order,
        view_mode=view,
    )


async def get_audit_log_filters(
    action: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
) -> AuditLogFilters:
    return AuditLogFilters(action=action, start_date=start_date, end_date=end_date)


async def require_backend() -> None:
    if not employee_service.initialized:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Employee backend is not configured",
        )
