from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from staffboard.core.config import settings
from staffboard.models.dashboard import DashboardStats
from staffboard.services.dashboard_service import build_dashboard_stats
from staffboard.services.employee_service import employee_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardStats)
async def get_dashboard():
    try:
        snapshot = await employee_service.get_snapshot()
    except Exception as err:
        logger.exception("Failed to load dashboard data")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve dashboard data",
        ) from err

    return build_dashboard_stats(
        snapshot.employees,
        snapshot.departments,
        recent_limit=settings.RECENT_EMPLOYEES_LIMIT,
    )
