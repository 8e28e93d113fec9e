from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from staffboard.models.employee import Department
from staffboard.services.employee_service import employee_service
from staffboard.services.list_view_engine import department_options

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/departments", tags=["departments"])


@router.get("", response_model=list[Department])
async def list_departments():
    try:
        departments = await employee_service.get_departments()
    except Exception as err:
        logger.exception("Failed to list departments")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve departments",
        ) from err

    return department_options(departments)
