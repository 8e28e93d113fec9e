from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from staffboard.core.dependencies import get_list_view_state, require_backend
from staffboard.models.employee import Employee, EmployeeInput, MutationResult
from staffboard.models.list_view import ListView, ListViewState
from staffboard.services.employee_service import employee_service
from staffboard.services.list_view_engine import ListViewEngine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=ListView)
async def list_employees(state: ListViewState = Depends(get_list_view_state)):  # noqa: B008
    try:
        snapshot = await employee_service.get_snapshot()
    except Exception as err:
        logger.exception("Failed to list employees")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employees",
        ) from err

    engine = ListViewEngine(snapshot.employees, snapshot.departments, state)
    return engine.render()


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(employee_id: str):
    try:
        employee = await employee_service.get_employee(employee_id)
    except Exception as err:
        logger.exception("Failed to get employee %s", employee_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employee",
        ) from err

    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with id '{employee_id}' not found",
        )

    return employee


@router.post(
    "",
    response_model=MutationResult,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_backend)],
)
async def create_employee(data: EmployeeInput):
    try:
        employee = await employee_service.create_employee(data)
    except Exception as err:
        logger.exception("Failed to create employee %s", data.employee_code)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(err),
        ) from err

    return MutationResult(
        title="Employee Added",
        description="The employee has been successfully added.",
        employee=employee,
    )


@router.put("/{employee_id}", response_model=MutationResult, dependencies=[Depends(require_backend)])
async def update_employee(employee_id: str, data: EmployeeInput):
    try:
        employee = await employee_service.update_employee(employee_id, data)
    except Exception as err:
        logger.exception("Failed to update employee %s", employee_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(err),
        ) from err

    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with id '{employee_id}' not found",
        )

    return MutationResult(
        title="Employee Updated",
        description="The employee has been successfully updated.",
        employee=employee,
    )


@router.delete("/{employee_id}", response_model=MutationResult, dependencies=[Depends(require_backend)])
async def delete_employee(employee_id: str):
    try:
        deleted = await employee_service.delete_employee(employee_id)
    except Exception as err:
        logger.exception("Failed to delete employee %s", employee_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(err),
        ) from err

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with id '{employee_id}' not found",
        )

    return MutationResult(
        title="Employee Deleted",
        description="The employee has been successfully removed.",
    )
