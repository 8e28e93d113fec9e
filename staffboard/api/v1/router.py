from fastapi import APIRouter

from staffboard.api.v1.endpoints import audit_logs, dashboard, departments, employees, health

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router)
api_router.include_router(employees.router)
api_router.include_router(departments.router)
api_router.include_router(dashboard.router)
api_router.include_router(audit_logs.router)
