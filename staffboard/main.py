from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from staffboard.api.v1.router import api_router
from staffboard.core.config import settings
from staffboard.services.audit_log_service import audit_log_service
from staffboard.services.employee_service import employee_service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    try:
        await employee_service.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize EmployeeService — continuing without backend")
    try:
        await audit_log_service.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize AuditLogService — continuing without audit logs")
    yield
    await employee_service.close()
    await audit_log_service.close()


app = FastAPI(
    title="Staffboard API",
    description="Employee management dashboard",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Staffboard API"}
