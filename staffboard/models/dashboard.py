from __future__ import annotations

from pydantic import BaseModel

from staffboard.models.employee import EmploymentStatus


class RecentEmployee(BaseModel):
    id: str
    full_name: str
    role: str
    initials: str
    employment_status: EmploymentStatus


class DepartmentShare(BaseModel):
    name: str
    count: int
    percentage: float


class DashboardStats(BaseModel):
    total_employees: int
    active_employees: int
    active_percentage: int
    department_count: int
    recent_employees: list[RecentEmployee]
    department_distribution: list[DepartmentShare]
