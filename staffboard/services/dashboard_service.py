"""Summary figures for the dashboard landing page."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from staffboard.models.dashboard import DashboardStats, DepartmentShare, RecentEmployee
from staffboard.models.employee import Department, Employee, EmploymentStatus
from staffboard.services.list_view_engine import NO_DEPARTMENT_LABEL, department_label, initials

UNASSIGNED = "Unassigned"


def department_distribution(
    employees: Sequence[Employee],
    departments: Sequence[Department] = (),
) -> list[DepartmentShare]:
    counts: Counter[str] = Counter()
    for employee in employees:
        label = department_label(employee, departments)
        counts[UNASSIGNED if label == NO_DEPARTMENT_LABEL else label] += 1

    total = len(employees)
    return [
        DepartmentShare(name=name, count=count, percentage=round(count / total * 100, 1))
        for name, count in counts.most_common()
    ]


def build_dashboard_stats(
    employees: Sequence[Employee],
    departments: Sequence[Department],
    recent_limit: int = 5,
) -> DashboardStats:
    """Compute dashboard figures from a snapshot ordered newest first."""
    total = len(employees)
    active = sum(1 for e in employees if e.employment_status == EmploymentStatus.ACTIVE)

    recent = [
        RecentEmployee(
            id=e.id,
            full_name=e.full_name,
            role=e.role,
            initials=initials(e.full_name),
            employment_status=e.employment_status,
        )
        for e in employees[:recent_limit]
    ]

    return DashboardStats(
        total_employees=total,
        active_employees=active,
        active_percentage=round(active / max(total, 1) * 100),
        department_count=len(departments),
        recent_employees=recent,
        department_distribution=department_distribution(employees, departments),
    )
