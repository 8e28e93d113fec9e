"""Filter, sort and view-mode state for the employee list view."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from staffboard.models.employee import Employee

ALL = "all"


class SortField(str, Enum):
    FULL_NAME = "full_name"
    EMPLOYEE_CODE = "employee_code"
    DATE_OF_JOINING = "date_of_joining"
    ROLE = "role"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class StatusFilter(str, Enum):
    ALL = "all"
    ACTIVE = "active"
    INACTIVE = "inactive"


class ViewMode(str, Enum):
    TABLE = "table"
    CARDS = "cards"


class ListViewState(BaseModel):
    """Current selection of the employee list. Immutable; mutators return a copy."""

    model_config = ConfigDict(frozen=True)

    search_query: str = ""
    department_filter: str = ALL
    status_filter: StatusFilter = StatusFilter.ALL
    sort_field: SortField = SortField.FULL_NAME
    sort_order: SortOrder = SortOrder.ASC
    view_mode: ViewMode = ViewMode.TABLE

    @property
    def has_filters(self) -> bool:
        return bool(self.search_query) or self.department_filter != ALL or self.status_filter != StatusFilter.ALL


class SortToggle(BaseModel):
    sort_field: SortField
    sort_order: SortOrder


class EmployeeRow(BaseModel):
    """One rendered employee, shared by the table and card layouts."""

    employee: Employee
    initials: str
    department_label: str
    joined: str


class ListView(BaseModel):
    state: ListViewState
    rows: list[EmployeeRow]
    total_count: int
    visible_count: int
    empty_message: str | None = None
    sort_toggles: dict[SortField, SortToggle] = {}
