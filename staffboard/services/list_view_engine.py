"""In-memory list view over an employee snapshot: search, filter, sort and render."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable
from datetime import datetime, timezone
from functools import cmp_to_key, lru_cache
from typing import TypeVar

from pyuca import Collator

from staffboard.models.employee import Department, Employee, EmploymentStatus
from staffboard.models.list_view import (
    ALL,
    EmployeeRow,
    ListView,
    ListViewState,
    SortField,
    SortOrder,
    SortToggle,
    StatusFilter,
    ViewMode,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MOBILE_BREAKPOINT = 768
NO_DEPARTMENT_LABEL = "-"
EMPTY_FILTERED_MESSAGE = "No employees match your filters."
EMPTY_MESSAGE = "No employees added yet."

_DATE_FORMATS = ("%d.%m.%Y", "%Y/%m/%d")


@lru_cache(maxsize=1)
def _collator() -> Collator:
    return Collator()


def _compare_text(a: str, b: str) -> int:
    key_a = _collator().sort_key(a)
    key_b = _collator().sort_key(b)
    return (key_a > key_b) - (key_a < key_b)


def parse_joining_date(value: str | None) -> datetime | None:
    """Parse a joining date; ``None`` when the value is not a recognizable date."""
    if not value:
        return None
    text = value.strip()
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        parsed = None
        for fmt in _DATE_FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)  # noqa: DTZ007
                break
            except ValueError:
                continue
    if parsed is None:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def format_joining_date(value: str | None) -> str:
    parsed = parse_joining_date(value)
    if parsed is None:
        return value or ""
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def initials(full_name: str | None) -> str:
    if not full_name:
        return ""
    return "".join(part[0] for part in full_name.split()).upper()


def department_label(employee: Employee, departments: Iterable[Department] = ()) -> str:
    if employee.department is not None and employee.department.name:
        return employee.department.name
    if employee.department_id:
        for department in departments:
            if department.id == employee.department_id:
                return department.name
    return NO_DEPARTMENT_LABEL


def department_options(departments: Iterable[Department]) -> list[Department]:
    return sorted(departments, key=lambda d: _collator().sort_key(d.name))


def available_statuses() -> list[EmploymentStatus]:
    return list(EmploymentStatus)


def default_view_mode(viewport_width: int | None, breakpoint: int = DEFAULT_MOBILE_BREAKPOINT) -> ViewMode:
    if viewport_width is not None and viewport_width < breakpoint:
        return ViewMode.CARDS
    return ViewMode.TABLE


def _matches_search(employee: Employee, query: str) -> bool:
    fields = (employee.full_name, employee.email, employee.employee_code, employee.role)
    return any(query in (value or "").lower() for value in fields)


def _text_value(employee: Employee, field: SortField) -> str:
    if field == SortField.FULL_NAME:
        return employee.full_name or ""
    if field == SortField.EMPLOYEE_CODE:
        return employee.employee_code or ""
    return employee.role or ""


def _comparator(field: SortField, order: SortOrder) -> Callable[[Employee, Employee], int]:
    sign = -1 if order == SortOrder.DESC else 1

    if field == SortField.DATE_OF_JOINING:

        def compare_dates(a: Employee, b: Employee) -> int:
            date_a = parse_joining_date(a.date_of_joining)
            date_b = parse_joining_date(b.date_of_joining)
            # Unparsable dates trail in both directions.
            if date_a is None or date_b is None:
                return (date_a is None) - (date_b is None)
            return sign * ((date_a > date_b) - (date_a < date_b))

        return compare_dates

    def compare_text(a: Employee, b: Employee) -> int:
        return sign * _compare_text(_text_value(a, field), _text_value(b, field))

    return compare_text


def derive_visible(employees: Iterable[Employee], state: ListViewState) -> list[Employee]:
    """Return the employees matching every active filter, in the requested order.

    Never mutates ``employees``. The sort is stable, so ties keep snapshot order
    regardless of ``sort_order``.
    """
    result = list(employees)

    if state.search_query:
        query = state.search_query.lower()
        result = [e for e in result if _matches_search(e, query)]

    if state.department_filter != ALL:
        result = [e for e in result if e.department_id == state.department_filter]

    if state.status_filter != StatusFilter.ALL:
        result = [e for e in result if e.employment_status.value == state.status_filter.value]

    result.sort(key=cmp_to_key(_comparator(state.sort_field, state.sort_order)))
    return result


def toggle_sort(state: ListViewState, field: SortField) -> ListViewState:
    if state.sort_field == field:
        flipped = SortOrder.DESC if state.sort_order == SortOrder.ASC else SortOrder.ASC
        return state.model_copy(update={"sort_order": flipped})
    return state.model_copy(update={"sort_field": field, "sort_order": SortOrder.ASC})


def set_view_mode(state: ListViewState, mode: ViewMode) -> ListViewState:
    return state.model_copy(update={"view_mode": mode})


class ListViewEngine:
    """Holds one view's state and snapshot and derives what it shows.

    The snapshot is copied on every replacement so a derivation never observes
    a collection that is being changed by the data source.
    """

    def __init__(
        self,
        employees: Iterable[Employee] = (),
        departments: Iterable[Department] = (),
        state: ListViewState | None = None,
        *,
        viewport_width: int | None = None,
        mobile_breakpoint: int = DEFAULT_MOBILE_BREAKPOINT,
        on_edit: Callable[[str], None] | None = None,
        on_delete: Callable[[str], None] | None = None,
    ) -> None:
        if state is None:
            state = ListViewState(view_mode=default_view_mode(viewport_width, mobile_breakpoint))
        self._state = state
        self._employees: tuple[Employee, ...] = tuple(employees)
        self._departments: tuple[Department, ...] = tuple(departments)
        self._visible: list[Employee] | None = None
        self.on_edit = on_edit
        self.on_delete = on_delete
        self.pending_delete_id: str | None = None

    @property
    def state(self) -> ListViewState:
        return self._state

    @property
    def employees(self) -> tuple[Employee, ...]:
        return self._employees

    @property
    def departments(self) -> tuple[Department, ...]:
        return self._departments

    @property
    def visible(self) -> list[Employee]:
        if self._visible is None:
            self._visible = derive_visible(self._employees, self._state)
        return list(self._visible)

    def replace_snapshot(
        self,
        employees: Iterable[Employee],
        departments: Iterable[Department] | None = None,
    ) -> None:
        self._employees = tuple(employees)
        if departments is not None:
            self._departments = tuple(departments)
        self._visible = None

    def _update(self, state: ListViewState) -> ListViewState:
        if state != self._state:
            self._state = state
            self._visible = None
        return state

    def set_search(self, query: str) -> ListViewState:
        return self._update(self._state.model_copy(update={"search_query": query}))

    def set_department_filter(self, department_id: str) -> ListViewState:
        return self._update(self._state.model_copy(update={"department_filter": department_id}))

    def set_status_filter(self, status: StatusFilter) -> ListViewState:
        return self._update(self._state.model_copy(update={"status_filter": StatusFilter(status)}))

    def toggle_sort(self, field: SortField) -> ListViewState:
        return self._update(toggle_sort(self._state, field))

    def set_view_mode(self, mode: ViewMode) -> ListViewState:
        # Layout only; the derived sequence stays valid.
        self._state = set_view_mode(self._state, mode)
        return self._state

    def request_edit(self, employee_id: str) -> None:
        if self.on_edit is not None:
            self.on_edit(employee_id)

    def request_delete(self, employee_id: str) -> None:
        self.pending_delete_id = employee_id
        if self.on_delete is not None:
            self.on_delete(employee_id)

    def cancel_delete(self) -> None:
        self.pending_delete_id = None

    async def confirm_delete(self, mutation: Callable[[str], Awaitable[T]]) -> T | None:
        """Run the delete mutation for the pending employee.

        The row stays in the snapshot until the data source delivers a new one.
        """
        employee_id = self.pending_delete_id
        if employee_id is None:
            return None
        try:
            return await mutation(employee_id)
        finally:
            self.pending_delete_id = None

    def render(self) -> ListView:
        visible = self.visible
        rows = [
            EmployeeRow(
                employee=employee,
                initials=initials(employee.full_name),
                department_label=department_label(employee, self._departments),
                joined=format_joining_date(employee.date_of_joining),
            )
            for employee in visible
        ]
        empty_message = None
        if not rows:
            empty_message = EMPTY_FILTERED_MESSAGE if self._state.has_filters else EMPTY_MESSAGE

        toggles = {}
        for field in SortField:
            toggled = toggle_sort(self._state, field)
            toggles[field] = SortToggle(sort_field=toggled.sort_field, sort_order=toggled.sort_order)

        logger.debug("Rendered %d of %d employees", len(rows), len(self._employees))
        return ListView(
            state=self._state,
            rows=rows,
            total_count=len(self._employees),
            visible_count=len(rows),
            empty_message=empty_message,
            sort_toggles=toggles,
        )

