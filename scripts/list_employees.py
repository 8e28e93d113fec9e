#!/usr/bin/env python3
"""Print the employee list from the terminal.

Run from the repository root:

    python3 scripts/list_employees.py [--search TEXT] [--department ID] [--status active|inactive]
                                      [--sort FIELD] [--desc] [--view table|cards]
                                      [--delete ID [--yes]] [--verbose]

Fetches a snapshot from Supabase, applies the same filters and sorting as the
dashboard and renders the result as a table or as cards.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from staffboard.core.config import Settings  # noqa: E402
from staffboard.models.list_view import (  # noqa: E402
    ALL,
    EmployeeRow,
    ListView,
    ListViewState,
    SortField,
    SortOrder,
    StatusFilter,
    ViewMode,
)
from staffboard.services.employee_service import EmployeeService  # noqa: E402
from staffboard.services.list_view_engine import ListViewEngine  # noqa: E402

logger = logging.getLogger(__name__)

TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Employee", 24),
    ("ID", 10),
    ("Email", 28),
    ("Department", 16),
    ("Role", 20),
    ("Joined", 13),
    ("Status", 8),
]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="List employees from the dashboard backend")
    parser.add_argument("--search", default="", help="Case-insensitive text to look for")
    parser.add_argument("--department", default=ALL, help="Department id (default: all)")
    parser.add_argument(
        "--status",
        default=StatusFilter.ALL.value,
        choices=[s.value for s in StatusFilter],
    )
    parser.add_argument(
        "--sort",
        default=SortField.FULL_NAME.value,
        choices=[f.value for f in SortField],
    )
    parser.add_argument("--desc", action="store_true", help="Sort descending")
    parser.add_argument("--view", default=ViewMode.TABLE.value, choices=[v.value for v in ViewMode])
    parser.add_argument("--delete", metavar="ID", help="Delete an employee before listing")
    parser.add_argument("--yes", action="store_true", help="Skip the delete confirmation")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser.parse_args(argv)


def build_state(args: argparse.Namespace) -> ListViewState:
    return ListViewState(
        search_query=args.search,
        department_filter=args.department,
        status_filter=StatusFilter(args.status),
        sort_field=SortField(args.sort),
        sort_order=SortOrder.DESC if args.desc else SortOrder.ASC,
        view_mode=ViewMode(args.view),
    )


def _cell(value: str | None, width: int) -> str:
    text = value or ""
    if len(text) > width:
        text = text[: width - 1] + "…"
    return text.ljust(width)


def _row_cells(row: EmployeeRow) -> list[str | None]:
    e = row.employee
    return [
        f"{row.initials}  {e.full_name}",
        e.employee_code,
        e.email,
        row.department_label,
        e.role,
        row.joined,
        e.employment_status.value,
    ]


def render_table(view: ListView) -> str:
    lines = [" ".join(_cell(name, width) for name, width in TABLE_COLUMNS)]
    lines.append(" ".join("-" * width for _, width in TABLE_COLUMNS))
    for row in view.rows:
        cells = _row_cells(row)
        lines.append(" ".join(_cell(value, width) for value, (_, width) in zip(cells, TABLE_COLUMNS)))
    return "\n".join(lines)


def render_cards(view: ListView) -> str:
    cards: list[str] = []
    for row in view.rows:
        e = row.employee
        lines = [
            f"[{row.initials}] {e.full_name} ({e.employment_status.value})",
            f"    {e.role}",
            f"    {e.employee_code} • {row.department_label}",
            f"    {e.email or ''}",
        ]
        if e.phone_number:
            lines.append(f"    {e.phone_number}")
        lines.append(f"    Joined {row.joined}")
        cards.append("\n".join(lines))
    return "\n\n".join(cards)


def render(view: ListView) -> str:
    if not view.rows:
        body = view.empty_message or ""
    elif view.state.view_mode == ViewMode.CARDS:
        body = render_cards(view)
    else:
        body = render_table(view)
    return f"{body}\n\nShowing {view.visible_count} of {view.total_count} employees"


def _confirm(employee_id: str) -> bool:
    answer = input(f"Delete employee {employee_id}? This action cannot be undone. [y/N] ")
    return answer.strip().lower() in ("y", "yes")


async def run(args: argparse.Namespace) -> int:
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    settings = Settings()
    service = EmployeeService()
    await service.initialize(settings)
    if not service.initialized:
        logger.error("SUPABASE_URL and SUPABASE_KEY must be set")
        return 1

    try:
        snapshot = await service.get_snapshot()
        engine = ListViewEngine(snapshot.employees, snapshot.departments, build_state(args))

        if args.delete:
            engine.request_delete(args.delete)
            if args.yes or _confirm(args.delete):
                deleted = await engine.confirm_delete(service.delete_employee)
                if deleted:
                    logger.info("Employee %s deleted", args.delete)
                    snapshot = await service.get_snapshot()
                    engine.replace_snapshot(snapshot.employees, snapshot.departments)
                else:
                    logger.warning("Employee %s not found", args.delete)
            else:
                engine.cancel_delete()

        print(render(engine.render()))
    except Exception:
        logger.exception("Failed to list employees")
        return 1
    finally:
        await service.close()
    return 0


def main() -> None:
    args = parse_args()
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
