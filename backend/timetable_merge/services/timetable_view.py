from __future__ import annotations

from collections.abc import Iterable

from timetable_merge.schemas.timetable import RENDER_COLUMNS, Assignment
from timetable_merge.services.grid import DEFAULT_GRID, SLOT_SEPARATOR, WeeklyGrid

CELL_WIDTH = 15
DAY_COLUMN_WIDTH = 10
RULE_WIDTH = 80


def build_timetable_view(assignments: Iterable[Assignment]) -> dict[str, dict[str, list[Assignment]]]:
    view: dict[str, dict[str, list[Assignment]]] = {}
    for assignment in assignments:
        if not assignment.assigned_slot:
            continue
        day, _, period = assignment.assigned_slot.partition(SLOT_SEPARATOR)
        view.setdefault(day, {}).setdefault(period, []).append(assignment)
    return view


def _cell(entries: list[Assignment]) -> str:
    if not entries:
        return "-"
    if len(entries) == 1:
        return entries[0].subject or "N/A"
    return f"[{len(entries)} items]"


def display_timetable(assignments: Iterable[Assignment], grid: WeeklyGrid = DEFAULT_GRID) -> str:
    view = build_timetable_view(assignments)
    lines = ["TIMETABLE VIEW:", "=" * RULE_WIDTH, ""]
    lines.append("Day".ljust(DAY_COLUMN_WIDTH) + "".join(period.ljust(CELL_WIDTH) for period in grid.periods))
    lines.append("-" * RULE_WIDTH)
    for day in grid.days:
        by_period = view.get(day, {})
        cells = [_cell(by_period.get(period, []))[: CELL_WIDTH - 1].ljust(CELL_WIDTH) for period in grid.periods]
        lines.append(day.ljust(DAY_COLUMN_WIDTH) + "".join(cells))
    return "\n".join(lines) + "\n"


def render_rows(assignments: Iterable[Assignment]) -> list[list[str]]:
    """Header plus one row per assignment, in the column order document renderers expect."""
    rows = [list(RENDER_COLUMNS)]
    rows.extend(assignment.render_cells() for assignment in assignments)
    return rows
