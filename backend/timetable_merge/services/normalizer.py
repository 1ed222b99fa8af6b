from __future__ import annotations

import re

from timetable_merge.schemas.timetable import TimetableRow
from timetable_merge.services.grid import DAY_NAMES, DEFAULT_GRID, WeeklyGrid, period_label

PERIOD_PREFIX_PATTERN = re.compile(r"^\s*period\s*", re.IGNORECASE)
DIGITS_PATTERN = re.compile(r"(\d+)")


def _day_lookup(grid: WeeklyGrid) -> dict[str, str]:
    lookup: dict[str, str] = {}
    for day in grid.days:
        lookup[day.lower()] = day
        lookup[DAY_NAMES[day].lower()] = day
    return lookup


def normalize_day(raw: str, grid: WeeklyGrid = DEFAULT_GRID) -> str:
    """Map "Monday", "mon", "MON" and friends onto the grid's day names.

    Anything unrecognised comes back unchanged; callers check membership in
    ``grid.days`` to decide whether the value is usable.
    """
    return _day_lookup(grid).get((raw or "").strip().lower(), raw)


def normalize_period(raw: str, grid: WeeklyGrid = DEFAULT_GRID) -> str:
    """Map "Period 3", "P3", "3" and similar onto ``P<n>``.

    Only numbers inside the grid's period range are accepted. Unrecognised
    input is returned unchanged.
    """
    value = PERIOD_PREFIX_PATTERN.sub("P", raw or "").strip()
    match = DIGITS_PATTERN.search(value)
    if match:
        number = int(match.group(1))
        if 1 <= number <= grid.periods_per_day:
            return period_label(number)
    if value in grid.periods:
        return value
    return raw


def slot_from_row(row: TimetableRow, grid: WeeklyGrid = DEFAULT_GRID) -> str:
    """Return the canonical slot key a row describes, or ``""`` when it has none."""
    day = normalize_day(row.day, grid)
    period = normalize_period(row.period, grid)
    if day not in grid.days or period not in grid.periods:
        return ""
    return grid.slot_key(day, period)
