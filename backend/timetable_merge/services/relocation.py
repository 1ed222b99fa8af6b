from __future__ import annotations

from collections.abc import Iterator

from timetable_merge.services.grid import DEFAULT_GRID, WeeklyGrid
from timetable_merge.services.occupancy import OccupancyIndex


def relocation_candidates(grid: WeeklyGrid, slot: str) -> Iterator[str]:
    """Yield every other slot of the grid in relocation order.

    1. later periods of the same day
    2. every period of each later day
    3. earlier periods of the same day, nearest first
    4. every period of each earlier day, nearest day first
    """
    day, period = grid.parse_slot_key(slot)
    day_index = grid.day_index(day)
    period_index = grid.period_index(period)

    for p in range(period_index + 1, len(grid.periods)):
        yield grid.slot_key(day, grid.periods[p])

    for d in range(day_index + 1, len(grid.days)):
        for candidate_period in grid.periods:
            yield grid.slot_key(grid.days[d], candidate_period)

    for p in range(period_index - 1, -1, -1):
        yield grid.slot_key(day, grid.periods[p])

    for d in range(day_index - 1, -1, -1):
        for candidate_period in grid.periods:
            yield grid.slot_key(grid.days[d], candidate_period)


def find_next_available_slot(
    index: OccupancyIndex,
    slot: str,
    teacher: str | None,
    room: str | None,
    group: str | None,
    grid: WeeklyGrid = DEFAULT_GRID,
) -> str | None:
    if not grid.contains(slot):
        return None
    for candidate in relocation_candidates(grid, slot):
        if index.is_available(candidate, teacher, room, group):
            return candidate
    return None
