from __future__ import annotations

from collections.abc import Callable, Iterable
import logging

from timetable_merge.core.config import Settings, get_settings
from timetable_merge.schemas.resolution import MergeResult, ResolutionEvent, ResolutionStats
from timetable_merge.schemas.timetable import Assignment, TimetableRow
from timetable_merge.services.conflict_service import detect_conflicts
from timetable_merge.services.grid import WeeklyGrid
from timetable_merge.services.normalizer import slot_from_row
from timetable_merge.services.occupancy import OccupancyIndex
from timetable_merge.services.relocation import find_next_available_slot

EventCallback = Callable[[ResolutionEvent], None]

logger = logging.getLogger(__name__)


class ResolutionPass:
    """Single forward pass that places every usable row on the weekly grid.

    Rows are handled strictly in input order. A row whose slot is already
    holding one of its resources is moved to the next free slot; if none is
    left it keeps its own slot and the clash surfaces as a conflict. Nothing
    placed earlier is ever revisited.
    """

    def __init__(
        self,
        *,
        grid: WeeklyGrid | None = None,
        settings: Settings | None = None,
        on_event: EventCallback | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.grid = grid or WeeklyGrid.from_settings(self.settings)
        self.on_event = on_event
        self.index = OccupancyIndex()

    def _emit(self, event: ResolutionEvent) -> None:
        if self.on_event is not None:
            self.on_event(event)

    def _place(self, row: TimetableRow, original_slot: str) -> tuple[str, bool]:
        """Return the slot to commit and whether relocation ran out of candidates."""
        if self.index.is_available(original_slot, row.teacher, row.room, row.group):
            return original_slot, False

        alternative = find_next_available_slot(
            self.index,
            original_slot,
            row.teacher,
            row.room,
            row.group,
            self.grid,
        )
        if alternative is not None:
            logger.info(
                "Relocated row | subject=%s source=%s from=%s to=%s",
                row.subject,
                row.source_file,
                original_slot,
                alternative,
            )
            self._emit(ResolutionEvent("relocated", row, original_slot, alternative))
            return alternative, False

        logger.warning(
            "No alternative slot found | subject=%s source=%s slot=%s",
            row.subject,
            row.source_file,
            original_slot,
        )
        self._emit(ResolutionEvent("unresolved", row, original_slot, original_slot))
        return original_slot, True

    def run(self, rows: Iterable[TimetableRow]) -> MergeResult:
        assignments: list[Assignment] = []
        grouped_by_source: dict[str, list[Assignment]] = {}
        total = dropped = relocated = unresolved = 0
        self.index = OccupancyIndex()

        for row in rows:
            total += 1
            original_slot = slot_from_row(row, self.grid)
            if not original_slot or not row.has_resource():
                dropped += 1
                logger.debug(
                    "Dropped row | day=%r period=%r source=%s",
                    row.day,
                    row.period,
                    row.source_file,
                )
                self._emit(ResolutionEvent("dropped", row))
                continue

            assigned_slot, exhausted = self._place(row, original_slot)
            if exhausted:
                unresolved += 1
            elif assigned_slot != original_slot:
                relocated += 1

            self.index.commit(assigned_slot, row.teacher, row.room, row.group)

            assignment = Assignment.from_row(row, assigned_slot=assigned_slot, original_slot=original_slot)
            assignments.append(assignment)
            source = row.source_file or self.settings.unknown_source_label
            grouped_by_source.setdefault(source, []).append(assignment)

        conflicts = detect_conflicts(assignments)
        stats = ResolutionStats(
            total_rows=total,
            dropped_rows=dropped,
            relocated_rows=relocated,
            unresolved_rows=unresolved,
        )
        logger.info(
            "Resolution finished | rows=%s dropped=%s relocated=%s unresolved=%s conflicts=%s sources=%s",
            stats.total_rows,
            stats.dropped_rows,
            stats.relocated_rows,
            stats.unresolved_rows,
            len(conflicts),
            len(grouped_by_source),
        )
        return MergeResult(
            assignments=assignments,
            conflicts=conflicts,
            grouped_by_source=grouped_by_source,
            stats=stats,
        )


def merge_and_resolve(
    rows: Iterable[TimetableRow],
    *,
    grid: WeeklyGrid | None = None,
    settings: Settings | None = None,
    on_event: EventCallback | None = None,
) -> MergeResult:
    return ResolutionPass(grid=grid, settings=settings, on_event=on_event).run(rows)
