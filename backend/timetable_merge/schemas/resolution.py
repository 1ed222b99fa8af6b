from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from timetable_merge.schemas.conflict import Conflict
from timetable_merge.schemas.timetable import Assignment, TimetableRow

ResolutionEventKind = Literal["dropped", "relocated", "unresolved"]


@dataclass(frozen=True)
class ResolutionEvent:
    kind: ResolutionEventKind
    row: TimetableRow
    original_slot: str = ""
    assigned_slot: str = ""


class ResolutionStats(BaseModel):
    total_rows: int = Field(default=0, ge=0)
    dropped_rows: int = Field(default=0, ge=0)
    relocated_rows: int = Field(default=0, ge=0)
    unresolved_rows: int = Field(default=0, ge=0)

    @property
    def resolved_rows(self) -> int:
        return self.total_rows - self.dropped_rows


class MergeResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    assignments: list[Assignment] = Field(default_factory=list)
    conflicts: list[Conflict] = Field(default_factory=list)
    grouped_by_source: dict[str, list[Assignment]] = Field(default_factory=dict, alias="separatedTimetables")
    stats: ResolutionStats = Field(default_factory=ResolutionStats)
