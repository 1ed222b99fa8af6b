from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

RENDER_COLUMNS = ("Day", "Period", "Assigned Slot", "Subject", "Teacher", "Group", "Room")


class TimetableRow(BaseModel):
    """One normalized record handed over by a document parser."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    day: str = ""
    period: str = ""
    subject: str = ""
    teacher: str = ""
    group: str = ""
    room: str = ""
    source_file: str | None = Field(default=None, alias="sourceFile")

    @field_validator("day", "period", "subject", "teacher", "group", "room", mode="before")
    @classmethod
    def clean_text(cls, value: object) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @field_validator("source_file", mode="before")
    @classmethod
    def clean_source_file(cls, value: object) -> str | None:
        if value is None:
            return None
        cleaned = str(value).strip()
        return cleaned or None

    def has_resource(self) -> bool:
        return bool(self.teacher or self.room or self.group)


class Assignment(TimetableRow):
    assigned_slot: str = Field(alias="assignedSlot")
    original_slot: str = Field(default="", alias="originalSlot")

    @property
    def relocated(self) -> bool:
        return bool(self.original_slot) and self.assigned_slot != self.original_slot

    @classmethod
    def from_row(cls, row: TimetableRow, *, assigned_slot: str, original_slot: str) -> "Assignment":
        return cls(**row.model_dump(), assigned_slot=assigned_slot, original_slot=original_slot)

    def render_cells(self) -> list[str]:
        return [
            self.day,
            self.period,
            self.assigned_slot,
            self.subject,
            self.teacher,
            self.group,
            self.room,
        ]
