from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, List

from timetable_merge.schemas.timetable import Assignment

ResourceKind = Literal["teacher", "room", "group"]

class Conflict(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ResourceKind
    slot: str
    resource: str  # teacher, room or group name
    conflicting_entries: List[Assignment] = Field(min_length=2)
