from __future__ import annotations

from dataclasses import dataclass, field


def clean_resource(value: str | None) -> str:
    return (value or "").strip()


@dataclass(frozen=True)
class SlotOccupancy:
    teachers: frozenset[str] = frozenset()
    rooms: frozenset[str] = frozenset()
    groups: frozenset[str] = frozenset()


@dataclass
class _SlotEntry:
    teachers: set[str] = field(default_factory=set)
    rooms: set[str] = field(default_factory=set)
    groups: set[str] = field(default_factory=set)


class OccupancyIndex:
    """Teachers, rooms and groups committed to each slot during one resolution run.

    Append-only: there is no way to release a commitment. Empty identities
    (after trimming) never take part in checks or commits.
    """

    def __init__(self) -> None:
        self._slots: dict[str, _SlotEntry] = {}

    def __contains__(self, slot: object) -> bool:
        return slot in self._slots

    def __len__(self) -> int:
        return len(self._slots)

    def is_available(self, slot: str, teacher: str | None, room: str | None, group: str | None) -> bool:
        entry = self._slots.get(slot)
        if entry is None:
            return True

        teacher = clean_resource(teacher)
        room = clean_resource(room)
        group = clean_resource(group)

        teacher_conflict = bool(teacher) and teacher in entry.teachers
        room_conflict = bool(room) and room in entry.rooms
        group_conflict = bool(group) and group in entry.groups
        return not (teacher_conflict or room_conflict or group_conflict)

    def commit(self, slot: str, teacher: str | None, room: str | None, group: str | None) -> None:
        entry = self._slots.setdefault(slot, _SlotEntry())
        teacher = clean_resource(teacher)
        room = clean_resource(room)
        group = clean_resource(group)
        if teacher:
            entry.teachers.add(teacher)
        if room:
            entry.rooms.add(room)
        if group:
            entry.groups.add(group)

    def occupancy(self, slot: str) -> SlotOccupancy:
        entry = self._slots.get(slot)
        if entry is None:
            return SlotOccupancy()
        return SlotOccupancy(
            teachers=frozenset(entry.teachers),
            rooms=frozenset(entry.rooms),
            groups=frozenset(entry.groups),
        )
