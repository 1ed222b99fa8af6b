from collections import defaultdict
from typing import Dict, List

from timetable_merge.schemas.conflict import Conflict, ResourceKind
from timetable_merge.schemas.timetable import Assignment

RESOURCE_KINDS: tuple[ResourceKind, ...] = ("teacher", "room", "group")


def _resource_of(assignment: Assignment, kind: ResourceKind) -> str:
    return (getattr(assignment, kind) or "").strip()


def detect_conflicts(assignments: List[Assignment]) -> List[Conflict]:
    """Re-scan final assignments and report every resource held twice in one slot."""
    by_slot: Dict[str, List[Assignment]] = defaultdict(list)
    for assignment in assignments:
        if not assignment.assigned_slot:
            continue
        by_slot[assignment.assigned_slot].append(assignment)

    conflicts: List[Conflict] = []
    for slot, slot_assignments in by_slot.items():
        if len(slot_assignments) <= 1:
            continue

        for kind in RESOURCE_KINDS:
            holders: Dict[str, List[Assignment]] = defaultdict(list)
            for assignment in slot_assignments:
                resource = _resource_of(assignment, kind)
                if resource:
                    holders[resource].append(assignment)

            for resource, entries in holders.items():
                if len(entries) > 1:
                    conflicts.append(Conflict(
                        kind=kind,
                        slot=slot,
                        resource=resource,
                        conflicting_entries=entries,
                    ))

    return conflicts


def format_conflicts(conflicts: List[Conflict]) -> str:
    if not conflicts:
        return "No conflicts detected."

    lines = [f"Found {len(conflicts)} conflicts:", ""]
    for conflict in conflicts:
        lines.append(f"{conflict.kind.upper()} CONFLICT at {conflict.slot}:")
        lines.append(f"Resource: {conflict.resource}")
        lines.append("Conflicting entries:")
        for entry in conflict.conflicting_entries:
            lines.append(
                f"  - {entry.subject or 'Unknown Subject'} (Group: {entry.group or 'N/A'}) "
                f"taught by {entry.teacher or 'N/A'} in {entry.room or 'N/A'}"
            )
        lines.append("")
    return "\n".join(lines)
