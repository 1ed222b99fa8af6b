from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from timetable_merge.core.exceptions import ConfigurationError, InvalidSlotKeyError

if TYPE_CHECKING:
    from timetable_merge.core.config import Settings

DAY_NAMES = {
    "Mon": "Monday",
    "Tue": "Tuesday",
    "Wed": "Wednesday",
    "Thu": "Thursday",
    "Fri": "Friday",
    "Sat": "Saturday",
    "Sun": "Sunday",
}

DEFAULT_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri")
DEFAULT_PERIODS_PER_DAY = 6
SLOT_SEPARATOR = "-"


def period_label(number: int) -> str:
    return f"P{number}"


@dataclass(frozen=True)
class WeeklyGrid:
    """Fixed weekly slot space: an ordered day vocabulary times an ordered period vocabulary.

    Slot keys are ``"<Day>-<Pn>"`` and compare case-sensitively.
    """

    days: tuple[str, ...] = DEFAULT_DAYS
    periods_per_day: int = DEFAULT_PERIODS_PER_DAY
    periods: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        days = tuple(self.days)
        if not days:
            raise ConfigurationError("Weekly grid needs at least one day")
        unknown = [day for day in days if day not in DAY_NAMES]
        if unknown:
            raise ConfigurationError(
                f"Unknown grid day(s): {', '.join(unknown)}",
                details={"allowed": list(DAY_NAMES)},
            )
        if len(set(days)) != len(days):
            raise ConfigurationError("Grid days must be unique", details={"days": list(days)})
        if self.periods_per_day < 1:
            raise ConfigurationError(
                "Weekly grid needs at least one period per day",
                details={"periods_per_day": self.periods_per_day},
            )
        object.__setattr__(self, "days", days)
        object.__setattr__(
            self,
            "periods",
            tuple(period_label(number) for number in range(1, self.periods_per_day + 1)),
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> WeeklyGrid:
        return cls(days=tuple(settings.grid_days), periods_per_day=settings.grid_periods_per_day)

    @property
    def size(self) -> int:
        return len(self.days) * len(self.periods)

    def slot_key(self, day: str, period: str) -> str:
        return f"{day}{SLOT_SEPARATOR}{period}"

    def parse_slot_key(self, key: str) -> tuple[str, str]:
        day, separator, period = key.partition(SLOT_SEPARATOR)
        if not separator:
            raise InvalidSlotKeyError(key, "missing day/period separator")
        if day not in self.days:
            raise InvalidSlotKeyError(key, f"day {day!r} is not part of the grid")
        if period not in self.periods:
            raise InvalidSlotKeyError(key, f"period {period!r} is not part of the grid")
        return day, period

    def contains(self, key: str) -> bool:
        day, separator, period = key.partition(SLOT_SEPARATOR)
        return bool(separator) and day in self.days and period in self.periods

    def day_index(self, day: str) -> int:
        return self.days.index(day)

    def period_index(self, period: str) -> int:
        return self.periods.index(period)

    def slots(self) -> Iterator[str]:
        for day in self.days:
            for period in self.periods:
                yield self.slot_key(day, period)


DEFAULT_GRID = WeeklyGrid()
