import pytest

from timetable_merge.core.config import Settings, get_settings
from timetable_merge.schemas.timetable import TimetableRow
from timetable_merge.services.grid import WeeklyGrid


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def settings():
    return Settings(_env_file=None)


@pytest.fixture()
def grid():
    return WeeklyGrid()


@pytest.fixture()
def make_row():
    def factory(day="Mon", period="P1", subject="", teacher="", group="", room="", source_file=None):
        return TimetableRow(
            day=day,
            period=period,
            subject=subject,
            teacher=teacher,
            group=group,
            room=room,
            source_file=source_file,
        )

    return factory
