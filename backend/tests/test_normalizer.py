import pytest

from timetable_merge.services.grid import WeeklyGrid
from timetable_merge.services.normalizer import normalize_day, normalize_period, slot_from_row


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Mon", "Mon"),
        ("MON", "Mon"),
        ("monday", "Mon"),
        ("Monday", "Mon"),
        ("TUESDAY", "Tue"),
        ("wed", "Wed"),
        ("Thursday", "Thu"),
        ("fri", "Fri"),
        ("  Friday ", "Fri"),
    ],
)
def test_normalize_day_known_spellings(raw, expected):
    assert normalize_day(raw) == expected


@pytest.mark.parametrize("raw", ["Mo", "Saturday", "Funday", ""])
def test_normalize_day_passes_unknown_values_through(raw):
    assert normalize_day(raw) == raw


def test_normalize_day_respects_grid_days():
    weekend_grid = WeeklyGrid(days=("Sat", "Sun"), periods_per_day=2)
    assert normalize_day("saturday", weekend_grid) == "Sat"
    assert normalize_day("Monday", weekend_grid) == "Monday"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Period 3", "P3"),
        ("period3", "P3"),
        ("PERIOD   3", "P3"),
        ("P3", "P3"),
        ("3", "P3"),
        ("p6", "P6"),
        ("Slot 1 (08:00)", "P1"),
        ("P01", "P1"),
    ],
)
def test_normalize_period_known_spellings(raw, expected):
    assert normalize_period(raw) == expected


@pytest.mark.parametrize("raw", ["P7", "0", "Period 12", "lunch", ""])
def test_normalize_period_passes_unknown_values_through(raw):
    assert normalize_period(raw) == raw


def test_normalize_period_uses_grid_period_count():
    short_grid = WeeklyGrid(periods_per_day=4)
    assert normalize_period("4", short_grid) == "P4"
    assert normalize_period("5", short_grid) == "5"


def test_slot_from_row(make_row):
    assert slot_from_row(make_row(day="Monday", period="Period 1")) == "Mon-P1"
    assert slot_from_row(make_row(day="fri", period="6")) == "Fri-P6"


@pytest.mark.parametrize(
    "day, period",
    [
        ("", "Period 1"),
        ("Monday", ""),
        ("Saturday", "P1"),
        ("Monday", "P9"),
        ("Someday", "lunch"),
    ],
)
def test_slot_from_row_returns_empty_for_unusable_day_or_period(make_row, day, period):
    assert slot_from_row(make_row(day=day, period=period)) == ""
