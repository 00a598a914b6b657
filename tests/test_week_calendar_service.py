from datetime import date, datetime, timedelta

import pytest

from class_tracker.services.week_calendar_service import week_calendar

ALL_DAYS_2026 = [date(2026, 1, 1) + timedelta(days=n) for n in range(365)]


@pytest.mark.parametrize("day", ALL_DAYS_2026[::5])
def test_week_start_is_a_monday_and_idempotent(day):
    start = week_calendar.week_start_of(day)
    assert start.isoweekday() == 1
    assert start <= day < start + timedelta(days=7)
    assert week_calendar.week_start_of(start) == start


def test_all_days_of_a_week_share_the_same_start():
    monday = date(2026, 10, 12)
    starts = {week_calendar.week_start_of(monday + timedelta(days=n)) for n in range(7)}
    assert starts == {monday}


def test_sunday_belongs_to_the_preceding_monday():
    assert week_calendar.week_start_of(date(2026, 10, 18)) == date(2026, 10, 12)
    assert week_calendar.weekday_index_of(date(2026, 10, 18)) == 7


def test_datetime_is_truncated_to_its_day():
    early = datetime(2026, 10, 18, 0, 0, 1)
    late = datetime(2026, 10, 18, 23, 59, 59)
    assert week_calendar.week_start_of(early) == week_calendar.week_start_of(late) == date(2026, 10, 12)


def test_week_start_crosses_year_boundary():
    # 2027-01-01 is a Friday
    assert week_calendar.week_id_of(date(2027, 1, 1)) == "2026-12-28"


def test_weekday_index_monday_to_sunday():
    monday = date(2026, 10, 12)
    assert [week_calendar.weekday_index_of(monday + timedelta(days=n)) for n in range(7)] == [1, 2, 3, 4, 5, 6, 7]


def test_parse_week_id():
    assert week_calendar.parse_week_id("2026-10-12") == date(2026, 10, 12)
    with pytest.raises(ValueError):
        week_calendar.parse_week_id("12/10/2026")


@pytest.mark.parametrize("name,expected", [
    ("Monday", 1),
    ("friday", 5),
    (" Sunday ", 7),
    ("Funday", None),
    ("", None),
])
def test_weekday_index_of_name(name, expected):
    assert week_calendar.weekday_index_of_name(name) == expected


def test_get_week_info():
    info = week_calendar.get_week_info(date(2026, 10, 14))
    assert info.week_id == "2026-10-12"
    assert info.start_date == date(2026, 10, 12)
    assert info.end_date == date(2026, 10, 18)
