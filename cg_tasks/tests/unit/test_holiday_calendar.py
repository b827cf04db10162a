"""Unit tests for holiday_calendar.py"""

from datetime import date, timedelta

import pytest

from cg_tasks.services.holiday_calendar import HolidayCalendar
from cg_tasks.services.recurrence import RecurrenceError

SUNDAY = date(2026, 1, 4)
MONDAY_HOLIDAY = date(2026, 1, 5)


@pytest.fixture
def calendar():
	"""Sundays off, Monday 2026-01-05 is a holiday."""
	return HolidayCalendar(holidays=[MONDAY_HOLIDAY], weekly_off=["Sunday"])


def test_working_days(calendar):
	assert not calendar.is_working_day(SUNDAY)
	assert not calendar.is_working_day(MONDAY_HOLIDAY)
	assert calendar.is_working_day(date(2026, 1, 6))
	assert calendar.is_working_day(date(2026, 1, 3))


def test_next_working_day_crosses_weekly_off_and_holiday(calendar):
	assert calendar.shift(SUNDAY, "Next Working Day") == date(2026, 1, 6)


def test_previous_working_day(calendar):
	assert calendar.shift(MONDAY_HOLIDAY, "Previous Working Day") == date(2026, 1, 3)


def test_skip_and_ignore(calendar):
	assert calendar.shift(SUNDAY, "Skip") is None
	assert calendar.shift(SUNDAY, "Ignore") == SUNDAY


def test_working_day_is_never_moved(calendar):
	tuesday = date(2026, 1, 6)
	for behaviour in ("Skip", "Next Working Day", "Previous Working Day"):
		assert calendar.shift(tuesday, behaviour) == tuesday


def test_apply_collapses_shifted_duplicates(calendar):
	days = [SUNDAY, MONDAY_HOLIDAY, date(2026, 1, 6), date(2026, 1, 7)]

	assert calendar.apply(days, "Next Working Day") == [date(2026, 1, 6), date(2026, 1, 7)]


def test_apply_skip_drops_non_working_days(calendar):
	days = [date(2026, 1, 3), SUNDAY, MONDAY_HOLIDAY, date(2026, 1, 6)]

	assert calendar.apply(days, "Skip") == [date(2026, 1, 3), date(2026, 1, 6)]


def test_weekly_off_as_string():
	calendar = HolidayCalendar(weekly_off="Saturday,Sunday")

	assert calendar.shift(date(2026, 1, 3), "Next Working Day") == MONDAY_HOLIDAY


def test_all_days_off_rejected():
	with pytest.raises(RecurrenceError):
		HolidayCalendar(weekly_off="Mon,Tue,Wed,Thu,Fri,Sat,Sun")


def test_unknown_behaviour_rejected(calendar):
	with pytest.raises(RecurrenceError):
		calendar.shift(SUNDAY, "Tomorrow")


def test_search_is_bounded():
	start = date(2026, 1, 1)
	holidays = [start + timedelta(days=i) for i in range(400)]
	calendar = HolidayCalendar(holidays=holidays, weekly_off=())

	with pytest.raises(RecurrenceError):
		calendar.shift(start, "Next Working Day")
