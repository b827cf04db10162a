"""Unit tests for recurrence.py"""

from datetime import date
from types import SimpleNamespace

import pytest

from cg_tasks.services.recurrence import (
	RecurrenceError,
	RecurrenceRule,
	clamp_day,
	iter_occurrences,
	next_occurrence,
	parse_weekdays,
)


def test_daily_every_day():
	rule = RecurrenceRule("Daily")

	result = list(iter_occurrences(rule, date(2026, 1, 1), date(2026, 1, 5)))

	assert result == [date(2026, 1, d) for d in range(1, 6)]


def test_custom_every_three_days():
	rule = RecurrenceRule("Custom", interval=3)

	result = list(iter_occurrences(rule, date(2026, 1, 1), date(2026, 1, 10)))

	assert result == [date(2026, 1, 1), date(2026, 1, 4), date(2026, 1, 7), date(2026, 1, 10)]


def test_weekly_skips_days_before_start():
	"""2026-01-01 is a Thursday: Monday and Wednesday of that week are skipped."""
	rule = RecurrenceRule("Weekly", week_days="Mon,Wed")

	result = list(iter_occurrences(rule, date(2026, 1, 1), date(2026, 1, 14)))

	assert result == [date(2026, 1, 5), date(2026, 1, 7), date(2026, 1, 12), date(2026, 1, 14)]


def test_weekly_every_other_week():
	rule = RecurrenceRule("Weekly", interval=2, week_days=["Monday"])

	result = list(iter_occurrences(rule, date(2026, 1, 5), date(2026, 2, 2)))

	assert result == [date(2026, 1, 5), date(2026, 1, 19), date(2026, 2, 2)]


def test_monthly_day_31_clamps_to_month_end():
	rule = RecurrenceRule("Monthly", month_day=31)

	result = list(iter_occurrences(rule, date(2026, 1, 31), date(2026, 4, 30)))

	assert result == [date(2026, 1, 31), date(2026, 2, 28), date(2026, 3, 31), date(2026, 4, 30)]


def test_monthly_day_31_from_mid_month():
	rule = RecurrenceRule("Monthly", month_day=31)

	result = list(iter_occurrences(rule, date(2026, 1, 15), date(2026, 3, 31)))

	assert result == [date(2026, 1, 31), date(2026, 2, 28), date(2026, 3, 31)]


def test_monthly_defaults_to_start_day_with_interval():
	rule = RecurrenceRule("Monthly", interval=2)

	result = list(iter_occurrences(rule, date(2026, 1, 15), date(2026, 6, 30)))

	assert result == [date(2026, 1, 15), date(2026, 3, 15), date(2026, 5, 15)]


def test_monthly_day_before_start_begins_next_month():
	rule = RecurrenceRule("Monthly", month_day=10)

	result = list(iter_occurrences(rule, date(2026, 1, 15), date(2026, 3, 31)))

	assert result == [date(2026, 2, 10), date(2026, 3, 10)]


def test_yearly_leap_day_clamps_in_common_years():
	rule = RecurrenceRule("Yearly")

	result = list(iter_occurrences(rule, date(2024, 2, 29), date(2028, 3, 1)))

	assert result == [
		date(2024, 2, 29),
		date(2025, 2, 28),
		date(2026, 2, 28),
		date(2027, 2, 28),
		date(2028, 2, 29),
	]


def test_empty_window():
	rule = RecurrenceRule("Daily")

	assert list(iter_occurrences(rule, date(2026, 1, 5), date(2026, 1, 1))) == []


@pytest.mark.parametrize("kwargs", [
	{"frequency": "Hourly"},
	{"frequency": "Daily", "interval": 0},
	{"frequency": "Daily", "interval": 1.5},
	{"frequency": "Weekly"},
	{"frequency": "Monthly", "month_day": 32},
	{"frequency": "Monthly", "month_day": 0},
	{"frequency": "Weekly", "week_days": "Funday"},
])
def test_invalid_rules_raise(kwargs):
	with pytest.raises(RecurrenceError):
		RecurrenceRule(**kwargs)


def test_recurrence_error_is_value_error():
	assert issubclass(RecurrenceError, ValueError)


def test_from_row_dict():
	rule = RecurrenceRule.from_row({"frequency": "Weekly", "interval": "2", "week_days": "mon, fri"})

	assert rule.frequency == "Weekly"
	assert rule.interval == 2
	assert rule.week_days == (0, 4)
	assert rule.month_day is None


def test_from_row_object_with_blank_month_day():
	row = SimpleNamespace(frequency="Monthly", interval=None, week_days=None, month_day="")

	rule = RecurrenceRule.from_row(row)

	assert rule.interval == 1
	assert rule.month_day is None


def test_parse_weekdays_dedupes_and_sorts():
	assert parse_weekdays("Friday, mon,FRI") == (0, 4)
	assert parse_weekdays("") == ()


def test_clamp_day():
	assert clamp_day(2026, 2, 30) == date(2026, 2, 28)
	assert clamp_day(2026, 4, 15) == date(2026, 4, 15)


def test_next_occurrence_daily():
	assert next_occurrence(RecurrenceRule("Daily"), date(2026, 1, 1)) == date(2026, 1, 2)


def test_next_occurrence_uses_anchor():
	rule = RecurrenceRule("Monthly", month_day=31)

	result = next_occurrence(rule, date(2026, 2, 10), anchor=date(2026, 1, 31))

	assert result == date(2026, 2, 28)
