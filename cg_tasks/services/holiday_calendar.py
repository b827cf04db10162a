"""Working-day calendar built from a CG Company's holidays and weekly offs."""

import logging
from datetime import date, timedelta
from typing import Iterable, List, Optional

from cg_tasks.services.recurrence import RecurrenceError, WEEKDAY_NAMES, parse_weekdays

logger = logging.getLogger(__name__)

HOLIDAY_BEHAVIOURS = ("Ignore", "Skip", "Next Working Day", "Previous Working Day")

# Upper bound when searching for a working day
MAX_SHIFT_DAYS = 366


class HolidayCalendar:
	"""Answers whether a date is a working day and moves dates off holidays."""

	def __init__(self, holidays: Iterable[date] = (), weekly_off: Iterable[str] = ("Sunday",)):
		self.holidays = frozenset(holidays)
		self.weekly_off = parse_weekdays(weekly_off)

		if len(self.weekly_off) == len(WEEKDAY_NAMES):
			raise RecurrenceError("Every weekday is marked as a weekly off")

	def is_working_day(self, day: date) -> bool:
		return day.weekday() not in self.weekly_off and day not in self.holidays

	def shift(self, day: date, behaviour: str) -> Optional[date]:
		"""Apply a holiday behaviour to a single date.

		Returns None when the behaviour is Skip and the date is not a
		working day.
		"""
		if behaviour not in HOLIDAY_BEHAVIOURS:
			raise RecurrenceError(f"Unknown holiday behaviour: {behaviour}")

		if behaviour == "Ignore" or self.is_working_day(day):
			return day

		if behaviour == "Skip":
			return None

		step = timedelta(days=1 if behaviour == "Next Working Day" else -1)
		candidate = day
		for _ in range(MAX_SHIFT_DAYS):
			candidate += step
			if self.is_working_day(candidate):
				return candidate

		raise RecurrenceError(f"No working day within {MAX_SHIFT_DAYS} days of {day}")

	def apply(self, days: Iterable[date], behaviour: str) -> List[date]:
		"""Shift every date, dropping skipped ones and collapsing duplicates."""
		shifted = set()
		for day in days:
			moved = self.shift(day, behaviour)
			if moved is not None:
				shifted.add(moved)

		result = sorted(shifted)
		logger.debug(f"Holiday behaviour {behaviour!r} kept {len(result)} dates")
		return result
