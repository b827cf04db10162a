"""Recurrence rules for CG Task Definitions.

A rule mirrors one row of the CG Recurrence Type child table and expands
into the list of due dates between two bounds. This module has no Frappe
dependency so it can be exercised directly from unit tests.
"""

import calendar
import logging
from datetime import date, timedelta
from typing import Any, Iterator, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

FREQUENCIES = ("Daily", "Weekly", "Monthly", "Yearly", "Custom")

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

# Short forms accepted in the week_days field ("Mon,Wed,Fri")
_WEEKDAY_LOOKUP = {name.lower(): idx for idx, name in enumerate(WEEKDAY_NAMES)}
_WEEKDAY_LOOKUP.update({name[:3].lower(): idx for idx, name in enumerate(WEEKDAY_NAMES)})


class RecurrenceError(ValueError):
	"""Raised when a recurrence rule or calendar cannot produce dates."""


def parse_weekdays(value: Any) -> Tuple[int, ...]:
	"""Parse weekday names into sorted weekday indexes (Monday=0).

	Accepts a comma separated string or any iterable of names.
	"""
	if not value:
		return ()

	if isinstance(value, str):
		parts = value.split(",")
	else:
		parts = list(value)

	days = set()
	for part in parts:
		key = str(part).strip().lower()
		if not key:
			continue
		if key not in _WEEKDAY_LOOKUP:
			raise RecurrenceError(f"Unknown weekday: {part}")
		days.add(_WEEKDAY_LOOKUP[key])

	return tuple(sorted(days))


def clamp_day(year: int, month: int, day: int) -> date:
	"""Build a date, clamping the day to the last day of the month."""
	last = calendar.monthrange(year, month)[1]
	if day > last:
		day = last
	return date(year, month, day)


def _add_months(year: int, month: int, months: int) -> Tuple[int, int]:
	total = year * 12 + (month - 1) + months
	return total // 12, total % 12 + 1


class RecurrenceRule:
	"""One recurrence pattern.

	Attributes:
		frequency: Daily, Weekly, Monthly, Yearly or Custom
		interval: Step between periods (days for Daily/Custom, weeks,
			months or years otherwise)
		week_days: Weekday indexes used by Weekly rules
		month_day: Day of month for Monthly rules; days past the end of a
			month fall on its last day
	"""

	def __init__(self, frequency: str, interval: int = 1, week_days: Sequence = (), month_day: Optional[int] = None):
		self.frequency = frequency
		self.interval = interval
		self.week_days = parse_weekdays(week_days)
		self.month_day = month_day
		self.validate()

	@classmethod
	def from_row(cls, row: Any) -> "RecurrenceRule":
		"""Build a rule from a CG Recurrence Type row (document or dict)."""
		get = row.get if hasattr(row, "get") else lambda key, default=None: getattr(row, key, default)

		month_day = get("month_day")
		# Int fields store 0 when empty
		month_day = int(month_day or 0) or None

		return cls(
			frequency=get("frequency"),
			interval=int(get("interval") or 1),
			week_days=get("week_days") or (),
			month_day=month_day,
		)

	def validate(self) -> None:
		if self.frequency not in FREQUENCIES:
			raise RecurrenceError(f"Unsupported frequency: {self.frequency}")

		if not isinstance(self.interval, int) or self.interval < 1:
			raise RecurrenceError("Interval must be a positive integer")

		if self.frequency == "Weekly" and not self.week_days:
			raise RecurrenceError("Weekly recurrence needs at least one weekday")

		if self.month_day is not None and not (1 <= self.month_day <= 31):
			raise RecurrenceError("Month day must be between 1 and 31")

	def __repr__(self):
		return (
			f"RecurrenceRule(frequency={self.frequency!r}, interval={self.interval}, "
			f"week_days={self.week_days}, month_day={self.month_day})"
		)


def iter_occurrences(rule: RecurrenceRule, start: date, until: date) -> Iterator[date]:
	"""Yield occurrence dates in [start, until], ascending and unique.

	The start date anchors the pattern: Daily/Custom steps count from it,
	Weekly intervals count whole weeks from its Monday, Monthly and Yearly
	steps count from its month.
	"""
	if until < start:
		return

	logger.debug(f"Expanding {rule!r} from {start} to {until}")

	if rule.frequency in ("Daily", "Custom"):
		current = start
		step = timedelta(days=rule.interval)
		while current <= until:
			yield current
			current += step

	elif rule.frequency == "Weekly":
		week_start = start - timedelta(days=start.weekday())
		while week_start <= until:
			for weekday in rule.week_days:
				candidate = week_start + timedelta(days=weekday)
				if start <= candidate <= until:
					yield candidate
			week_start += timedelta(weeks=rule.interval)

	elif rule.frequency == "Monthly":
		day = rule.month_day if rule.month_day is not None else start.day
		step = 0
		while True:
			year, month = _add_months(start.year, start.month, step)
			candidate = clamp_day(year, month, day)
			if candidate > until:
				break
			if candidate >= start:
				yield candidate
			step += rule.interval

	elif rule.frequency == "Yearly":
		step = 0
		while True:
			candidate = clamp_day(start.year + step, start.month, start.day)
			if candidate > until:
				break
			yield candidate
			step += rule.interval


def next_occurrence(rule: RecurrenceRule, after: date, anchor: Optional[date] = None) -> date:
	"""Return the first occurrence strictly after ``after``.

	Args:
		rule: Recurrence rule
		after: Date to search past
		anchor: Start date the pattern is anchored on (defaults to ``after``)
	"""
	anchor = anchor or after
	window_end = after + timedelta(days=366 * rule.interval + 31)
	for candidate in iter_occurrences(rule, anchor, window_end):
		if candidate > after:
			return candidate
	raise RecurrenceError(f"No occurrence found after {after} for {rule!r}")
