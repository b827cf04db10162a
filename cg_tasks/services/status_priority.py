"""Status computation and the status_priority_map sort key.

The map is a fixed-width string: two digits for the status rank, two
digits for the priority rank, then the due datetime as YYYYMMDDHHMM.
Sorting ascending on it lists the most urgent work first, which lets list
views order by a single indexed column.
"""

from datetime import date, datetime
from typing import Tuple, Union

STATUS_ORDER = {
	"Overdue": 1,
	"Due Today": 2,
	"Upcoming": 3,
	"Completed": 4,
}

PRIORITY_ORDER = {
	"Critical": 1,
	"Medium": 2,
	"Low": 3,
}

MAP_LENGTH = 16
DUE_FORMAT = "%Y%m%d%H%M"

_STATUS_BY_RANK = {rank: status for status, rank in STATUS_ORDER.items()}
_PRIORITY_BY_RANK = {rank: priority for priority, rank in PRIORITY_ORDER.items()}


def _as_datetime(value: Union[date, datetime]) -> datetime:
	if isinstance(value, datetime):
		return value
	return datetime(value.year, value.month, value.day)


def compute_status(due: Union[date, datetime], now: datetime, is_completed: bool = False) -> str:
	"""Derive an instance status from its due datetime."""
	if is_completed:
		return "Completed"

	due = _as_datetime(due)
	if due < now:
		return "Overdue"
	if due.date() == now.date():
		return "Due Today"
	return "Upcoming"


def build_status_priority_map(status: str, priority: str, due: Union[date, datetime]) -> str:
	if status not in STATUS_ORDER:
		raise ValueError(f"Unknown status: {status}")
	if priority not in PRIORITY_ORDER:
		raise ValueError(f"Unknown priority: {priority}")

	due = _as_datetime(due)
	return f"{STATUS_ORDER[status]:02d}{PRIORITY_ORDER[priority]:02d}{due.strftime(DUE_FORMAT)}"


def parse_status_priority_map(value: str) -> Tuple[str, str, datetime]:
	"""Split a map back into (status, priority, due)."""
	if not value or len(value) != MAP_LENGTH or not value.isdigit():
		raise ValueError(f"Malformed status_priority_map: {value!r}")

	status = _STATUS_BY_RANK.get(int(value[:2]))
	priority = _PRIORITY_BY_RANK.get(int(value[2:4]))
	if status is None or priority is None:
		raise ValueError(f"Malformed status_priority_map: {value!r}")

	return status, priority, datetime.strptime(value[4:], DUE_FORMAT)
