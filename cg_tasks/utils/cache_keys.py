"""
Redis key patterns for CG Tasks

All keys are namespaced under the `cg_tasks:` prefix to avoid collisions
with other apps or Frappe internals.
"""

HOLIDAY_CALENDAR_KEY = "cg_tasks:holiday_calendar:{company}"
TASK_SUMMARY_KEY = "cg_tasks:task_summary:{cg_user}"


def get_holiday_calendar_key(company):
	"""Get Redis key for a company's cached holidays and weekly offs"""
	return HOLIDAY_CALENDAR_KEY.format(company=company)


def get_task_summary_key(cg_user):
	"""Get Redis key for a user's cached status counts"""
	return TASK_SUMMARY_KEY.format(cg_user=cg_user)
