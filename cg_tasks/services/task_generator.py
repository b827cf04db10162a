"""
Task Instance Generation Service

Materialises CG Task Definitions into CG Task Instance rows.

Key Functions:
- generate_instances(): Create missing instances up to the horizon
- delete_future_incomplete_instances(): Remove open instances due from now on
- sync_future_instances(): Push assignee/priority changes to open instances

Generation Pattern:
1. Expand the recurrence row into dates between the anchor and the horizon
2. Apply the company holiday calendar (shift, skip or ignore)
3. Re-attach the definition's time of day
4. Insert only the due datetimes that do not exist yet

Completed and past instances are never touched by these functions.
"""

from datetime import datetime

import frappe
from frappe import _
from frappe.utils import add_days, get_datetime, getdate, now_datetime, today

from cg_tasks.services.holidays import get_holiday_calendar
from cg_tasks.services.recurrence import RecurrenceError, RecurrenceRule, iter_occurrences
from cg_tasks.services.task_summary import invalidate_task_summary

DEFAULT_HORIZON_DAYS = 30

# Fields copied from the definition onto each instance
INSTANCE_FIELDS = (
	"task_name",
	"company",
	"department",
	"branch",
	"assigned_to",
	"assigned_by",
	"priority",
)


def get_generation_horizon_days():
	return int(frappe.conf.get("cg_task_generation_horizon_days") or DEFAULT_HORIZON_DAYS)


def _get_definition(definition):
	if isinstance(definition, str):
		return frappe.get_doc("CG Task Definition", definition)
	return definition


def get_due_datetimes(definition, start=None, until=None):
	"""
	Compute the due datetimes a definition should have in a window.

	Args:
		definition: CG Task Definition document
		start: First date to include (defaults to the definition's due date)
		until: Last date to include (defaults to today + horizon)

	Returns:
		list: Ascending datetimes
	"""
	due = get_datetime(definition.due_date)

	if definition.task_type == "Onetime":
		return [due]

	if not definition.recurrence_type:
		frappe.throw(_("Recurring task {0} has no recurrence").format(definition.name))

	anchor = due.date()
	window_start = max(anchor, getdate(start)) if start else anchor
	window_end = getdate(until) if until else getdate(add_days(today(), get_generation_horizon_days()))

	try:
		rule = RecurrenceRule.from_row(definition.recurrence_type[0])
		dates = [d for d in iter_occurrences(rule, anchor, window_end) if d >= window_start]
		calendar = get_holiday_calendar(definition.company)
		dates = calendar.apply(dates, definition.holiday_behaviour or "Next Working Day")
	except RecurrenceError as e:
		frappe.throw(_("Invalid recurrence for {0}: {1}").format(definition.task_name, str(e)))

	return [datetime.combine(d, due.time()) for d in dates if d >= window_start]


def generate_instances(definition, start=None, until=None):
	"""
	Create the missing instances of a definition.

	Idempotent: due datetimes that already have an instance are skipped.

	Returns:
		int: Number of instances created
	"""
	definition = _get_definition(definition)

	if not definition.enabled or definition.is_paused:
		return 0

	if not frappe.db.get_value("CG User", definition.assigned_to, "is_active"):
		frappe.logger().info(
			f"Skipping generation for {definition.name}: assignee {definition.assigned_to} is inactive"
		)
		return 0

	existing = {
		get_datetime(d)
		for d in frappe.get_all(
			"CG Task Instance",
			filters={"task_definition": definition.name},
			pluck="due_date",
		)
	}

	created = 0
	for due in get_due_datetimes(definition, start=start, until=until):
		if due in existing:
			continue

		values = {field: definition.get(field) for field in INSTANCE_FIELDS}
		values.update({
			"doctype": "CG Task Instance",
			"task_definition": definition.name,
			"due_date": due,
		})
		frappe.get_doc(values).insert(ignore_permissions=True)
		existing.add(due)
		created += 1

	if created:
		frappe.logger().info(f"Generated {created} instances for task definition {definition.name}")

	return created


def _future_incomplete_filters(definition=None, assigned_to=None, now=None):
	filters = {
		"is_completed": 0,
		"due_date": [">=", now or now_datetime()],
	}
	if definition:
		filters["task_definition"] = definition if isinstance(definition, str) else definition.name
	if assigned_to:
		filters["assigned_to"] = assigned_to
	return filters


def delete_future_incomplete_instances(definition=None, assigned_to=None, now=None):
	"""
	Delete open instances due from ``now`` onwards.

	Args:
		definition: CG Task Definition name or document (optional)
		assigned_to: CG User name (optional)
		now: Cut-off datetime (defaults to now)

	Returns:
		int: Number of instances deleted
	"""
	if not definition and not assigned_to:
		frappe.throw(_("A task definition or an assignee is required"))

	filters = _future_incomplete_filters(definition, assigned_to, now)
	rows = frappe.get_all("CG Task Instance", filters=filters, fields=["name", "assigned_to"])
	names = [row.name for row in rows]

	if names:
		frappe.db.delete("CG Task Instance", {"name": ["in", names]})
		invalidate_task_summary(*{row.assigned_to for row in rows})
		frappe.logger().info(f"Deleted {len(names)} future incomplete task instances")

	return len(names)


def sync_future_instances(definition, fields):
	"""
	Copy changed definition fields onto its open future instances.

	Returns:
		int: Number of instances updated
	"""
	definition = _get_definition(definition)
	names = frappe.get_all(
		"CG Task Instance",
		filters=_future_incomplete_filters(definition),
		pluck="name",
	)

	for name in names:
		instance = frappe.get_doc("CG Task Instance", name)
		for field in fields:
			instance.set(field, definition.get(field))
		instance.save(ignore_permissions=True)

	return len(names)
