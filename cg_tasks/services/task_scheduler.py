"""
Scheduled jobs for CG Tasks.

- update_instance_statuses(): hourly. Moves open instances between
  Upcoming, Due Today and Overdue as their due dates pass, rebuilding the
  status_priority_map alongside.
- generate_upcoming_instances(): daily. Extends every active recurring
  definition up to the generation horizon.

Errors are logged per record; a failing record never stops the job.
"""

import time

import frappe
from frappe.utils import now_datetime

from cg_tasks.services.status_priority import build_status_priority_map, compute_status
from cg_tasks.services.task_generator import generate_instances

CHUNK_SIZE = 500


def update_instance_statuses(now=None):
	"""
	Recompute status for open, not yet overdue instances whose status is stale.

	Returns:
		dict: {"checked": n, "updated": n, "errors": n, "duration": s}
	"""
	start_time = time.time()
	now = now or now_datetime()

	# Overdue is terminal for open rows; saves recompute status in validate
	instances = frappe.get_all(
		"CG Task Instance",
		filters={"is_completed": 0, "status": ["!=", "Overdue"]},
		fields=["name", "due_date", "priority", "status", "status_priority_map"],
	)

	updated = 0
	errors = 0

	for offset in range(0, len(instances), CHUNK_SIZE):
		for row in instances[offset:offset + CHUNK_SIZE]:
			try:
				status = compute_status(row.due_date, now)
				status_map = build_status_priority_map(status, row.priority, row.due_date)
				if status == row.status and status_map == row.status_priority_map:
					continue

				frappe.db.set_value(
					"CG Task Instance",
					row.name,
					{"status": status, "status_priority_map": status_map},
					update_modified=False,
				)
				updated += 1
			except Exception as e:
				errors += 1
				frappe.log_error(
					f"Status update failed for {row.name}: {str(e)}",
					"CG Task Status Update Error",
				)
		frappe.db.commit()

	duration = time.time() - start_time
	frappe.logger().info(
		f"Task status update: {len(instances)} checked, {updated} updated, "
		f"{errors} errors, {duration:.2f}s"
	)

	return {
		"checked": len(instances),
		"updated": updated,
		"errors": errors,
		"duration": duration,
	}


def generate_upcoming_instances():
	"""
	Extend all active, non-paused recurring definitions to the horizon.

	Returns:
		dict: {"definitions": n, "created": n, "errors": n}
	"""
	definitions = frappe.get_all(
		"CG Task Definition",
		filters={"task_type": "Recurring", "enabled": 1, "is_paused": 0},
		pluck="name",
	)

	created = 0
	errors = 0

	for name in definitions:
		try:
			created += generate_instances(name)
			frappe.db.commit()
		except Exception as e:
			frappe.db.rollback()
			errors += 1
			frappe.log_error(
				f"Instance generation failed for {name}: {str(e)}",
				"CG Task Generation Error",
			)

	frappe.logger().info(
		f"Recurring generation: {len(definitions)} definitions, {created} instances created, {errors} errors"
	)

	return {
		"definitions": len(definitions),
		"created": created,
		"errors": errors,
	}
