"""
Per-user status counts, cached in Redis.

The cache is dropped whenever one of the user's instances is saved or
deleted; the hourly status job relies on the TTL instead.
"""

import frappe

from cg_tasks.services.holidays import get_cache_ttl
from cg_tasks.services.status_priority import STATUS_ORDER
from cg_tasks.utils.cache_keys import get_task_summary_key


def get_task_summary(cg_user):
	"""
	Count a user's instances per status.

	Returns:
		dict: {"Overdue": n, "Due Today": n, "Upcoming": n, "Completed": n, "total": n}
	"""
	cache = frappe.cache()
	key = get_task_summary_key(cg_user)

	summary = cache.get_value(key)
	if summary:
		return summary

	rows = frappe.get_all(
		"CG Task Instance",
		filters={"assigned_to": cg_user},
		fields=["status", "count(name) as count"],
		group_by="status",
	)

	summary = {status: 0 for status in STATUS_ORDER}
	for row in rows:
		if row.status in summary:
			summary[row.status] = row.count
	summary["total"] = sum(summary[status] for status in STATUS_ORDER)

	cache.set_value(key, summary, expires_in_sec=get_cache_ttl())
	return summary


def invalidate_task_summary(*cg_users):
	cache = frappe.cache()
	for cg_user in cg_users:
		if cg_user:
			cache.delete_value(get_task_summary_key(cg_user))
