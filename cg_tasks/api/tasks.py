"""
Task Domain Module

Whitelisted endpoints for the session user's tasks.
"""

import frappe
from frappe import _
from frappe.utils import cint

from cg_tasks.services import task_lifecycle
from cg_tasks.services.status_priority import STATUS_ORDER
from cg_tasks.services.task_summary import get_task_summary as _get_task_summary

MAX_LIMIT = 500

LIST_FIELDS = [
	"name",
	"task_name",
	"task_definition",
	"assigned_to",
	"assigned_by",
	"priority",
	"due_date",
	"status",
	"is_completed",
	"completed_on",
	"status_priority_map",
]


def _require_cg_user():
	cg_user = task_lifecycle.get_cg_user()
	if not cg_user:
		frappe.throw(_("No active CG User is linked to {0}").format(frappe.session.user), frappe.PermissionError)
	return cg_user


@frappe.whitelist()
def get_my_tasks(status=None, limit=50):
	"""
	Return the caller's task instances, most urgent first.

	Args:
		status: Optional status filter
		limit: Maximum rows (capped at 500)
	"""
	cg_user = _require_cg_user()

	filters = {"assigned_to": cg_user}
	if status:
		if status not in STATUS_ORDER:
			frappe.throw(_("Unknown status: {0}").format(status))
		filters["status"] = status

	limit = min(max(cint(limit), 1), MAX_LIMIT)

	return frappe.get_all(
		"CG Task Instance",
		filters=filters,
		fields=LIST_FIELDS,
		order_by="status_priority_map asc",
		limit_page_length=limit,
	)


@frappe.whitelist()
def get_task_summary():
	return _get_task_summary(_require_cg_user())


@frappe.whitelist(methods=["POST"])
def complete_task(instance):
	cg_user = _require_cg_user()
	doc = frappe.get_doc("CG Task Instance", instance)
	task_lifecycle.complete_instance(doc, cg_user)
	return {"name": doc.name, "status": doc.status, "completed_on": doc.completed_on}


@frappe.whitelist(methods=["POST"])
def reopen_task(instance):
	cg_user = _require_cg_user()
	doc = frappe.get_doc("CG Task Instance", instance)
	task_lifecycle.reopen_instance(doc, cg_user)
	return {"name": doc.name, "status": doc.status}


def _get_managed_definition(definition):
	cg_user = task_lifecycle.get_cg_user()
	doc = frappe.get_doc("CG Task Definition", definition)
	if not task_lifecycle.can_manage_definition(doc, cg_user):
		frappe.throw(_("Only the assigner or a CG Admin can change this task"), frappe.PermissionError)
	return doc


@frappe.whitelist(methods=["POST"])
def pause_task(definition):
	doc = _get_managed_definition(definition)
	deleted = task_lifecycle.pause_task(doc)
	return {"name": doc.name, "is_paused": doc.is_paused, "deleted_instances": deleted}


@frappe.whitelist(methods=["POST"])
def resume_task(definition):
	doc = _get_managed_definition(definition)
	created = task_lifecycle.resume_task(doc)
	return {"name": doc.name, "is_paused": doc.is_paused, "created_instances": created}
