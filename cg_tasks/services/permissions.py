"""
Row-level permissions for CG Task Definition and CG Task Instance.

- Administrator / System Manager: everything
- CG Admin: tasks of their company
- CG Team Lead: tasks of their department, plus their own
- CG Member: tasks assigned to or by them
"""

import frappe

from cg_tasks.services.task_lifecycle import get_cg_user, get_cg_user_details, is_super_user


def _conditions_for(doctype, user):
	if is_super_user(user):
		return ""

	cg_user = get_cg_user(user)
	if not cg_user:
		return "1=0"

	details = get_cg_user_details(cg_user)
	table = f"`tab{doctype}`"
	escaped_user = frappe.db.escape(cg_user)
	own = f"({table}.assigned_to = {escaped_user} or {table}.assigned_by = {escaped_user})"

	if details.role == "CG Admin":
		return f"{table}.company = {frappe.db.escape(details.company)}"

	if details.role == "CG Team Lead" and details.department:
		return f"({table}.department = {frappe.db.escape(details.department)} or {own})"

	return own


def get_task_definition_conditions(user=None):
	return _conditions_for("CG Task Definition", user or frappe.session.user)


def get_task_instance_conditions(user=None):
	return _conditions_for("CG Task Instance", user or frappe.session.user)


def has_task_permission(doc, ptype=None, user=None):
	"""Document-level counterpart of the query conditions."""
	user = user or frappe.session.user
	if is_super_user(user):
		return True

	cg_user = get_cg_user(user)
	if not cg_user:
		return False

	if cg_user in (doc.assigned_to, doc.assigned_by):
		return True

	details = get_cg_user_details(cg_user)
	if details.role == "CG Admin":
		return details.company == doc.company
	if details.role == "CG Team Lead" and details.department:
		return details.department == doc.department

	return False
