"""
Task lifecycle operations: pause/resume definitions, complete/reopen instances.

These are the state changes users trigger; the controllers enforce the
same rules on direct saves.
"""

import frappe
from frappe import _
from frappe.utils import now_datetime

SUPER_USER_ROLES = ("System Manager",)


def is_super_user(user=None):
	user = user or frappe.session.user
	if user == "Administrator":
		return True
	return any(role in frappe.get_roles(user) for role in SUPER_USER_ROLES)


def get_cg_user(user=None):
	"""
	Return the CG User name linked to a Frappe user.

	Args:
		user: Frappe User name (defaults to session user)

	Returns:
		str or None
	"""
	user = user or frappe.session.user
	return frappe.db.get_value("CG User", {"user": user, "is_active": 1}, "name")


def get_cg_user_details(cg_user):
	return frappe.db.get_value(
		"CG User",
		cg_user,
		["name", "company", "department", "branch", "role", "is_active"],
		as_dict=True,
	)


def can_manage_definition(definition, cg_user, user=None):
	"""Assigner, company CG Admin, or a super user may manage a definition."""
	if is_super_user(user):
		return True
	if not cg_user:
		return False
	if definition.assigned_by == cg_user:
		return True

	details = get_cg_user_details(cg_user)
	return bool(details and details.role == "CG Admin" and details.company == definition.company)


def pause_task(definition):
	"""
	Pause a recurring definition and drop its future open instances.

	Returns:
		int: Number of instances deleted
	"""
	if definition.task_type != "Recurring":
		frappe.throw(_("Only recurring tasks can be paused"))
	if definition.is_paused:
		return 0

	definition.is_paused = 1
	definition.paused_on = now_datetime()
	definition.save(ignore_permissions=True)

	# CGTaskDefinition.on_update performs the deletion
	return definition.flags.deleted_instances or 0


def resume_task(definition):
	"""
	Resume a paused definition and regenerate instances from today.

	Returns:
		int: Number of instances created
	"""
	if not definition.is_paused:
		return 0

	definition.is_paused = 0
	definition.save(ignore_permissions=True)

	return definition.flags.created_instances or 0


def _check_instance_actor(instance, cg_user, allow_assignee=True):
	if is_super_user():
		return
	allowed = {instance.assigned_by}
	if allow_assignee:
		allowed.add(instance.assigned_to)
	if cg_user in allowed:
		return

	details = get_cg_user_details(cg_user) if cg_user else None
	if details and details.role == "CG Admin" and details.company == instance.company:
		return

	frappe.throw(_("You are not allowed to change this task"), frappe.PermissionError)


def complete_instance(instance, cg_user):
	"""Mark an instance completed by ``cg_user``."""
	_check_instance_actor(instance, cg_user)

	if instance.is_completed:
		return instance

	instance.is_completed = 1
	instance.completed_by = cg_user
	instance.save(ignore_permissions=True)
	return instance


def reopen_instance(instance, cg_user):
	"""Reopen a completed instance. Only the assigner or an admin may do this."""
	_check_instance_actor(instance, cg_user, allow_assignee=False)

	if not instance.is_completed:
		return instance

	instance.is_completed = 0
	instance.flags.reopened_by = cg_user
	instance.save(ignore_permissions=True)
	return instance
