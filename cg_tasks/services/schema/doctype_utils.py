"""
Helpers that create CG Tasks roles and DocTypes when they are missing.
"""

import frappe


def ensure_doctype(definition):
	"""
	Insert a DocType from its dict definition unless it already exists.

	Returns:
		bool: True when the DocType was created
	"""
	if frappe.db.exists("DocType", definition["name"]):
		return False

	frappe.get_doc(definition).insert(ignore_permissions=True)
	return True


def ensure_role(role_name, desk_access=1):
	"""Insert a CG role unless it already exists. Returns True when created."""
	if frappe.db.exists("Role", role_name):
		return False

	frappe.get_doc({
		"doctype": "Role",
		"role_name": role_name,
		"desk_access": desk_access,
	}).insert(ignore_permissions=True)
	return True
