"""
Organisation DocType definitions for CG Tasks.

Company, Branch, Department and the CG User that links a Frappe User to
them.
"""

from cg_tasks.services.schema.constants import (
	MODULE_NAME,
	ORGANISATION_FIELDS,
	standard_permissions,
)


def get_cg_company():
	"""Top-level tenant. Owns the holiday list used by task generation."""
	return {
		"doctype": "DocType",
		"name": "CG Company",
		"module": MODULE_NAME,
		"custom": 0,
		"autoname": "field:company_name",
		"fields": [
			{
				"fieldname": "company_name",
				"fieldtype": "Data",
				"label": "Company Name",
				"reqd": 1,
				"unique": 1,
				"search_index": 1,
			},
			{
				"fieldname": "enabled",
				"fieldtype": "Check",
				"label": "Enabled",
				"default": 1,
			},
			{
				"fieldname": "weekly_off",
				"fieldtype": "Data",
				"label": "Weekly Off",
				"default": "Sunday",
				"description": "Comma separated weekday names",
			},
			{
				"fieldname": "holidays",
				"fieldtype": "Table",
				"label": "Holidays",
				"options": "CG Holiday",
			},
		],
		"permissions": standard_permissions(admin_delete=0),
	}


def _company_unit(name, name_field, label):
	return {
		"doctype": "DocType",
		"name": name,
		"module": MODULE_NAME,
		"custom": 0,
		"autoname": "format:{" + name_field + "}-{company}",
		"fields": [
			{
				"fieldname": name_field,
				"fieldtype": "Data",
				"label": label,
				"reqd": 1,
				"in_list_view": 1,
			},
			dict(ORGANISATION_FIELDS[0]),
			{
				"fieldname": "enabled",
				"fieldtype": "Check",
				"label": "Enabled",
				"default": 1,
			},
		],
		"permissions": standard_permissions(),
	}


def get_cg_branch():
	"""Physical location within a company."""
	return _company_unit("CG Branch", "branch_name", "Branch Name")


def get_cg_department():
	"""Functional team within a company."""
	return _company_unit("CG Department", "department_name", "Department Name")


def get_cg_user():
	"""Application user profile, keyed by email."""
	return {
		"doctype": "DocType",
		"name": "CG User",
		"module": MODULE_NAME,
		"custom": 0,
		"autoname": "field:email",
		"title_field": "full_name",
		"fields": [
			{
				"fieldname": "email",
				"fieldtype": "Data",
				"label": "Email",
				"options": "Email",
				"reqd": 1,
				"unique": 1,
			},
			{
				"fieldname": "first_name",
				"fieldtype": "Data",
				"label": "First Name",
				"reqd": 1,
			},
			{
				"fieldname": "last_name",
				"fieldtype": "Data",
				"label": "Last Name",
			},
			{
				"fieldname": "full_name",
				"fieldtype": "Data",
				"label": "Full Name",
				"read_only": 1,
				"in_list_view": 1,
			},
			*[dict(field) for field in ORGANISATION_FIELDS],
			{
				"fieldname": "role",
				"fieldtype": "Select",
				"label": "Role",
				"options": "CG Member\nCG Team Lead\nCG Admin",
				"default": "CG Member",
				"reqd": 1,
				"in_list_view": 1,
			},
			{
				"fieldname": "is_active",
				"fieldtype": "Check",
				"label": "Is Active",
				"default": 1,
			},
			{
				"fieldname": "user",
				"fieldtype": "Link",
				"label": "User",
				"options": "User",
				"read_only": 1,
				"unique": 1,
			},
		],
		"permissions": standard_permissions(admin_delete=0),
	}


ORGANISATION_DOCTYPE_DEFINITIONS = [
	get_cg_company(),
	get_cg_branch(),
	get_cg_department(),
	get_cg_user(),
]
