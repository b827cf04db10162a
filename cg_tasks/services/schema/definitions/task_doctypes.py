"""
Task DocType definitions for CG Tasks.

A CG Task Definition describes the work (one-time or recurring); the
scheduler and controllers materialise it into CG Task Instance rows, one
per due date.
"""

from cg_tasks.services.schema.constants import (
	HOLIDAY_BEHAVIOUR_OPTIONS,
	MODULE_NAME,
	ORGANISATION_FIELDS,
	TASK_PRIORITIES,
	TASK_STATUSES,
	standard_permissions,
)


def _assignment_fields():
	return [
		{
			"fieldname": "assigned_to",
			"fieldtype": "Link",
			"label": "Assigned To",
			"options": "CG User",
			"reqd": 1,
			"search_index": 1,
			"in_list_view": 1,
		},
		{
			"fieldname": "assigned_by",
			"fieldtype": "Link",
			"label": "Assigned By",
			"options": "CG User",
			"reqd": 1,
			"search_index": 1,
		},
		{
			"fieldname": "priority",
			"fieldtype": "Select",
			"label": "Priority",
			"options": TASK_PRIORITIES,
			"default": "Medium",
			"reqd": 1,
			"in_list_view": 1,
		},
	]


def get_cg_task_definition():
	"""Template for one-time or recurring work."""
	return {
		"doctype": "DocType",
		"name": "CG Task Definition",
		"module": MODULE_NAME,
		"custom": 0,
		"autoname": "hash",
		"title_field": "task_name",
		"track_changes": 1,
		"fields": [
			{
				"fieldname": "task_name",
				"fieldtype": "Data",
				"label": "Task Name",
				"reqd": 1,
				"in_list_view": 1,
			},
			{
				"fieldname": "description",
				"fieldtype": "Text Editor",
				"label": "Description",
			},
			*[dict(field) for field in ORGANISATION_FIELDS],
			*_assignment_fields(),
			{
				"fieldname": "task_type",
				"fieldtype": "Select",
				"label": "Task Type",
				"options": "Onetime\nRecurring",
				"default": "Onetime",
				"reqd": 1,
				"in_list_view": 1,
			},
			{
				"fieldname": "due_date",
				"fieldtype": "Datetime",
				"label": "Due Date",
				"description": "First due date and time; recurring instances reuse the time of day",
			},
			{
				"fieldname": "recurrence_type",
				"fieldtype": "Table",
				"label": "Recurrence",
				"options": "CG Recurrence Type",
				"depends_on": "eval:doc.task_type=='Recurring'",
			},
			{
				"fieldname": "holiday_behaviour",
				"fieldtype": "Select",
				"label": "On Holidays",
				"options": HOLIDAY_BEHAVIOUR_OPTIONS,
				"default": "Next Working Day",
			},
			{
				"fieldname": "enabled",
				"fieldtype": "Check",
				"label": "Enabled",
				"default": 1,
			},
			{
				"fieldname": "is_paused",
				"fieldtype": "Check",
				"label": "Is Paused",
				"default": 0,
			},
			{
				"fieldname": "paused_on",
				"fieldtype": "Datetime",
				"label": "Paused On",
				"read_only": 1,
			},
		],
		"permissions": standard_permissions(),
	}


def get_cg_task_instance():
	"""A single due occurrence of a task definition."""
	return {
		"doctype": "DocType",
		"name": "CG Task Instance",
		"module": MODULE_NAME,
		"custom": 0,
		"autoname": "hash",
		"title_field": "task_name",
		"sort_field": "status_priority_map",
		"sort_order": "ASC",
		"fields": [
			{
				"fieldname": "task_definition",
				"fieldtype": "Link",
				"label": "Task Definition",
				"options": "CG Task Definition",
				"reqd": 1,
				"search_index": 1,
			},
			{
				"fieldname": "task_name",
				"fieldtype": "Data",
				"label": "Task Name",
				"in_list_view": 1,
			},
			*[dict(field) for field in ORGANISATION_FIELDS],
			*_assignment_fields(),
			{
				"fieldname": "due_date",
				"fieldtype": "Datetime",
				"label": "Due Date",
				"reqd": 1,
				"search_index": 1,
				"in_list_view": 1,
			},
			{
				"fieldname": "status",
				"fieldtype": "Select",
				"label": "Status",
				"options": TASK_STATUSES,
				"default": "Upcoming",
				"read_only": 1,
				"in_list_view": 1,
				"in_standard_filter": 1,
			},
			{
				"fieldname": "is_completed",
				"fieldtype": "Check",
				"label": "Is Completed",
				"default": 0,
			},
			{
				"fieldname": "completed_on",
				"fieldtype": "Datetime",
				"label": "Completed On",
				"read_only": 1,
			},
			{
				"fieldname": "completed_by",
				"fieldtype": "Link",
				"label": "Completed By",
				"options": "CG User",
				"read_only": 1,
			},
			{
				"fieldname": "status_priority_map",
				"fieldtype": "Data",
				"label": "Status Priority Map",
				"length": 16,
				"read_only": 1,
				"hidden": 1,
				"search_index": 1,
			},
		],
		"permissions": standard_permissions(member_write=1),
	}


TASK_DOCTYPE_DEFINITIONS = [
	get_cg_task_definition(),
	get_cg_task_instance(),
]
