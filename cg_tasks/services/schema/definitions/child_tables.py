"""
Child table DocType definitions for CG Tasks.

These must be created before the parent DocTypes that reference them.
"""

from cg_tasks.services.schema.constants import MODULE_NAME


def get_cg_holiday():
	"""Holiday date on a CG Company."""
	return {
		"doctype": "DocType",
		"name": "CG Holiday",
		"module": MODULE_NAME,
		"custom": 0,
		"istable": 1,
		"editable_grid": 1,
		"fields": [
			{
				"fieldname": "holiday_date",
				"fieldtype": "Date",
				"label": "Holiday Date",
				"reqd": 1,
				"in_list_view": 1,
			},
			{
				"fieldname": "description",
				"fieldtype": "Data",
				"label": "Description",
				"in_list_view": 1,
			},
		],
		"permissions": [],
	}


def get_cg_recurrence_type():
	"""Recurrence pattern row on a recurring CG Task Definition."""
	return {
		"doctype": "DocType",
		"name": "CG Recurrence Type",
		"module": MODULE_NAME,
		"custom": 0,
		"istable": 1,
		"editable_grid": 1,
		"fields": [
			{
				"fieldname": "frequency",
				"fieldtype": "Select",
				"label": "Frequency",
				"options": "Daily\nWeekly\nMonthly\nYearly\nCustom",
				"reqd": 1,
				"in_list_view": 1,
			},
			{
				"fieldname": "interval",
				"fieldtype": "Int",
				"label": "Repeat Every",
				"default": 1,
				"in_list_view": 1,
				"description": "Days for Daily/Custom, weeks for Weekly, months for Monthly, years for Yearly",
			},
			{
				"fieldname": "week_days",
				"fieldtype": "Data",
				"label": "Week Days",
				"in_list_view": 1,
				"depends_on": "eval:doc.frequency=='Weekly'",
				"description": "Comma separated, e.g. Mon,Wed,Fri",
			},
			{
				"fieldname": "month_day",
				"fieldtype": "Int",
				"label": "Day of Month",
				"depends_on": "eval:doc.frequency=='Monthly'",
				"description": "1-31; 31 means the last day of every month",
			},
		],
		"permissions": [],
	}


CHILD_TABLE_DEFINITIONS = [
	get_cg_holiday(),
	get_cg_recurrence_type(),
]
