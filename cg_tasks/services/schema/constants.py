"""
Constants for CG Tasks DocType schema creation
"""

MODULE_NAME = "CG Tasks"

CG_ROLES = ["CG Admin", "CG Team Lead", "CG Member"]

TASK_STATUSES = "Upcoming\nDue Today\nOverdue\nCompleted"

TASK_PRIORITIES = "Critical\nMedium\nLow"

HOLIDAY_BEHAVIOUR_OPTIONS = "Next Working Day\nPrevious Working Day\nSkip\nIgnore"

# Company/department/branch links shared by users, definitions and instances
ORGANISATION_FIELDS = [
	{
		"fieldname": "company",
		"fieldtype": "Link",
		"label": "Company",
		"options": "CG Company",
		"reqd": 1,
		"search_index": 1,
	},
	{
		"fieldname": "department",
		"fieldtype": "Link",
		"label": "Department",
		"options": "CG Department",
	},
	{
		"fieldname": "branch",
		"fieldtype": "Link",
		"label": "Branch",
		"options": "CG Branch",
	},
]


def standard_permissions(admin_delete=1, member_write=0):
	"""Permission rows granted to System Manager and the CG roles."""
	return [
		{
			"role": "System Manager",
			"permlevel": 0,
			"read": 1,
			"write": 1,
			"create": 1,
			"delete": 1,
		},
		{
			"role": "CG Admin",
			"permlevel": 0,
			"read": 1,
			"write": 1,
			"create": 1,
			"delete": admin_delete,
		},
		{
			"role": "CG Team Lead",
			"permlevel": 0,
			"read": 1,
			"write": 1,
			"create": 1,
			"delete": 0,
		},
		{
			"role": "CG Member",
			"permlevel": 0,
			"read": 1,
			"write": member_write,
			"create": 0,
			"delete": 0,
		},
	]
