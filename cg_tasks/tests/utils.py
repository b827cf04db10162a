"""
Test Utilities for CG Tasks

Helpers for creating organisation and task records in FrappeTestCase
suites.

Functions are organized into the following categories:
- Organisation Helpers: Companies, branches, departments
- User Helpers: CG Users (and their Frappe Users)
- Task Helpers: One-time and recurring task definitions
- Query Helpers: Instance lookups used in assertions
"""

import random

import frappe
from frappe.utils import add_days, get_datetime, now_datetime


# ============================================================
# ORGANISATION HELPERS
# ============================================================

def create_test_company(company_name=None, weekly_off="Sunday", holidays=None):
	"""
	Create a CG Company.

	Args:
		company_name: Company name (auto-generated if None)
		weekly_off: Comma separated weekday names
		holidays: List of holiday dates

	Returns:
		str: Company name
	"""
	if not company_name:
		company_name = f"Test Company {random.randint(1000, 9999)}"

	if frappe.db.exists("CG Company", company_name):
		return company_name

	frappe.get_doc({
		"doctype": "CG Company",
		"company_name": company_name,
		"weekly_off": weekly_off,
		"holidays": [{"holiday_date": d, "description": "Holiday"} for d in (holidays or [])],
	}).insert(ignore_permissions=True)

	return company_name


def create_test_department(company, department_name="Operations"):
	doc = frappe.get_doc({
		"doctype": "CG Department",
		"department_name": department_name,
		"company": company,
	}).insert(ignore_permissions=True)
	return doc.name


def create_test_branch(company, branch_name="Head Office"):
	doc = frappe.get_doc({
		"doctype": "CG Branch",
		"branch_name": branch_name,
		"company": company,
	}).insert(ignore_permissions=True)
	return doc.name


# ============================================================
# USER HELPERS
# ============================================================

def create_test_cg_user(company, role="CG Member", email=None, first_name="Test", department=None):
	"""
	Create a CG User (and the linked Frappe User).

	Args:
		company: CG Company name
		role: CG Admin, CG Team Lead or CG Member
		email: Email (auto-generated if None)
		first_name: First name
		department: CG Department name (optional)

	Returns:
		str: CG User name (the email)
	"""
	if not email:
		email = f"test_{random.randint(10000, 99999)}@cgtasks.test"

	if frappe.db.exists("CG User", email):
		return email

	doc = frappe.get_doc({
		"doctype": "CG User",
		"email": email,
		"first_name": first_name,
		"last_name": role.replace("CG ", ""),
		"company": company,
		"department": department,
		"role": role,
	}).insert(ignore_permissions=True)

	return doc.name


# ============================================================
# TASK HELPERS
# ============================================================

def create_test_task_definition(company, assigned_to, assigned_by, task_type="Onetime",
		due_date=None, recurrence=None, priority="Medium", holiday_behaviour="Next Working Day",
		task_name=None, department=None):
	"""
	Create a CG Task Definition.

	Args:
		company: CG Company name
		assigned_to: CG User doing the work
		assigned_by: CG User who assigned it
		task_type: Onetime or Recurring
		due_date: Datetime (defaults to tomorrow, same time)
		recurrence: Dict for the CG Recurrence Type row (recurring only)
		priority: Critical, Medium or Low
		holiday_behaviour: Next Working Day, Previous Working Day, Skip or Ignore
		department: CG Department name (optional)

	Returns:
		Document: The inserted definition
	"""
	doc = frappe.get_doc({
		"doctype": "CG Task Definition",
		"task_name": task_name or f"Test Task {random.randint(1000, 9999)}",
		"company": company,
		"department": department,
		"assigned_to": assigned_to,
		"assigned_by": assigned_by,
		"task_type": task_type,
		"priority": priority,
		"due_date": due_date or add_days(now_datetime(), 1),
		"holiday_behaviour": holiday_behaviour,
		"recurrence_type": [recurrence] if recurrence else [],
	})
	doc.insert(ignore_permissions=True)
	return doc


def daily_recurrence(interval=1):
	return {"frequency": "Daily", "interval": interval}


# ============================================================
# QUERY HELPERS
# ============================================================

def get_instances(definition, **filters):
	"""Instances of a definition ordered by due date."""
	filters["task_definition"] = definition if isinstance(definition, str) else definition.name
	return frappe.get_all(
		"CG Task Instance",
		filters=filters,
		fields=["name", "due_date", "status", "is_completed", "assigned_to", "priority", "status_priority_map"],
		order_by="due_date asc",
	)


def get_future_open_instances(definition):
	return [
		row for row in get_instances(definition, is_completed=0)
		if get_datetime(row.due_date) >= now_datetime()
	]
