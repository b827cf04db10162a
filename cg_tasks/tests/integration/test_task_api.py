"""Integration tests for the whitelisted task API."""

import frappe
from frappe.tests.utils import FrappeTestCase
from frappe.utils import add_days, now_datetime

from cg_tasks.api import tasks as task_api
from cg_tasks.tests.utils import (
	create_test_cg_user,
	create_test_company,
	create_test_task_definition,
	daily_recurrence,
	get_future_open_instances,
	get_instances,
)


class TestTaskAPI(FrappeTestCase):
	"""Calls the API as the session user, the way the desk and mobile clients do."""

	def setUp(self):
		frappe.set_user("Administrator")
		self.company = create_test_company(weekly_off="")
		self.admin = create_test_cg_user(self.company, role="CG Admin")
		self.member = create_test_cg_user(self.company)

		self.overdue = create_test_task_definition(
			self.company, self.member, self.admin,
			due_date=add_days(now_datetime(), -1), priority="Low",
		)
		self.critical = create_test_task_definition(
			self.company, self.member, self.admin,
			due_date=add_days(now_datetime(), 2), priority="Critical",
		)
		self.low = create_test_task_definition(
			self.company, self.member, self.admin,
			due_date=add_days(now_datetime(), 2), priority="Low",
		)

	def tearDown(self):
		frappe.set_user("Administrator")
		frappe.db.rollback()

	def _instance_name(self, definition):
		return get_instances(definition)[0].name

	def test_caller_without_cg_user_is_rejected(self):
		with self.assertRaises(frappe.PermissionError):
			task_api.get_my_tasks()

	def test_tasks_ordered_by_urgency(self):
		frappe.set_user(self.member)

		tasks = task_api.get_my_tasks()

		self.assertEqual(
			[row.task_definition for row in tasks],
			[self.overdue.name, self.critical.name, self.low.name],
		)
		maps = [row.status_priority_map for row in tasks]
		self.assertEqual(maps, sorted(maps))

	def test_status_filter(self):
		frappe.set_user(self.member)

		tasks = task_api.get_my_tasks(status="Overdue")

		self.assertEqual([row.task_definition for row in tasks], [self.overdue.name])

	def test_unknown_status_rejected(self):
		frappe.set_user(self.member)

		with self.assertRaises(frappe.ValidationError):
			task_api.get_my_tasks(status="Someday")

	def test_limit_is_clamped(self):
		frappe.set_user(self.member)

		self.assertEqual(len(task_api.get_my_tasks(limit="2")), 2)
		self.assertEqual(len(task_api.get_my_tasks(limit=0)), 1)
		self.assertEqual(len(task_api.get_my_tasks(limit=100000)), 3)

	def test_complete_and_summary(self):
		frappe.set_user(self.member)

		result = task_api.complete_task(self._instance_name(self.critical))
		summary = task_api.get_task_summary()

		self.assertEqual(result["status"], "Completed")
		self.assertEqual(summary["Completed"], 1)
		self.assertEqual(summary["Overdue"], 1)
		self.assertEqual(summary["total"], 3)

	def test_assignee_cannot_reopen_through_api(self):
		frappe.set_user(self.member)
		instance = self._instance_name(self.critical)
		task_api.complete_task(instance)

		with self.assertRaises(frappe.PermissionError):
			task_api.reopen_task(instance)

		frappe.set_user(self.admin)
		self.assertEqual(task_api.reopen_task(instance)["status"], "Upcoming")

	def test_pause_requires_assigner_or_admin(self):
		definition = create_test_task_definition(
			self.company, self.member, self.admin,
			task_type="Recurring",
			recurrence=daily_recurrence(),
		)

		frappe.set_user(self.member)
		with self.assertRaises(frappe.PermissionError):
			task_api.pause_task(definition.name)

		frappe.set_user(self.admin)
		paused = task_api.pause_task(definition.name)
		self.assertTrue(paused["is_paused"])
		self.assertGreater(paused["deleted_instances"], 0)
		self.assertEqual(get_future_open_instances(definition), [])

		resumed = task_api.resume_task(definition.name)
		self.assertFalse(resumed["is_paused"])
		self.assertGreater(resumed["created_instances"], 0)
