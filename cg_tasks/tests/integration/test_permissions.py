"""Integration tests for role-scoped task visibility."""

import frappe
from frappe.tests.utils import FrappeTestCase

from cg_tasks.services.permissions import (
	get_task_definition_conditions,
	get_task_instance_conditions,
	has_task_permission,
)
from cg_tasks.tests.utils import (
	create_test_cg_user,
	create_test_company,
	create_test_department,
	create_test_task_definition,
)


class TestTaskPermissions(FrappeTestCase):
	"""Admins see their company, team leads their department, members their own tasks."""

	def setUp(self):
		frappe.set_user("Administrator")
		self.company = create_test_company(weekly_off="")
		self.other_company = create_test_company(weekly_off="")

		self.sales = create_test_department(self.company, "Sales")
		self.support = create_test_department(self.company, "Support")

		self.admin = create_test_cg_user(self.company, role="CG Admin")
		self.lead = create_test_cg_user(self.company, role="CG Team Lead", department=self.sales)
		self.member = create_test_cg_user(self.company, department=self.sales)
		self.colleague = create_test_cg_user(self.company, department=self.support)
		self.outsider = create_test_cg_user(self.other_company, role="CG Admin")

		self.member_task = create_test_task_definition(
			self.company, self.member, self.admin, department=self.sales
		)
		self.colleague_task = create_test_task_definition(
			self.company, self.colleague, self.admin, department=self.support
		)
		self.outside_task = create_test_task_definition(
			self.other_company, self.outsider, self.outsider
		)

	def tearDown(self):
		frappe.set_user("Administrator")
		frappe.db.rollback()

	def _visible_definitions(self, user):
		frappe.set_user(user)
		names = set(frappe.get_list("CG Task Definition", pluck="name"))
		frappe.set_user("Administrator")
		return names

	def test_super_user_has_no_condition(self):
		self.assertEqual(get_task_instance_conditions("Administrator"), "")
		self.assertTrue(has_task_permission(self.outside_task, user="Administrator"))

	def test_user_without_cg_profile_sees_nothing(self):
		self.assertEqual(get_task_definition_conditions("Guest"), "1=0")
		self.assertFalse(has_task_permission(self.member_task, user="Guest"))

	def test_admin_scope_is_company(self):
		condition = get_task_instance_conditions(self.admin)
		self.assertIn(frappe.db.escape(self.company), condition)

		visible = self._visible_definitions(self.admin)
		self.assertIn(self.member_task.name, visible)
		self.assertIn(self.colleague_task.name, visible)
		self.assertNotIn(self.outside_task.name, visible)

		self.assertTrue(has_task_permission(self.colleague_task, user=self.admin))
		self.assertFalse(has_task_permission(self.outside_task, user=self.admin))

	def test_team_lead_scope_is_department(self):
		visible = self._visible_definitions(self.lead)

		self.assertIn(self.member_task.name, visible)
		self.assertNotIn(self.colleague_task.name, visible)
		self.assertTrue(has_task_permission(self.member_task, user=self.lead))
		self.assertFalse(has_task_permission(self.colleague_task, user=self.lead))

	def test_member_sees_only_own_tasks(self):
		visible = self._visible_definitions(self.member)

		self.assertEqual(visible, {self.member_task.name})
		self.assertFalse(has_task_permission(self.colleague_task, user=self.member))

	def test_assigner_sees_task_outside_scope(self):
		task = create_test_task_definition(
			self.company, self.colleague, self.member, department=self.support
		)

		self.assertTrue(has_task_permission(task, user=self.member))
		self.assertIn(task.name, self._visible_definitions(self.member))

	def test_instance_visibility_follows_definition(self):
		frappe.set_user(self.member)
		instances = frappe.get_list("CG Task Instance", fields=["task_definition"])
		frappe.set_user("Administrator")

		self.assertEqual({row.task_definition for row in instances}, {self.member_task.name})
