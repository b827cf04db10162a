# Copyright (c) 2026, CG Tasks and contributors
# For license information, please see license.txt

import frappe
from frappe import _
from frappe.model.document import Document
from frappe.utils import get_datetime, now_datetime

from cg_tasks.services.status_priority import build_status_priority_map, compute_status
from cg_tasks.services.task_lifecycle import get_cg_user, is_super_user
from cg_tasks.services.task_summary import invalidate_task_summary


class CGTaskInstance(Document):
	def validate(self):
		self.validate_reopen()
		self.set_completion_fields()
		self.set_status()

	def validate_reopen(self):
		"""A completed instance is reopened only by its assigner or a CG Admin."""
		if self.is_new() or self.is_completed:
			return

		before = self.get_doc_before_save()
		if not before or not before.is_completed:
			return

		if is_super_user():
			return

		cg_user = self.flags.reopened_by or get_cg_user()
		if cg_user == self.assigned_by:
			return

		details = frappe.db.get_value("CG User", cg_user, ["role", "company"], as_dict=True) if cg_user else None
		if details and details.role == "CG Admin" and details.company == self.company:
			return

		frappe.throw(_("Only the assigner or a CG Admin can reopen a completed task"), frappe.PermissionError)

	def set_completion_fields(self):
		if self.is_completed:
			if not self.completed_on:
				self.completed_on = now_datetime()
			if not self.completed_by:
				self.completed_by = get_cg_user()
		else:
			self.completed_on = None
			self.completed_by = None

	def set_status(self):
		self.status = compute_status(self.get_due_datetime(), now_datetime(), bool(self.is_completed))
		self.status_priority_map = build_status_priority_map(
			self.status, self.priority or "Medium", self.get_due_datetime()
		)

	def get_due_datetime(self):
		return get_datetime(self.due_date)

	def on_update(self):
		before = self.get_doc_before_save()
		invalidate_task_summary(self.assigned_to, before.assigned_to if before else None)

	def on_trash(self):
		invalidate_task_summary(self.assigned_to)
