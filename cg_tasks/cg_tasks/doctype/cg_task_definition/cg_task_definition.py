# Copyright (c) 2026, CG Tasks and contributors
# For license information, please see license.txt

"""
CG Task Definition DocType

Describes a one-time or recurring piece of work. Instances are generated
from it on insert and kept in step with it on every update.

Validation:
- Every task needs a due date; recurring tasks anchor their pattern on it
- Recurring tasks carry exactly one recurrence row, one-time tasks none
- Assignee and assigner must be active users of the same company
- One-time tasks cannot be paused

Update handling (on_update):
- paused: delete future incomplete instances
- resumed: regenerate from today
- recurrence / due time / holiday behaviour changed: regenerate future
- assignee / priority changed: update future incomplete instances
"""

import frappe
from frappe import _
from frappe.model.document import Document
from frappe.utils import get_datetime, now_datetime, today

from cg_tasks.services.recurrence import RecurrenceError, RecurrenceRule
from cg_tasks.services.task_generator import (
	delete_future_incomplete_instances,
	generate_instances,
	sync_future_instances,
)
from cg_tasks.services.task_lifecycle import get_cg_user, is_super_user

SCHEDULE_FIELDS = ("due_date", "holiday_behaviour")
SYNC_FIELDS = ("assigned_to", "priority", "task_name", "department", "branch")


class CGTaskDefinition(Document):
	def validate(self):
		self.validate_due_date()
		self.validate_recurrence()
		self.validate_assignment()
		self.validate_pause()

	def validate_due_date(self):
		if not self.due_date:
			if self.task_type == "Recurring":
				frappe.throw(_("Due Date is required for recurring tasks"))
			frappe.throw(_("Due Date is required"))

	def validate_recurrence(self):
		if self.task_type == "Onetime":
			if self.recurrence_type:
				frappe.throw(_("One-time tasks cannot have a recurrence"))
			return

		if len(self.recurrence_type) != 1:
			frappe.throw(_("Recurring tasks need exactly one recurrence row"))

		try:
			RecurrenceRule.from_row(self.recurrence_type[0])
		except RecurrenceError as e:
			frappe.throw(_("Invalid recurrence: {0}").format(str(e)))

	def validate_assignment(self):
		for fieldname in ("assigned_to", "assigned_by"):
			cg_user = self.get(fieldname)
			details = frappe.db.get_value("CG User", cg_user, ["company", "is_active"], as_dict=True)
			if not details:
				frappe.throw(_("CG User {0} does not exist").format(cg_user))
			if not details.is_active:
				frappe.throw(_("CG User {0} is inactive").format(cg_user))
			if details.company != self.company:
				frappe.throw(_("CG User {0} does not belong to company {1}").format(cg_user, self.company))

	def validate_pause(self):
		if self.is_paused and self.task_type != "Recurring":
			frappe.throw(_("Only recurring tasks can be paused"))

		if self.is_paused and not self.paused_on:
			self.paused_on = now_datetime()
		elif not self.is_paused:
			self.paused_on = None

	def after_insert(self):
		self.flags.created_instances = generate_instances(self)

	def on_update(self):
		before = self.get_doc_before_save()
		if not before:
			return

		if self.is_paused and not before.is_paused:
			self.flags.deleted_instances = delete_future_incomplete_instances(self)
			return

		if not self.is_paused and before.is_paused:
			self.flags.created_instances = generate_instances(self, start=today())
			return

		if self.is_paused:
			return

		if self.schedule_changed(before):
			delete_future_incomplete_instances(self)
			self.flags.created_instances = generate_instances(self, start=today())
			return

		changed = [field for field in SYNC_FIELDS if self.get(field) != before.get(field)]
		if changed:
			sync_future_instances(self, changed)

	def schedule_changed(self, before):
		if get_datetime(self.due_date) != get_datetime(before.due_date):
			return True
		if any(self.get(field) != before.get(field) for field in SCHEDULE_FIELDS[1:]):
			return True
		return _recurrence_signature(self) != _recurrence_signature(before)

	def on_trash(self):
		completed = frappe.db.count("CG Task Instance", {"task_definition": self.name, "is_completed": 1})
		if completed and not self.trash_allowed():
			frappe.throw(_("Task {0} has completed instances and can only be deleted by a CG Admin").format(self.task_name))

		frappe.db.delete("CG Task Instance", {"task_definition": self.name})

	def trash_allowed(self):
		if is_super_user():
			return True
		cg_user = get_cg_user()
		return bool(cg_user and frappe.db.get_value("CG User", cg_user, "role") == "CG Admin")


def _recurrence_signature(doc):
	return [
		(row.frequency, int(row.interval or 1), row.week_days or "", int(row.month_day or 0))
		for row in doc.recurrence_type
	]
