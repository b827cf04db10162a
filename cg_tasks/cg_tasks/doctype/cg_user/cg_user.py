# Copyright (c) 2026, CG Tasks and contributors
# For license information, please see license.txt

"""
CG User DocType

Application profile for a person working in a CG Company.

Key Features:
- Linked 1:1 to a Frappe User, created on insert when missing
- Department and branch must belong to the user's company
- Every company keeps at least one active CG Admin
- Deactivating a user drops their future open task instances
"""

import frappe
from frappe import _
from frappe.model.document import Document
from frappe.utils import validate_email_address

from cg_tasks.services.schema.constants import CG_ROLES
from cg_tasks.services.task_generator import delete_future_incomplete_instances


def normalise_email(email):
	return (email or "").strip().lower()


class CGUser(Document):
	def before_insert(self):
		# autoname reads email
		self.email = normalise_email(self.email)

	def validate(self):
		self.validate_email()
		self.set_full_name()
		self.validate_organisation()
		self.validate_last_admin()

	def validate_email(self):
		self.email = normalise_email(self.email)
		if not validate_email_address(self.email):
			frappe.throw(_("{0} is not a valid email address").format(self.email))

	def set_full_name(self):
		self.full_name = " ".join(part for part in (self.first_name, self.last_name) if part)

	def validate_organisation(self):
		for doctype, fieldname in (("CG Department", "department"), ("CG Branch", "branch")):
			value = self.get(fieldname)
			if not value:
				continue
			company = frappe.db.get_value(doctype, value, "company")
			if company != self.company:
				frappe.throw(
					_("{0} {1} does not belong to company {2}").format(doctype, value, self.company)
				)

	def validate_last_admin(self):
		"""Reject demoting or deactivating the company's last active admin."""
		if self.is_new():
			return

		before = self.get_doc_before_save()
		if not before or before.role != "CG Admin" or not before.is_active:
			return
		if self.role == "CG Admin" and self.is_active and self.company == before.company:
			return

		other_admins = frappe.db.count(
			"CG User",
			{
				"company": before.company,
				"role": "CG Admin",
				"is_active": 1,
				"name": ["!=", self.name],
			},
		)
		if not other_admins:
			frappe.throw(_("Company {0} must keep at least one active CG Admin").format(before.company))

	def after_insert(self):
		self.ensure_frappe_user()

	def ensure_frappe_user(self):
		if not frappe.db.exists("User", self.email):
			frappe.get_doc({
				"doctype": "User",
				"email": self.email,
				"first_name": self.first_name,
				"last_name": self.last_name,
				"send_welcome_email": 0,
				"user_type": "System User",
				"roles": [{"role": self.role}],
			}).insert(ignore_permissions=True)
			frappe.logger().info(f"Created Frappe User for CG User {self.email}")
		else:
			self.sync_user_roles(self.email)

		self.db_set("user", self.email, update_modified=False)

	def sync_user_roles(self, user=None):
		"""Give the linked Frappe User this CG role and drop the other CG roles."""
		user = frappe.get_doc("User", user or self.user)
		user.flags.ignore_permissions = True

		stale = [role for role in CG_ROLES if role != self.role and user.get("roles", {"role": role})]
		if stale:
			user.remove_roles(*stale)
		user.add_roles(self.role)
		frappe.logger().info(f"Synced CG role {self.role} to User {user.name}")

	def on_update(self):
		before = self.get_doc_before_save()
		if not before:
			return

		if before.role != self.role and self.user:
			self.sync_user_roles()

		if before.is_active and not self.is_active:
			deleted = delete_future_incomplete_instances(assigned_to=self.name)
			frappe.logger().info(f"CG User {self.name} deactivated, {deleted} open instances removed")
