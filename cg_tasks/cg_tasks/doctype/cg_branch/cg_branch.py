# Copyright (c) 2026, CG Tasks and contributors
# For license information, please see license.txt

import frappe
from frappe import _
from frappe.model.document import Document


def validate_company_enabled(company):
	if not frappe.db.get_value("CG Company", company, "enabled"):
		frappe.throw(_("Company {0} is disabled or does not exist").format(company))


class CGBranch(Document):
	def validate(self):
		if not (self.branch_name or "").strip():
			frappe.throw(_("Branch Name is required"))
		validate_company_enabled(self.company)
