# Copyright (c) 2026, CG Tasks and contributors
# For license information, please see license.txt

import frappe
from frappe import _
from frappe.model.document import Document

from cg_tasks.cg_tasks.doctype.cg_branch.cg_branch import validate_company_enabled


class CGDepartment(Document):
	def validate(self):
		if not (self.department_name or "").strip():
			frappe.throw(_("Department Name is required"))
		validate_company_enabled(self.company)
