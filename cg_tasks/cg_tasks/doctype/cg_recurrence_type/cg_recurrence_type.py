# Copyright (c) 2026, CG Tasks and contributors
# For license information, please see license.txt

from frappe.model.document import Document


class CGRecurrenceType(Document):
	pass
