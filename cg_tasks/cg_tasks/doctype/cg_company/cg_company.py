# Copyright (c) 2026, CG Tasks and contributors
# For license information, please see license.txt

import frappe
from frappe import _
from frappe.model.document import Document
from frappe.utils import getdate

from cg_tasks.services.holidays import invalidate_holiday_calendar
from cg_tasks.services.recurrence import RecurrenceError, WEEKDAY_NAMES, parse_weekdays


class CGCompany(Document):
	def validate(self):
		self.validate_weekly_off()
		self.validate_holidays()

	def validate_weekly_off(self):
		"""Normalise weekly_off to canonical weekday names."""
		try:
			days = parse_weekdays(self.weekly_off)
		except RecurrenceError as e:
			frappe.throw(_(str(e)))

		if len(days) == len(WEEKDAY_NAMES):
			frappe.throw(_("At least one working day is required"))

		self.weekly_off = ",".join(WEEKDAY_NAMES[d] for d in days)

	def validate_holidays(self):
		seen = set()
		for row in self.holidays:
			holiday = getdate(row.holiday_date)
			if holiday in seen:
				frappe.throw(_("Row {0}: holiday {1} is listed more than once").format(row.idx, holiday))
			seen.add(holiday)

	def on_update(self):
		invalidate_holiday_calendar(self.name)
