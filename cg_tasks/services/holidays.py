"""
Company holiday calendars.

Loads a CG Company's holidays and weekly offs into a HolidayCalendar,
caching the raw values in Redis until the company is saved again.
"""

import frappe
from frappe.utils import getdate

from cg_tasks.services.holiday_calendar import HolidayCalendar
from cg_tasks.utils.cache_keys import get_holiday_calendar_key

DEFAULT_CACHE_TTL = 300


def get_cache_ttl():
	return int(frappe.conf.get("cg_status_cache_ttl") or DEFAULT_CACHE_TTL)


def _load_company_calendar_data(company):
	holidays = frappe.get_all(
		"CG Holiday",
		filters={"parent": company, "parenttype": "CG Company"},
		pluck="holiday_date",
	)
	weekly_off = frappe.db.get_value("CG Company", company, "weekly_off")

	return {
		"holidays": [str(getdate(d)) for d in holidays],
		"weekly_off": weekly_off or "",
	}


def get_holiday_calendar(company):
	"""
	Return the HolidayCalendar for a company.

	Args:
		company (str): CG Company name

	Returns:
		HolidayCalendar
	"""
	cache = frappe.cache()
	key = get_holiday_calendar_key(company)

	data = cache.get_value(key)
	if not data:
		data = _load_company_calendar_data(company)
		cache.set_value(key, data, expires_in_sec=get_cache_ttl())

	return HolidayCalendar(
		holidays=[getdate(d) for d in data["holidays"]],
		weekly_off=data["weekly_off"],
	)


def invalidate_holiday_calendar(company):
	frappe.cache().delete_value(get_holiday_calendar_key(company))
	frappe.logger().info(f"Holiday calendar cache cleared for {company}")
