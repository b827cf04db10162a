"""
Migration runner for CG Tasks schema creation.

Called via the after_migrate hook. Creates the CG roles, then every
DocType in dependency order. Any failure is logged and re-raised so the
migrate command reports it.
"""

import frappe

from cg_tasks.services.schema.constants import CG_ROLES
from cg_tasks.services.schema.doctype_definitions import DOCTYPE_DEFINITIONS
from cg_tasks.services.schema.doctype_utils import ensure_doctype, ensure_role


def run_migration():
	logger = frappe.logger()
	logger.info("CG Tasks schema: checking roles and DocTypes")

	new_roles = [role for role in CG_ROLES if ensure_role(role)]
	if new_roles:
		logger.info(f"CG Tasks schema: created roles {', '.join(new_roles)}")

	created = []
	for definition in DOCTYPE_DEFINITIONS:
		doctype_name = definition["name"]
		try:
			if ensure_doctype(definition):
				created.append(doctype_name)
		except Exception as e:
			frappe.log_error(f"Could not create DocType {doctype_name}: {str(e)}", "CG Tasks Schema Migration")
			raise

	frappe.db.commit()
	logger.info(
		f"CG Tasks schema: {len(created)} DocTypes created, "
		f"{len(DOCTYPE_DEFINITIONS) - len(created)} already present"
	)
