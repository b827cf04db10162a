# cg_tasks/setup_folder/infrastructure.py

import os

import frappe

from cg_tasks.utils.email_config import ConfigError, load_email_config
from cg_tasks.utils.mariadb_config import check_mariadb_variables, REQUIRED_MARIADB_SETTINGS


def run_auto_configuration():
    """
    Main entry point to configure site infrastructure automatically.
    This runs on 'after_migrate'.
    """
    verify_database_charset()
    setup_email_account()


def verify_database_charset():
    """
    Frappe needs utf8mb4 with the unicode collation; a server started
    without the my.cnf settings silently corrupts non-latin text.
    """
    try:
        rows = frappe.db.sql(
            "SHOW VARIABLES WHERE Variable_name IN %(names)s",
            {"names": tuple(REQUIRED_MARIADB_SETTINGS)},
        )
        problems = check_mariadb_variables({name: value for name, value in rows})

        for problem in problems:
            frappe.logger().warning(f"MariaDB configuration: {problem}")

        if not problems:
            frappe.logger().info("MariaDB character set and collation verified")

        return problems

    except Exception as e:
        frappe.logger().warning(f"MariaDB configuration check failed: {e}")
        return None


def setup_email_account():
    """
    Create or update the default outgoing Email Account from EMAIL_* /
    SMTP_* environment variables, falling back to common_site_config.json.
    """
    try:
        config = load_email_config(os.environ, frappe.get_site_config())
    except ConfigError as e:
        frappe.log_error(f"Invalid email configuration: {e}", "CG Tasks Email Setup")
        return None

    if not config:
        frappe.logger().info("Email not configured, skipping Email Account setup")
        return None

    values = config.to_email_account()
    name = values["email_account_name"]

    if frappe.db.exists("Email Account", name):
        doc = frappe.get_doc("Email Account", name)
        doc.update(values)
        doc.save(ignore_permissions=True)
        frappe.logger().info(f"Updated Email Account {name}")
    else:
        doc = frappe.get_doc({"doctype": "Email Account", **values})
        doc.insert(ignore_permissions=True)
        frappe.logger().info(f"Created Email Account {name}")

    frappe.db.commit()
    return doc.name
