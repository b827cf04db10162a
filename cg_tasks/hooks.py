app_name = "cg_tasks"
app_title = "CG Tasks"
app_publisher = "CG Tasks"
app_description = "Recurring task management for companies, departments and branches"
app_email = "dev@cgtasks.example"
app_license = "mit"

# Apps
# ------------------

# required_apps = []

# Installation
# ------------

# before_install = "cg_tasks.install.before_install"
# after_install = "cg_tasks.install.after_install"

# Migration
# ---------
# 1. Create CG roles and DocTypes (child tables first)
# 2. Verify MariaDB charset/collation, set up the outgoing Email Account
#    from EMAIL_* / SMTP_* environment variables or common_site_config.json
after_migrate = [
	"cg_tasks.services.schema.migration_runner.run_migration",
	"cg_tasks.setup_folder.infrastructure.run_auto_configuration",
]

# Permissions
# -----------
# Admins see their company, team leads their department, members their own tasks

permission_query_conditions = {
	"CG Task Definition": "cg_tasks.services.permissions.get_task_definition_conditions",
	"CG Task Instance": "cg_tasks.services.permissions.get_task_instance_conditions",
}

has_permission = {
	"CG Task Definition": "cg_tasks.services.permissions.has_task_permission",
	"CG Task Instance": "cg_tasks.services.permissions.has_task_permission",
}

# Document Events
# ---------------
# Instance generation, pausing and status maps live in the DocType
# controllers; nothing is hooked on other apps' doctypes.

# doc_events = {}

# Scheduled Tasks
# ---------------
#
# update_instance_statuses (Hourly)
# - Moves open instances Upcoming -> Due Today -> Overdue as due dates pass
# - Rebuilds status_priority_map so list ordering stays correct
#
# generate_upcoming_instances (Daily)
# - Extends every enabled, non-paused recurring definition up to
#   cg_task_generation_horizon_days (site config, default 30)
# - Idempotent: existing due dates are never duplicated
#
# ERROR HANDLING:
# - Per-record failures go to the Error Log; the job continues
#
scheduler_events = {
	"Hourly": [
		"cg_tasks.services.task_scheduler.update_instance_statuses",
	],
	"Daily": [
		"cg_tasks.services.task_scheduler.generate_upcoming_instances",
	],
}

# Testing
# -------

# before_tests = "cg_tasks.install.before_tests"

# User Data Protection
# --------------------

user_data_fields = [
	{
		"doctype": "CG User",
		"filter_by": "email",
		"redact_fields": ["first_name", "last_name", "full_name"],
		"partial": 1,
	},
]
