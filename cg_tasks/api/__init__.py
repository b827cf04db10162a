"""
CG Tasks API Package

Public @frappe.whitelist() functions, re-exported so clients can call
them as cg_tasks.api.<method>.

Modules:
- tasks: Task instances and definitions of the session user
"""

from .tasks import (
	complete_task,
	get_my_tasks,
	get_task_summary,
	pause_task,
	reopen_task,
	resume_task,
)

__all__ = [
	'get_my_tasks',
	'get_task_summary',
	'complete_task',
	'reopen_task',
	'pause_task',
	'resume_task',
]
