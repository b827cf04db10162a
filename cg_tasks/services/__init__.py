"""
Services Package for CG Tasks

Frappe-free building blocks:
- recurrence: Recurrence rules and date expansion
- holiday_calendar: Working-day calendar and holiday behaviours
- status_priority: Instance status and status_priority_map encoding

Frappe-bound services:
- holidays: Cached company holiday calendars
- task_generator: Instance generation and cleanup
- task_lifecycle: Pause/resume, complete/reopen
- task_scheduler: Hourly status updates, daily generation
- task_summary: Cached per-user status counts
- permissions: Row-level permission hooks
"""
