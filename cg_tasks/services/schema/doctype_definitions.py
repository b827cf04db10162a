"""
Central registry of all CG Tasks DocType definitions.

Creation order matters:
1. Child tables (referenced by Table fields)
2. Organisation masters (linked from users and tasks)
3. Task definition, then task instance (links back to its definition)
"""

from cg_tasks.services.schema.definitions.child_tables import CHILD_TABLE_DEFINITIONS
from cg_tasks.services.schema.definitions.organisation_doctypes import ORGANISATION_DOCTYPE_DEFINITIONS
from cg_tasks.services.schema.definitions.task_doctypes import TASK_DOCTYPE_DEFINITIONS

DOCTYPE_DEFINITIONS = [
	*CHILD_TABLE_DEFINITIONS,
	*ORGANISATION_DOCTYPE_DEFINITIONS,
	*TASK_DOCTYPE_DEFINITIONS,
]

__all__ = ["DOCTYPE_DEFINITIONS"]
