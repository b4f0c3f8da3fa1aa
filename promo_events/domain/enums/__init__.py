"""Domain enums for business logic.

Available Enums:
    - TaskPriority: Task priority levels (low, medium, high, critical)
    - TaskStatus: Task workflow status (todo, in_progress, done)
"""

from promo_events.domain.enums.task_priority import TaskPriority
from promo_events.domain.enums.task_status import TaskStatus

__all__ = ["TaskPriority", "TaskStatus"]
