"""Domain errors package.

Usage:
    from promo_events.domain.errors import InvalidEventTypeError, TaskError
"""

from promo_events.domain.errors.event_bus_error import InvalidEventTypeError
from promo_events.domain.errors.task_error import TaskError

__all__ = ["InvalidEventTypeError", "TaskError"]
