"""Domain entities.

Usage:
    from promo_events.domain.entities import AggregateRoot, Task
"""

from promo_events.domain.entities.aggregate_root import AggregateRoot
from promo_events.domain.entities.task import Task

__all__ = ["AggregateRoot", "Task"]
