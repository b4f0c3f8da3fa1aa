"""Task domain events.

Operational events emitted by task aggregates when their state changes.
They are not part of a 3-state workflow: each event records a completed fact.

Events:
1. TaskAssigned - Task assigned to a user
2. TaskCompleted - Task marked done
3. TaskPriorityEscalated - Priority raised (manually or by age)
4. TaskReopened - Completed task reopened

Handlers (wired from EVENT_REGISTRY):
- LoggingEventHandler: ALL events
- NotificationEventHandler: ALL events
- AnalyticsEventHandler: ALL events (+ dashboard refresh on TaskCompleted)
"""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar
from uuid import UUID

from promo_events.domain.enums import TaskPriority
from promo_events.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class TaskAssigned(DomainEvent):
    """Emitted after a task is assigned to a user.

    Attributes:
        task_id: Assigned task.
        assigned_to: User receiving the task.
        assigned_by: User performing the assignment.
    """

    EVENT_TYPE: ClassVar[str] = "TaskAssigned"

    task_id: UUID
    assigned_to: str
    assigned_by: str


@dataclass(frozen=True, kw_only=True, slots=True)
class TaskCompleted(DomainEvent):
    """Emitted after a task is completed.

    Attributes:
        task_id: Completed task.
        completed_by: User who completed it.
        completed_at: Completion timestamp.
    """

    EVENT_TYPE: ClassVar[str] = "TaskCompleted"

    task_id: UUID
    completed_by: str
    completed_at: datetime


@dataclass(frozen=True, kw_only=True, slots=True)
class TaskPriorityEscalated(DomainEvent):
    """Emitted after a task's priority is raised.

    Attributes:
        task_id: Escalated task.
        old_priority: Priority before escalation.
        new_priority: Priority after escalation.
    """

    EVENT_TYPE: ClassVar[str] = "TaskPriorityEscalated"

    task_id: UUID
    old_priority: TaskPriority
    new_priority: TaskPriority


@dataclass(frozen=True, kw_only=True, slots=True)
class TaskReopened(DomainEvent):
    """Emitted after a completed task is reopened.

    Attributes:
        task_id: Reopened task.
        reopened_by: User who reopened it.
        reopened_at: Reopen timestamp.
    """

    EVENT_TYPE: ClassVar[str] = "TaskReopened"

    task_id: UUID
    reopened_by: str
    reopened_at: datetime
