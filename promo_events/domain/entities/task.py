"""Task aggregate.

The only producer of task domain events. Every successful state change
records the matching event; callers persist the task and then release the
events with pull_domain_events() (see application.services.event_publishing).

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Uses Result types for business rule violations
    - Records events, never publishes them

Usage:
    from promo_events.domain.entities import Task

    task = Task(title="Review spring promotion")
    match task.assign_to("u-1", assigned_by="lead"):
        case Success():
            await publish_pending_events(event_bus, task)
        case Failure(error=message):
            ...
"""

import math
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID

from uuid_extensions import uuid7

from promo_events.core.result import Failure, Result, Success
from promo_events.domain.entities.aggregate_root import AggregateRoot
from promo_events.domain.enums import TaskPriority, TaskStatus
from promo_events.domain.errors.task_error import TaskError
from promo_events.domain.events.task_events import (
    TaskAssigned,
    TaskCompleted,
    TaskPriorityEscalated,
    TaskReopened,
)


@dataclass(eq=False)
class Task(AggregateRoot):
    """Unit of work assigned to a user.

    State Machine:
        TODO → IN_PROGRESS → DONE
        TODO → DONE (unassigned tasks, or completed by the assignee)
        DONE → TODO (reopen)

    Business Rules:
        - Completed tasks can't be reassigned or change priority
        - Only the assignee may start or complete an assigned task
        - Lowering priority records nothing; raising it records
          TaskPriorityEscalated

    Attributes:
        title: Task title.
        id: Unique task identifier.
        priority: Current priority (MEDIUM by default).
        status: Current workflow status.
        assigned_to: Current assignee, if any.
        assigned_by: User who made the current assignment.
        created_at: Creation timestamp (drives automatic escalation).
        completed_at: Completion timestamp while DONE.
        due_date: Optional deadline.
    """

    title: str
    id: UUID = field(default_factory=uuid7)
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.TODO
    assigned_to: str | None = None
    assigned_by: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    completed_at: datetime | None = None
    due_date: datetime | None = None

    def __post_init__(self) -> None:
        """Validate task after initialization.

        Raises:
            ValueError: If title is empty.
        """
        super().__init__()
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValueError(TaskError.INVALID_TITLE)

    # -------------------------------------------------------------------------
    # Query Methods (Read-Only)
    # -------------------------------------------------------------------------

    @property
    def is_done(self) -> bool:
        return self.status is TaskStatus.DONE

    def is_assigned_to(self, user_id: str) -> bool:
        return self.assigned_to is not None and self.assigned_to == user_id

    def age_in_days(self, now: datetime | None = None) -> int:
        """Age in whole days, rounded up."""
        elapsed = abs((now or datetime.now(UTC)) - self.created_at)
        return math.ceil(elapsed / timedelta(days=1))

    def is_overdue(self, now: datetime | None = None) -> bool:
        """Check if an open task is past its due date."""
        if self.due_date is None or self.is_done:
            return False
        return (now or datetime.now(UTC)) > self.due_date

    # -------------------------------------------------------------------------
    # State Transitions
    # -------------------------------------------------------------------------

    def assign_to(self, user_id: str, assigned_by: str) -> Result[None, str]:
        """Assign the task, replacing any previous assignee.

        Returns:
            Success(None): TaskAssigned recorded.
            Failure(error): Task is completed.
        """
        if self.is_done:
            return Failure(error=TaskError.TASK_COMPLETED)

        self.assigned_to = user_id
        self.assigned_by = assigned_by
        self._record_event(
            TaskAssigned(task_id=self.id, assigned_to=user_id, assigned_by=assigned_by)
        )
        return Success(value=None)

    def change_priority(self, new_priority: TaskPriority) -> Result[None, str]:
        """Set priority; raising it records TaskPriorityEscalated.

        Returns:
            Success(None): Priority updated.
            Failure(error): Task is completed.
        """
        if self.is_done:
            return Failure(error=TaskError.TASK_COMPLETED)

        old_priority = self.priority
        self.priority = new_priority
        if new_priority.is_higher_than(old_priority):
            self._record_escalation(old_priority)
        return Success(value=None)

    def check_and_escalate_priority(
        self, now: datetime | None = None
    ) -> Result[bool, str]:
        """Escalate one level if the task has outgrown its priority.

        Args:
            now: Reference time (defaults to current UTC time).

        Returns:
            Success(True): Escalated, TaskPriorityEscalated recorded.
            Success(False): Not old enough (or already CRITICAL).
            Failure(error): Task is completed.
        """
        if self.is_done:
            return Failure(error=TaskError.TASK_COMPLETED)
        if not self.priority.should_escalate(self.age_in_days(now)):
            return Success(value=False)

        old_priority = self.priority
        self.priority = old_priority.escalate()
        self._record_escalation(old_priority)
        return Success(value=True)

    def start_progress(self, user_id: str) -> Result[None, str]:
        """Move an assigned TODO task to IN_PROGRESS (assignee only).

        Returns:
            Success(None): Task in progress. No event is recorded.
            Failure(error): Not TODO, unassigned, or not the assignee.
        """
        if self.status is not TaskStatus.TODO:
            return Failure(error=TaskError.NOT_TODO)
        if self.assigned_to is None:
            return Failure(error=TaskError.NOT_ASSIGNED)
        if not self.is_assigned_to(user_id):
            return Failure(error=TaskError.NOT_ASSIGNEE)

        self.status = TaskStatus.IN_PROGRESS
        return Success(value=None)

    def complete(self, user_id: str) -> Result[None, str]:
        """Mark the task DONE.

        Returns:
            Success(None): TaskCompleted recorded.
            Failure(error): Already completed, or not the assignee.
        """
        if self.is_done:
            return Failure(error=TaskError.ALREADY_COMPLETED)
        if self.assigned_to is not None and not self.is_assigned_to(user_id):
            return Failure(error=TaskError.NOT_ASSIGNEE)

        self.status = TaskStatus.DONE
        self.completed_at = datetime.now(UTC)
        self._record_event(
            TaskCompleted(
                task_id=self.id,
                completed_by=user_id,
                completed_at=self.completed_at,
            )
        )
        return Success(value=None)

    def reopen(self, user_id: str) -> Result[None, str]:
        """Move a completed task back to TODO.

        Returns:
            Success(None): TaskReopened recorded.
            Failure(error): Task is not completed.
        """
        if not self.is_done:
            return Failure(error=TaskError.NOT_COMPLETED)

        reopened_at = datetime.now(UTC)
        self.status = TaskStatus.TODO
        self.completed_at = None
        self._record_event(
            TaskReopened(task_id=self.id, reopened_by=user_id, reopened_at=reopened_at)
        )
        return Success(value=None)

    def _record_escalation(self, old_priority: TaskPriority) -> None:
        self._record_event(
            TaskPriorityEscalated(
                task_id=self.id,
                old_priority=old_priority,
                new_priority=self.priority,
            )
        )
