"""Logging event handler for domain events.

Structured logging for every task event in EVENT_REGISTRY.

Log Levels:
    - INFO: Assignment, completion, reopen, escalation below CRITICAL
    - WARNING: Escalation to CRITICAL priority

Structured Fields:
    - event_id: UUID for event correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - task_id: Task UUID
    - actor fields: assigned_to / assigned_by / completed_by / reopened_by
    - priority fields: old_priority / new_priority

Usage:
    >>> logging_handler = LoggingEventHandler(logger=get_logger())
    >>> event_bus.subscribe(TaskCompleted, logging_handler.handle_task_completed)
"""

from promo_events.domain.enums import TaskPriority
from promo_events.domain.events.task_events import (
    TaskAssigned,
    TaskCompleted,
    TaskPriorityEscalated,
    TaskReopened,
)
from promo_events.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of task events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def handle_task_assigned(self, event: TaskAssigned) -> None:
        """Log task assignment (INFO level)."""
        self._logger.info(
            "task_assigned",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            task_id=str(event.task_id),
            assigned_to=event.assigned_to,
            assigned_by=event.assigned_by,
        )

    async def handle_task_completed(self, event: TaskCompleted) -> None:
        """Log task completion (INFO level)."""
        self._logger.info(
            "task_completed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            task_id=str(event.task_id),
            completed_by=event.completed_by,
            completed_at=event.completed_at.isoformat(),
        )

    async def handle_task_reopened(self, event: TaskReopened) -> None:
        """Log task reopen (INFO level)."""
        self._logger.info(
            "task_reopened",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            task_id=str(event.task_id),
            reopened_by=event.reopened_by,
            reopened_at=event.reopened_at.isoformat(),
        )

    async def handle_task_priority_escalated(
        self,
        event: TaskPriorityEscalated,
    ) -> None:
        """Log priority escalation (WARNING when it reaches CRITICAL)."""
        log = (
            self._logger.warning
            if event.new_priority is TaskPriority.CRITICAL
            else self._logger.info
        )
        log(
            "task_priority_escalated",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            task_id=str(event.task_id),
            old_priority=event.old_priority.value,
            new_priority=event.new_priority.value,
        )
