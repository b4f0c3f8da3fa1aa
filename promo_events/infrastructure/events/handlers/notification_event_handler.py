"""Notification event handler stub for domain events.

STUB: records and logs the notifications that would be sent. Delivery
(email, push, in-app) plugs in behind this handler later; the recorded
outbox keeps the intent observable in the meantime.

Notifications:
    - TaskAssigned: assignee told they have a new task
    - TaskCompleted: completion announced on behalf of completed_by
    - TaskReopened: reopen announced on behalf of reopened_by
    - TaskPriorityEscalated: stakeholders alerted (old → new priority)

Usage:
    >>> notification_handler = NotificationEventHandler(logger=get_logger())
    >>> event_bus.subscribe(
    ...     TaskAssigned, notification_handler.handle_task_assigned
    ... )
"""

from dataclasses import dataclass
from uuid import UUID

from promo_events.domain.events.task_events import (
    TaskAssigned,
    TaskCompleted,
    TaskPriorityEscalated,
    TaskReopened,
)
from promo_events.domain.protocols.logger_protocol import LoggerProtocol


@dataclass(frozen=True, slots=True, kw_only=True)
class Notification:
    """A notification the handler would deliver.

    Attributes:
        template: Notification template name.
        task_id: Task the notification is about.
        recipient: User id, or "stakeholders" for escalation alerts.
        message: Rendered message text.
    """

    template: str
    task_id: UUID
    recipient: str
    message: str


class NotificationEventHandler:
    """Event handler stub for task notifications.

    Attributes:
        _logger: Logger protocol implementation (from container).
        _sent: Notifications recorded so far, oldest first.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger
        self._sent: list[Notification] = []

    @property
    def sent(self) -> tuple[Notification, ...]:
        """Notifications recorded so far (read-only view)."""
        return tuple(self._sent)

    async def handle_task_assigned(self, event: TaskAssigned) -> None:
        """Notify the assignee (STUB)."""
        self._queue(
            Notification(
                template="task_assigned",
                task_id=event.task_id,
                recipient=event.assigned_to,
                message="You have been assigned a new task",
            )
        )

    async def handle_task_completed(self, event: TaskCompleted) -> None:
        """Announce task completion (STUB)."""
        self._queue(
            Notification(
                template="task_completed",
                task_id=event.task_id,
                recipient=event.completed_by,
                message=f"Task completed by user {event.completed_by}",
            )
        )

    async def handle_task_reopened(self, event: TaskReopened) -> None:
        """Announce task reopen (STUB)."""
        self._queue(
            Notification(
                template="task_reopened",
                task_id=event.task_id,
                recipient=event.reopened_by,
                message=f"Task reopened by user {event.reopened_by}",
            )
        )

    async def handle_task_priority_escalated(
        self,
        event: TaskPriorityEscalated,
    ) -> None:
        """Alert stakeholders about the escalation (STUB)."""
        self._queue(
            Notification(
                template="task_priority_escalated",
                task_id=event.task_id,
                recipient="stakeholders",
                message=(
                    f"Task priority escalated from {event.old_priority.value} "
                    f"to {event.new_priority.value}"
                ),
            )
        )

    def _queue(self, notification: Notification) -> None:
        self._sent.append(notification)
        self._logger.info(
            "notification_would_be_sent",
            template=notification.template,
            task_id=str(notification.task_id),
            recipient=notification.recipient,
        )
