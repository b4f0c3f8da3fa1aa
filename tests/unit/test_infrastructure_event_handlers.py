"""Unit tests for task event handlers.

Tests cover:
- LoggingEventHandler: structured fields and log levels
- NotificationEventHandler: recorded notifications (stub delivery)
- AnalyticsEventHandler: event counts, open task tracking, dashboard refresh
"""

from datetime import UTC, datetime
from uuid import uuid4

import pytest

from promo_events.domain.enums import TaskPriority
from promo_events.domain.events import (
    TaskAssigned,
    TaskCompleted,
    TaskPriorityEscalated,
    TaskReopened,
)
from promo_events.infrastructure.events.handlers import (
    AnalyticsEventHandler,
    LoggingEventHandler,
    Notification,
    NotificationEventHandler,
)


def _assigned(task_id, user_id="u-1"):
    return TaskAssigned(task_id=task_id, assigned_to=user_id, assigned_by="lead")


def _completed(task_id, user_id="u-1"):
    return TaskCompleted(
        task_id=task_id, completed_by=user_id, completed_at=datetime.now(UTC)
    )


def _reopened(task_id, user_id="lead"):
    return TaskReopened(
        task_id=task_id, reopened_by=user_id, reopened_at=datetime.now(UTC)
    )


def _escalated(task_id, old=TaskPriority.LOW, new=TaskPriority.MEDIUM):
    return TaskPriorityEscalated(task_id=task_id, old_priority=old, new_priority=new)


@pytest.mark.unit
class TestLoggingEventHandler:
    """Test structured logging of task events."""

    @pytest.mark.asyncio
    async def test_task_assigned_logged_at_info(self, mock_logger):
        # Arrange
        handler = LoggingEventHandler(logger=mock_logger)
        event = _assigned(uuid4())

        # Act
        await handler.handle_task_assigned(event)

        # Assert
        mock_logger.info.assert_called_once()
        assert mock_logger.info.call_args[0][0] == "task_assigned"
        call_kwargs = mock_logger.info.call_args[1]
        assert call_kwargs["event_id"] == str(event.event_id)
        assert call_kwargs["task_id"] == str(event.task_id)
        assert call_kwargs["assigned_to"] == "u-1"
        assert call_kwargs["assigned_by"] == "lead"

    @pytest.mark.asyncio
    async def test_task_completed_logged_with_timestamp(self, mock_logger):
        handler = LoggingEventHandler(logger=mock_logger)
        event = _completed(uuid4())

        await handler.handle_task_completed(event)

        call_kwargs = mock_logger.info.call_args[1]
        assert call_kwargs["completed_by"] == "u-1"
        assert call_kwargs["completed_at"] == event.completed_at.isoformat()

    @pytest.mark.asyncio
    async def test_task_reopened_logged(self, mock_logger):
        handler = LoggingEventHandler(logger=mock_logger)

        await handler.handle_task_reopened(_reopened(uuid4()))

        assert mock_logger.info.call_args[0][0] == "task_reopened"
        assert mock_logger.info.call_args[1]["reopened_by"] == "lead"

    @pytest.mark.asyncio
    async def test_escalation_logged_at_info(self, mock_logger):
        handler = LoggingEventHandler(logger=mock_logger)

        await handler.handle_task_priority_escalated(_escalated(uuid4()))

        mock_logger.warning.assert_not_called()
        call_kwargs = mock_logger.info.call_args[1]
        assert call_kwargs["old_priority"] == "low"
        assert call_kwargs["new_priority"] == "medium"

    @pytest.mark.asyncio
    async def test_escalation_to_critical_logged_at_warning(self, mock_logger):
        handler = LoggingEventHandler(logger=mock_logger)
        event = _escalated(uuid4(), TaskPriority.HIGH, TaskPriority.CRITICAL)

        await handler.handle_task_priority_escalated(event)

        mock_logger.info.assert_not_called()
        assert mock_logger.warning.call_args[0][0] == "task_priority_escalated"


@pytest.mark.unit
class TestNotificationEventHandler:
    """Test notification stub."""

    @pytest.mark.asyncio
    async def test_assignee_notified(self, mock_logger):
        # Arrange
        handler = NotificationEventHandler(logger=mock_logger)
        task_id = uuid4()

        # Act
        await handler.handle_task_assigned(_assigned(task_id, "u-7"))

        # Assert
        assert handler.sent == (
            Notification(
                template="task_assigned",
                task_id=task_id,
                recipient="u-7",
                message="You have been assigned a new task",
            ),
        )
        mock_logger.info.assert_called_once()
        assert mock_logger.info.call_args[0][0] == "notification_would_be_sent"
        assert mock_logger.info.call_args[1]["recipient"] == "u-7"

    @pytest.mark.asyncio
    async def test_completion_message(self, mock_logger):
        handler = NotificationEventHandler(logger=mock_logger)

        await handler.handle_task_completed(_completed(uuid4(), "u-3"))

        assert handler.sent[0].message == "Task completed by user u-3"

    @pytest.mark.asyncio
    async def test_reopen_message(self, mock_logger):
        handler = NotificationEventHandler(logger=mock_logger)

        await handler.handle_task_reopened(_reopened(uuid4(), "u-4"))

        assert handler.sent[0].message == "Task reopened by user u-4"

    @pytest.mark.asyncio
    async def test_escalation_alerts_stakeholders(self, mock_logger):
        handler = NotificationEventHandler(logger=mock_logger)

        await handler.handle_task_priority_escalated(
            _escalated(uuid4(), TaskPriority.MEDIUM, TaskPriority.HIGH)
        )

        notification = handler.sent[0]
        assert notification.recipient == "stakeholders"
        assert notification.message == "Task priority escalated from medium to high"

    @pytest.mark.asyncio
    async def test_notifications_kept_in_order(self, mock_logger):
        handler = NotificationEventHandler(logger=mock_logger)
        task_id = uuid4()

        await handler.handle_task_assigned(_assigned(task_id))
        await handler.handle_task_completed(_completed(task_id))

        assert [n.template for n in handler.sent] == [
            "task_assigned",
            "task_completed",
        ]


@pytest.mark.unit
class TestAnalyticsEventHandler:
    """Test in-process task metrics."""

    @pytest.mark.asyncio
    async def test_assignment_opens_task(self, mock_logger):
        handler = AnalyticsEventHandler(logger=mock_logger)
        task_id = uuid4()

        await handler.handle_task_assigned(_assigned(task_id, "u-1"))

        assert handler.open_tasks_for("u-1") == frozenset({task_id})
        assert handler.event_counts == {"TaskAssigned": 1}

    @pytest.mark.asyncio
    async def test_reassignment_moves_task(self, mock_logger):
        handler = AnalyticsEventHandler(logger=mock_logger)
        task_id = uuid4()

        await handler.handle_task_assigned(_assigned(task_id, "u-1"))
        await handler.handle_task_assigned(_assigned(task_id, "u-2"))

        assert handler.open_tasks_for("u-1") == frozenset()
        assert handler.open_tasks_for("u-2") == frozenset({task_id})

    @pytest.mark.asyncio
    async def test_complete_and_reopen_lifecycle(self, mock_logger):
        # Arrange
        handler = AnalyticsEventHandler(logger=mock_logger)
        task_id = uuid4()
        await handler.handle_task_assigned(_assigned(task_id, "u-1"))

        # Act & Assert
        await handler.handle_task_completed(_completed(task_id))
        assert handler.open_tasks_for("u-1") == frozenset()

        await handler.handle_task_reopened(_reopened(task_id))
        assert handler.open_tasks_for("u-1") == frozenset({task_id})

    @pytest.mark.asyncio
    async def test_unknown_task_completion_only_counted(self, mock_logger):
        handler = AnalyticsEventHandler(logger=mock_logger)

        await handler.handle_task_completed(_completed(uuid4()))
        await handler.handle_task_priority_escalated(_escalated(uuid4()))

        assert handler.event_counts == {
            "TaskCompleted": 1,
            "TaskPriorityEscalated": 1,
        }

    @pytest.mark.asyncio
    async def test_refresh_dashboard_counts(self, mock_logger):
        handler = AnalyticsEventHandler(logger=mock_logger)
        event = _completed(uuid4())

        await handler.refresh_dashboard(event)
        await handler.refresh_dashboard(event)

        assert handler.dashboard_refreshes == 2
        assert mock_logger.debug.call_args[0][0] == "dashboard_metrics_refreshed"
        assert mock_logger.debug.call_args[1]["refresh_count"] == 2
