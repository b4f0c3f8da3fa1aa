"""Analytics event handler for domain events.

Keeps in-process task metrics up to date:
    - Event counts per event type
    - Open task list per assignee (assigned → completed → reopened)
    - Dashboard refresh counter (secondary TaskCompleted subscriber)

Metrics live in memory for the lifetime of the handler; exporting them is
outside this module.

Usage:
    >>> analytics_handler = AnalyticsEventHandler(logger=get_logger())
    >>> event_bus.subscribe(TaskCompleted, analytics_handler.handle_task_completed)
    >>> event_bus.subscribe(TaskCompleted, analytics_handler.refresh_dashboard)
"""

from collections import Counter, defaultdict
from uuid import UUID

from promo_events.domain.events.base_event import DomainEvent
from promo_events.domain.events.task_events import (
    TaskAssigned,
    TaskCompleted,
    TaskPriorityEscalated,
    TaskReopened,
)
from promo_events.domain.protocols.logger_protocol import LoggerProtocol


class AnalyticsEventHandler:
    """Event handler that aggregates task metrics.

    Attributes:
        _logger: Logger protocol implementation (from container).
        _event_counts: Events seen per event type.
        _assignees: Current assignee per task.
        _open_tasks: Open task ids per assignee.
        _dashboard_refreshes: Number of dashboard refreshes triggered.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger
        self._event_counts: Counter[str] = Counter()
        self._assignees: dict[UUID, str] = {}
        self._open_tasks: defaultdict[str, set[UUID]] = defaultdict(set)
        self._dashboard_refreshes = 0

    @property
    def event_counts(self) -> dict[str, int]:
        """Events seen per event type."""
        return dict(self._event_counts)

    @property
    def dashboard_refreshes(self) -> int:
        """Number of dashboard refreshes triggered."""
        return self._dashboard_refreshes

    def open_tasks_for(self, user_id: str) -> frozenset[UUID]:
        """Open tasks currently assigned to user_id."""
        return frozenset(self._open_tasks.get(user_id, ()))

    async def handle_task_assigned(self, event: TaskAssigned) -> None:
        """Move the task onto the assignee's open list."""
        self._track(event)
        previous = self._assignees.get(event.task_id)
        if previous is not None:
            self._open_tasks[previous].discard(event.task_id)
        self._assignees[event.task_id] = event.assigned_to
        self._open_tasks[event.assigned_to].add(event.task_id)

    async def handle_task_completed(self, event: TaskCompleted) -> None:
        """Remove the task from its assignee's open list."""
        self._track(event)
        assignee = self._assignees.get(event.task_id)
        if assignee is not None:
            self._open_tasks[assignee].discard(event.task_id)

    async def handle_task_reopened(self, event: TaskReopened) -> None:
        """Put the task back on its assignee's open list."""
        self._track(event)
        assignee = self._assignees.get(event.task_id)
        if assignee is not None:
            self._open_tasks[assignee].add(event.task_id)

    async def handle_task_priority_escalated(
        self,
        event: TaskPriorityEscalated,
    ) -> None:
        """Count the escalation."""
        self._track(event)

    async def refresh_dashboard(self, event: DomainEvent) -> None:
        """Secondary subscriber: refresh dashboard metrics."""
        self._dashboard_refreshes += 1
        self._logger.debug(
            "dashboard_metrics_refreshed",
            event_type=event.event_type,
            event_id=str(event.event_id),
            refresh_count=self._dashboard_refreshes,
        )

    def _track(self, event: DomainEvent) -> None:
        self._event_counts[event.event_type] += 1
        self._logger.debug(
            "analytics_event_recorded",
            event_type=event.event_type,
            event_id=str(event.event_id),
            total=self._event_counts[event.event_type],
        )
