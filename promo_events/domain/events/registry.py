"""Domain Events Registry - Single Source of Truth.

This registry catalogs ALL domain events in the system with their metadata.
Used for:
- Container wiring (automated subscription)
- Validation tests (verify no drift between events and handlers)

Architecture:
- Domain layer (no dependencies on infrastructure)
- Imported by container for automated wiring

Adding new events:
1. Define event dataclass in the appropriate *_events.py file
2. Add entry to EVENT_REGISTRY below
3. Implement handle_<workflow_name> on every handler the metadata requires
"""

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Type

from promo_events.domain.events.base_event import DomainEvent
from promo_events.domain.events.task_events import (
    TaskAssigned,
    TaskCompleted,
    TaskPriorityEscalated,
    TaskReopened,
)


class EventCategory(Enum):
    """Event categories for organization and filtering."""

    ASSIGNMENT = "assignment"
    LIFECYCLE = "lifecycle"
    PRIORITY = "priority"


@dataclass(frozen=True)
class EventMetadata:
    """Metadata for a domain event.

    Attributes:
        event_class: The event dataclass.
        category: Event category.
        workflow_name: Name used to compute handler methods
            (handle_<workflow_name>).
        requires_logging: LoggingEventHandler handles this event.
        requires_notification: NotificationEventHandler handles this event.
        requires_analytics: AnalyticsEventHandler handles this event.
        refreshes_dashboard: AnalyticsEventHandler.refresh_dashboard also runs.
    """

    event_class: Type[DomainEvent]
    category: EventCategory
    workflow_name: str
    requires_logging: bool = True  # Default: all events logged
    requires_notification: bool = True
    requires_analytics: bool = True
    refreshes_dashboard: bool = False

    @property
    def event_type(self) -> str:
        """Routing key of the event class."""
        return self.event_class.EVENT_TYPE

    @property
    def handler_method_name(self) -> str:
        """Handler method expected on every required handler."""
        return f"handle_{self.workflow_name}"


# ═══════════════════════════════════════════════════════════════
# EVENT REGISTRY - Single Source of Truth
# ═══════════════════════════════════════════════════════════════

EVENT_REGISTRY: list[EventMetadata] = [
    EventMetadata(
        event_class=TaskAssigned,
        category=EventCategory.ASSIGNMENT,
        workflow_name="task_assigned",
    ),
    EventMetadata(
        event_class=TaskCompleted,
        category=EventCategory.LIFECYCLE,
        workflow_name="task_completed",
        refreshes_dashboard=True,  # Secondary handler: dashboard metrics
    ),
    EventMetadata(
        event_class=TaskReopened,
        category=EventCategory.LIFECYCLE,
        workflow_name="task_reopened",
    ),
    EventMetadata(
        event_class=TaskPriorityEscalated,
        category=EventCategory.PRIORITY,
        workflow_name="task_priority_escalated",
    ),
]


# ═══════════════════════════════════════════════════════════════
# Computed Views (for validation and introspection)
# ═══════════════════════════════════════════════════════════════


def get_all_events() -> list[Type[DomainEvent]]:
    """Get all registered event classes.

    Returns:
        List of event classes in registry.
    """
    return [meta.event_class for meta in EVENT_REGISTRY]


def get_events_requiring_handler(handler_type: str) -> list[Type[DomainEvent]]:
    """Get events requiring specific handler.

    Args:
        handler_type: "logging", "notification", or "analytics"

    Returns:
        List of event classes requiring that handler.

    Raises:
        ValueError: If handler_type is invalid.
    """
    field_map = {
        "logging": "requires_logging",
        "notification": "requires_notification",
        "analytics": "requires_analytics",
    }

    if handler_type not in field_map:
        raise ValueError(
            f"Invalid handler_type: {handler_type}. "
            f"Must be one of: {list(field_map.keys())}"
        )

    field = field_map[handler_type]
    return [meta.event_class for meta in EVENT_REGISTRY if getattr(meta, field)]


def get_statistics() -> dict[str, int | dict[str, int]]:
    """Get registry statistics.

    Returns:
        Dict with counts by category and handler requirements.
    """
    return {
        "total_events": len(EVENT_REGISTRY),
        "by_category": dict(Counter(meta.category.value for meta in EVENT_REGISTRY)),
        "requiring_logging": sum(1 for m in EVENT_REGISTRY if m.requires_logging),
        "requiring_notification": sum(
            1 for m in EVENT_REGISTRY if m.requires_notification
        ),
        "requiring_analytics": sum(1 for m in EVENT_REGISTRY if m.requires_analytics),
        "refreshing_dashboard": sum(
            1 for m in EVENT_REGISTRY if m.refreshes_dashboard
        ),
    }
