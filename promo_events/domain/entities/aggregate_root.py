"""Aggregate root base class.

Aggregates record domain events as their state changes and hand them over
exactly once, after the change has been persisted, via pull_domain_events().
Publishing is the caller's job (see application.services.event_publishing).

Usage:
    >>> class Task(AggregateRoot):
    ...     def complete(self, user_id: str) -> None:
    ...         self.status = "done"
    ...         self._record_event(TaskCompleted(...))
    >>>
    >>> task.complete("user-123")
    >>> await repository.save(task)
    >>> await publish_pending_events(event_bus, task)
"""

from promo_events.domain.events.base_event import DomainEvent


class AggregateRoot:
    """Base class for entities that emit domain events.

    Attributes:
        _domain_events: Events recorded since the last pull (oldest first).
    """

    def __init__(self) -> None:
        self._domain_events: list[DomainEvent] = []

    @property
    def pending_events(self) -> tuple[DomainEvent, ...]:
        """Recorded events not yet pulled (read-only view)."""
        return tuple(self._domain_events)

    def pull_domain_events(self) -> list[DomainEvent]:
        """Return recorded events in order and clear them.

        Returns:
            Events recorded since the previous pull. A second call without new
            state changes returns an empty list.
        """
        events = list(self._domain_events)
        self._domain_events.clear()
        return events

    def _record_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)
