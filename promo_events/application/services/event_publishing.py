"""Publishing helpers for use cases.

Use cases change aggregates, persist them, and only then publish what the
aggregates recorded (facts, not intents). Events of one batch are published
strictly one after another: each publish call completes, with all of its
handlers settled, before the next event is published.

Usage:
    >>> task.complete(user_id)
    >>> await task_repository.save(task)
    >>> await publish_pending_events(event_bus, task)
"""

from collections.abc import Iterable

from promo_events.domain.entities.aggregate_root import AggregateRoot
from promo_events.domain.events.base_event import DomainEvent
from promo_events.domain.protocols.event_bus_protocol import EventBusProtocol


async def publish_domain_events(
    event_bus: EventBusProtocol,
    events: Iterable[DomainEvent],
) -> int:
    """Publish events in order, awaiting each publish before the next.

    Args:
        event_bus: Event bus to publish to.
        events: Events to publish, oldest first.

    Returns:
        Number of events published.
    """
    published = 0
    for event in events:
        await event_bus.publish(event)
        published += 1
    return published


async def publish_pending_events(
    event_bus: EventBusProtocol,
    aggregate: AggregateRoot,
) -> int:
    """Pull the aggregate's recorded events and publish them in order.

    Args:
        event_bus: Event bus to publish to.
        aggregate: Aggregate whose pending events are released.

    Returns:
        Number of events published (0 when nothing was pending).
    """
    return await publish_domain_events(event_bus, aggregate.pull_domain_events())
