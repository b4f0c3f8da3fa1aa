"""Unit tests for publishing helpers.

Tests cover:
- Events published in order, each publish awaited before the next
- Aggregate pending events pulled exactly once
- Empty batches
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from promo_events.application.services import (
    publish_domain_events,
    publish_pending_events,
)
from promo_events.domain.entities import Task
from promo_events.domain.events import NamedEvent, TaskAssigned


@pytest.mark.unit
class TestPublishDomainEvents:
    """Test publish_domain_events()."""

    @pytest.mark.asyncio
    async def test_publishes_in_order(self):
        # Arrange
        event_bus = MagicMock()
        event_bus.publish = AsyncMock()
        events = [NamedEvent(name="First"), NamedEvent(name="Second")]

        # Act
        count = await publish_domain_events(event_bus, events)

        # Assert
        assert count == 2
        assert [c.args[0] for c in event_bus.publish.await_args_list] == events

    @pytest.mark.asyncio
    async def test_each_publish_settles_before_next(self, event_bus):
        # Arrange
        trace = []

        async def slow_first(event):
            trace.append("first:start")
            await asyncio.sleep(0.01)
            trace.append("first:end")

        event_bus.subscribe("First", slow_first)
        event_bus.subscribe("Second", lambda e: trace.append("second"))

        # Act
        await publish_domain_events(
            event_bus, [NamedEvent(name="First"), NamedEvent(name="Second")]
        )

        # Assert
        assert trace == ["first:start", "first:end", "second"]

    async def test_empty_batch(self):
        event_bus = MagicMock()
        event_bus.publish = AsyncMock()

        assert await publish_domain_events(event_bus, []) == 0
        event_bus.publish.assert_not_awaited()


@pytest.mark.unit
class TestPublishPendingEvents:
    """Test publish_pending_events()."""

    @pytest.mark.asyncio
    async def test_pending_events_published_once(self, event_bus):
        # Arrange
        received = []
        event_bus.subscribe(TaskAssigned, lambda e: received.append(e.assigned_to))
        task = Task(title="Review spring promotion")
        task.assign_to("u-1", assigned_by="lead")
        task.assign_to("u-2", assigned_by="lead")

        # Act
        first = await publish_pending_events(event_bus, task)
        second = await publish_pending_events(event_bus, task)

        # Assert
        assert first == 2
        assert second == 0
        assert received == ["u-1", "u-2"]
        assert task.pending_events == ()
