"""Subscription tokens returned by the event bus.

A Subscription identifies exactly one registration of a handler under an event
type. Registering the same handler twice yields two tokens with distinct
subscription ids, and each token removes only its own registration.

The token doubles as the unsubscribe action: calling it (or its unsubscribe()
method) asks the owning bus to drop the registration. The first successful
call returns True; later calls find nothing and return False without raising.

Usage:
    >>> subscription = event_bus.subscribe("OrderPlaced", send_receipt)
    >>> ...
    >>> subscription()          # teardown
    >>> subscription()          # no-op
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from promo_events.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[DomainEvent], Awaitable[Any] | None]
"""Type alias for event handler callables.

Event handlers:
    - Accept a single DomainEvent parameter (or specific event subclass)
    - Return None (sync) or an awaitable (async def); results are ignored
    - May raise: the bus logs the failure and continues with the next handler

Example:
    >>> async def send_receipt(event: DomainEvent) -> None:
    ...     await mailer.send(...)
    >>>
    >>> def refresh_view(event: DomainEvent) -> None:
    ...     view.invalidate()
"""


@dataclass(frozen=True, slots=True, kw_only=True)
class Subscription:
    """Handle for one handler registration.

    Attributes:
        event_type: Event type the handler is registered under.
        subscription_id: Unique id of this registration.
        handler: The registered handler.
        release: Callback into the owning bus that removes this registration.
    """

    event_type: str
    subscription_id: UUID
    handler: EventHandler = field(compare=False)
    release: Callable[["Subscription"], bool] = field(repr=False, compare=False)

    def unsubscribe(self) -> bool:
        """Remove this registration from the owning bus.

        Returns:
            True if the registration was removed by this call, False if it was
            already gone.
        """
        return self.release(self)

    def __call__(self) -> None:
        """Zero-argument unsubscribe action (idempotent)."""
        self.unsubscribe()
