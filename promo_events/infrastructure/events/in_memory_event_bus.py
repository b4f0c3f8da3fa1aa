"""In-memory event bus implementation.

This module implements the EventBusProtocol using an in-memory dictionary-based
registry. Suitable for single-process deployments: there is no persistence,
no delivery guarantee beyond "every handler registered when dispatch began is
called once per registration", and no cross-process delivery.

Architecture:
    - Implements EventBusProtocol (hexagonal adapter pattern)
    - Dictionary-based registry (event_type → ordered list of Subscriptions)
    - Fail-open behavior (one handler failure doesn't break others)
    - Sequential handler execution in registration order (default)
    - Opt-in concurrent execution (asyncio.gather) via DispatchMode.CONCURRENT
    - Handler list snapshotted when dispatch begins

Usage:
    >>> # Container creates singleton instance
    >>> @lru_cache()
    >>> def get_event_bus() -> EventBusProtocol:
    ...     return InMemoryEventBus(logger=get_logger())
    >>>
    >>> # Application layer uses protocol
    >>> event_bus = get_event_bus()
    >>> subscription = event_bus.subscribe("TaskCompleted", refresh_dashboard)
    >>> await event_bus.publish(TaskCompleted(...))
    >>> subscription()  # unsubscribe
"""

import asyncio
import inspect
from collections import defaultdict
from typing import Any

from uuid_extensions import uuid7

from promo_events.core.enums import DispatchMode
from promo_events.domain.errors import InvalidEventTypeError
from promo_events.domain.events.base_event import DomainEvent
from promo_events.domain.events.subscription import EventHandler, Subscription
from promo_events.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Implements EventBusProtocol using a dictionary-based registry owned
    exclusively by this instance.

    Thread Safety:
        - NOT thread-safe (single-threaded asyncio design)
        - Safe against re-entrant mutation: handlers may subscribe and
          unsubscribe (including themselves) while a publish is running

    Attributes:
        _subscriptions: Dictionary mapping event type names to Subscriptions
            in registration order. Duplicated handlers appear once per
            registration.
        _logger: Diagnostic channel for handler failures and publishing.
        _dispatch_mode: How handlers of one publish call are run.

    Example:
        >>> bus = InMemoryEventBus(logger=logger)
        >>> bus.subscribe("TaskCompleted", log_completion)
        >>> bus.subscribe("TaskCompleted", notify_watchers)
        >>>
        >>> # log_completion runs (and finishes) before notify_watchers starts.
        >>> # If log_completion raises, notify_watchers still runs.
        >>> await bus.publish(TaskCompleted(...))

    Design Decisions:
        - **Fail-open**: Handler failures logged but not propagated
        - **Sequential by default**: Predictable ordering over throughput
        - **Snapshot dispatch**: Mutations apply from the next publish
        - **Tokens**: Unsubscribe by subscription id, never by handler equality
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        dispatch_mode: DispatchMode = DispatchMode.SEQUENTIAL,
    ) -> None:
        """Initialize event bus with logger.

        Args:
            logger: Logger for handler failures (warning level) and event
                publishing (debug level).
            dispatch_mode: SEQUENTIAL (default) or CONCURRENT.
        """
        self._subscriptions: dict[str, list[Subscription]] = defaultdict(list)
        self._logger = logger
        self._dispatch_mode = DispatchMode(dispatch_mode)

    @property
    def dispatch_mode(self) -> DispatchMode:
        """Dispatch mode used by publish()."""
        return self._dispatch_mode

    @property
    def subscription_count(self) -> int:
        """Total number of live registrations across all event types."""
        return sum(len(subs) for subs in self._subscriptions.values())

    def handlers_for(
        self, event_type: str | type[DomainEvent]
    ) -> tuple[EventHandler, ...]:
        """Return the handlers currently registered for event_type.

        Args:
            event_type: Event type name or event class.

        Returns:
            Handlers in registration order (snapshot; later mutation of the
            bus does not affect it).
        """
        key = self._resolve_event_type(event_type)
        return tuple(sub.handler for sub in self._subscriptions.get(key, ()))

    def subscribe(
        self,
        event_type: str | type[DomainEvent],
        handler: EventHandler,
    ) -> Subscription:
        """Register event handler for specific event type.

        Args:
            event_type: Event type name (exact match, no wildcards) or an
                event class whose EVENT_TYPE is used.
            handler: Sync or async callable taking the event.

        Returns:
            Subscription token. Calling it removes exactly this registration.

        Raises:
            InvalidEventTypeError: If event_type is empty or not a string.
            TypeError: If handler is not callable.

        Notes:
            - No duplicate detection (same handler can be registered twice)
            - Takes effect for the next publish, not one already running
        """
        key = self._resolve_event_type(event_type)
        if not callable(handler):
            raise TypeError(f"Event handler must be callable, got {handler!r}")

        subscription = Subscription(
            event_type=key,
            subscription_id=uuid7(),
            handler=handler,
            release=self.unsubscribe,
        )
        self._subscriptions[key].append(subscription)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> bool:
        """Remove the registration identified by subscription.

        Args:
            subscription: Token returned by subscribe().

        Returns:
            True if the registration was removed, False if it was not present
            (already removed, or issued by another bus).
        """
        registrations = self._subscriptions.get(subscription.event_type)
        if not registrations:
            return False

        for index, registered in enumerate(registrations):
            if registered.subscription_id == subscription.subscription_id:
                del registrations[index]
                if not registrations:
                    del self._subscriptions[subscription.event_type]
                return True
        return False

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Handler exceptions are logged but NOT propagated to the publisher.
        If no handlers are registered, this is a no-op (not an error).

        Args:
            event: Domain event to publish. Every handler registered under
                event.event_type when this call starts will be called.

        Raises:
            InvalidEventTypeError: If the event has no usable event_type.

        Flow:
            1. Resolve event.event_type
            2. Snapshot handlers for that type (return if none)
            3. Run handlers (sequentially, or gathered in CONCURRENT mode)
            4. Log any handler exceptions (warning level)
            5. Return once every handler has settled (never raise)
        """
        event_type = self._resolve_event_type(getattr(event, "event_type", None))
        handlers = tuple(sub.handler for sub in self._subscriptions.get(event_type, ()))

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type,
            event_id=str(getattr(event, "event_id", "")),
            handler_count=len(handlers),
            dispatch_mode=self._dispatch_mode.value,
        )

        if self._dispatch_mode is DispatchMode.CONCURRENT:
            await asyncio.gather(
                *(self._invoke(handler, event, event_type) for handler in handlers)
            )
        else:
            for handler in handlers:
                await self._invoke(handler, event, event_type)

    async def _invoke(
        self, handler: EventHandler, event: DomainEvent, event_type: str
    ) -> None:
        try:
            result = handler(event)
            if inspect.isawaitable(result):
                await result
        except Exception as error:
            self._report_failure(handler, event, event_type, error)

    def _report_failure(
        self,
        handler: EventHandler,
        event: DomainEvent,
        event_type: str,
        error: Exception,
    ) -> None:
        """Log a handler failure without letting the report itself escape.

        Exceptions with a broken __str__, handlers with a broken __repr__ and
        a failing logger must not abort dispatch of the remaining handlers.
        """
        try:
            self._logger.warning(
                "event_handler_failed",
                event_type=event_type,
                event_id=_safe_str(getattr(event, "event_id", "")),
                handler_name=_handler_name(handler),
                error_type=type(error).__name__,
                error_message=_safe_str(error),
                exc_info=error,
            )
        except Exception as report_error:
            # Retry once with plain, pre-rendered fields and no traceback
            try:
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type,
                    handler_name=_handler_name(handler),
                    error_type=type(error).__name__,
                    report_error_type=type(report_error).__name__,
                )
            except Exception:
                # publish never raises on behalf of a handler
                pass

    @staticmethod
    def _resolve_event_type(event_type: Any) -> str:
        if isinstance(event_type, type) and issubclass(event_type, DomainEvent):
            event_type = event_type.EVENT_TYPE
        if not isinstance(event_type, str) or not event_type.strip():
            raise InvalidEventTypeError(event_type)
        return event_type


def _handler_name(handler: EventHandler) -> str:
    try:
        name = getattr(handler, "__name__", None)
    except Exception:
        name = None
    return name if isinstance(name, str) else _safe_repr(handler)


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return _safe_repr(value)


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"
