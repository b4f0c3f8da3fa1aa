"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Configures all
event handlers and subscriptions at startup using registry-driven
auto-wiring (EVENT_REGISTRY).
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from promo_events.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from promo_events.domain.protocols.event_bus_protocol import EventBusProtocol
    from promo_events.infrastructure.events.handlers import (
        AnalyticsEventHandler,
        LoggingEventHandler,
        NotificationEventHandler,
    )


@lru_cache()
def get_logging_event_handler() -> "LoggingEventHandler":
    """Get logging event handler singleton (app-scoped)."""
    from promo_events.infrastructure.events.handlers import LoggingEventHandler

    return LoggingEventHandler(logger=get_logger())


@lru_cache()
def get_notification_event_handler() -> "NotificationEventHandler":
    """Get notification event handler singleton (app-scoped)."""
    from promo_events.infrastructure.events.handlers import NotificationEventHandler

    return NotificationEventHandler(logger=get_logger())


@lru_cache()
def get_analytics_event_handler() -> "AnalyticsEventHandler":
    """Get analytics event handler singleton (app-scoped)."""
    from promo_events.infrastructure.events.handlers import AnalyticsEventHandler

    return AnalyticsEventHandler(logger=get_logger())


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Container owns factory logic - decides which adapter based on
    settings.event_bus_type:
        - 'in-memory': InMemoryEventBus (single process)

    Event handlers are AUTOMATICALLY registered at startup using
    EVENT_REGISTRY. For each entry this factory:
        1. Computes the handler method name (handle_<workflow_name>)
        2. Subscribes that method on every handler the metadata requires
        3. Subscribes AnalyticsEventHandler.refresh_dashboard when
           metadata.refreshes_dashboard is set

    Strict mode (settings.events_strict_mode) raises RuntimeError when a
    required handler method is missing; otherwise the gap is logged and
    wiring continues.

    Returns:
        Event bus implementing EventBusProtocol.

    Raises:
        ValueError: If settings.event_bus_type is unsupported.
        RuntimeError: If a handler method is missing in strict mode.

    Usage:
        event_bus = get_event_bus()
        subscription = event_bus.subscribe("TaskCompleted", on_completed)
        await event_bus.publish(TaskCompleted(...))
    """
    from promo_events.core.config import get_settings
    from promo_events.domain.events.registry import EVENT_REGISTRY
    from promo_events.infrastructure.events.in_memory_event_bus import (
        InMemoryEventBus,
    )

    settings = get_settings()
    logger = get_logger()

    if settings.event_bus_type == "in-memory":
        event_bus = InMemoryEventBus(
            logger=logger,
            dispatch_mode=settings.event_dispatch_mode,
        )
    else:
        raise ValueError(
            f"Unsupported EVENT_BUS_TYPE: {settings.event_bus_type}. "
            f"Supported: 'in-memory'"
        )

    handlers = {
        "logging": get_logging_event_handler(),
        "notification": get_notification_event_handler(),
        "analytics": get_analytics_event_handler(),
    }

    for metadata in EVENT_REGISTRY:
        event_class = metadata.event_class
        method_name = metadata.handler_method_name

        for handler_type, handler in handlers.items():
            if not getattr(metadata, f"requires_{handler_type}"):
                continue

            handler_method = getattr(handler, method_name, None)
            if handler_method is None:
                if settings.events_strict_mode:
                    raise RuntimeError(
                        f"EVENTS_STRICT_MODE: Missing required {handler_type} handler\n"
                        f"Event: {event_class.__name__}\n"
                        f"Expected method: {type(handler).__name__}.{method_name}\n\n"
                        f"Fix: Implement the handler method, or set "
                        f"EVENTS_STRICT_MODE=false"
                    )
                logger.warning(
                    "Missing event handler (graceful mode)",
                    event_class=event_class.__name__,
                    handler_type=handler_type,
                    handler_method=method_name,
                )
                continue

            event_bus.subscribe(event_class, handler_method)

        if metadata.refreshes_dashboard:
            event_bus.subscribe(event_class, handlers["analytics"].refresh_dashboard)

    return event_bus
