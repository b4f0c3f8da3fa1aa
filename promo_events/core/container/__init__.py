"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from promo_events.core.container import get_event_bus, get_logger

The container is organized into modules by concern:
- infrastructure: Settings and logging
- events: Event bus, event handlers, and registry-driven subscriptions
"""

# Infrastructure services
from promo_events.core.container.infrastructure import get_logger, get_settings

# Event bus
from promo_events.core.container.events import (
    get_analytics_event_handler,
    get_event_bus,
    get_logging_event_handler,
    get_notification_event_handler,
)

__all__ = [
    # Infrastructure
    "get_settings",
    "get_logger",
    # Events
    "get_event_bus",
    "get_logging_event_handler",
    "get_notification_event_handler",
    "get_analytics_event_handler",
]
