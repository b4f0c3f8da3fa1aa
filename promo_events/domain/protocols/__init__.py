"""Domain protocols (ports).

Infrastructure adapters satisfy these structurally; nothing inherits from them.

Usage:
    from promo_events.domain.protocols import EventBusProtocol, LoggerProtocol
"""

from promo_events.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
)
from promo_events.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
]
