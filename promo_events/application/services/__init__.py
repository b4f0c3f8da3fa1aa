"""Application services.

Usage:
    from promo_events.application.services import publish_pending_events
"""

from promo_events.application.services.event_publishing import (
    publish_domain_events,
    publish_pending_events,
)

__all__ = ["publish_domain_events", "publish_pending_events"]
