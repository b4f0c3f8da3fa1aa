"""In-process domain event publisher for the promotions platform.

Producers publish immutable domain events; consumers subscribe handlers
that react to them (view updates, notifications, analytics, auditing).

Structure:
- core/: Settings, enums, and the composition root (container)
- domain/: Events, protocols (ports), errors, aggregates
- application/: Publishing services used by use cases
- infrastructure/: In-memory event bus, event handlers, logging adapter
"""

__version__ = "0.1.0"
