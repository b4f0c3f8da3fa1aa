"""Structured logging adapters.

Usage:
    from promo_events.infrastructure.logging import ConsoleAdapter
"""

from promo_events.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
