"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from promo_events.core.enums import DispatchMode, Environment
"""

from promo_events.core.enums.dispatch_mode import DispatchMode
from promo_events.core.enums.environment import Environment

__all__ = ["DispatchMode", "Environment"]
