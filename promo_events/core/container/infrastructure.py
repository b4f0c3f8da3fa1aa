"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Settings (pydantic-settings)
- Logging (structlog console adapter)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from promo_events.core.config import Settings, get_settings

if TYPE_CHECKING:
    from promo_events.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["get_logger", "get_settings", "Settings"]


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development/production: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)

    Level comes from settings.log_level, forced to DEBUG when settings.debug
    is set. Settings are read through get_settings(), so clearing its cache
    together with this one rebuilds the logger from the current environment.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from promo_events.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    env = (
        settings.environment.value
        if hasattr(settings.environment, "value")
        else str(settings.environment)
    )
    level = "DEBUG" if settings.debug else settings.log_level

    return ConsoleAdapter(use_json=env in {"testing", "ci"}, level=level)
