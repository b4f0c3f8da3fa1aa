"""LoggerProtocol definition for structured logging.

The event bus reports handler failures through this protocol; it is the
publisher's diagnostic channel. Implementations MUST keep logs structured
(message + key-value context).

Log Levels:
    - DEBUG: Dispatch details (event_publishing)
    - INFO: Normal domain activity (task_assigned, notification_queued)
    - WARNING: Contained failures (event_handler_failed)
    - ERROR / CRITICAL: Failures the process cannot absorb

Context Binding:
    bind() / with_context() return a new logger whose context is included in
    every subsequent call. The receiving logger is unchanged.

Usage:
    from promo_events.core.container import get_logger

    logger = get_logger()
    logger.info("task_completed", task_id=str(task_id))

    handler_logger = logger.bind(handler="notification")
    handler_logger.info("notification_queued")  # handler auto-included
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls are structured: a snake_case message plus keyword
    context. error() and critical() accept an optional exception whose type
    and message the adapter adds to the context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message.

        Args:
            message: Event-style message (e.g., "event_handler_failed").
            **context: Structured key-value context fields. May include
                exc_info to attach a traceback.
        """
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details."""
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> "LoggerProtocol":
        """Alias for bind()."""
        ...
