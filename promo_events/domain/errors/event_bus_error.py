"""Event bus caller-contract errors.

Unlike handler failures (which the bus contains and logs), these are raised
at call time: routing an event under an empty or missing type would silently
misroute it.
"""

from typing import Any


class InvalidEventTypeError(ValueError):
    """Raised when an event type identifier is empty, missing, or not a string."""

    def __init__(self, event_type: Any) -> None:
        """Initialize invalid event type error.

        Args:
            event_type: The rejected event type value.
        """
        super().__init__(
            f"Event type must be a non-empty string, got {event_type!r}"
        )
        self.event_type = event_type
