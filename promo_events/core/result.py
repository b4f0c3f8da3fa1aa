"""Result types for operations with expected failures.

Business rule violations (assigning a completed task, completing someone
else's task) are ordinary outcomes, not programming errors. Methods that can
hit them return a Result instead of raising.

Usage:
    result = task.complete(user_id)
    match result:
        case Success():
            await publish_pending_events(event_bus, task)
        case Failure(error=message):
            logger.info("task_not_completed", reason=message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Operation succeeded.

    Attributes:
        value: Produced value (None for pure state transitions).
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Operation refused.

    Attributes:
        error: Why it was refused.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
