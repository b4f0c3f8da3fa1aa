"""Handler dispatch modes for the event bus.

Modes:
- SEQUENTIAL: Handlers run one after another in registration order. Each
  handler (including its awaited completion) finishes before the next starts.
- CONCURRENT: All handlers start together and are joined with asyncio.gather.
  Opt-in only; execution order between handlers is undefined.
"""

from enum import Enum


class DispatchMode(str, Enum):
    """How InMemoryEventBus runs the handlers of a single publish call."""

    SEQUENTIAL = "sequential"
    CONCURRENT = "concurrent"
