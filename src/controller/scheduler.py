"""
Deferred callbacks
----

The AI "thinks" for a fixed delay before its move gets played. The move itself must be made on the thread that owns the
game state, so instead of starting a thread that sleeps, the callback is scheduled on the event loop that drives the game.
"""

import asyncio
from typing import Callable, Protocol


class ScheduledCall(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Run a callback later, on the same thread that owns the game"""

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall: ...


class AsyncioScheduler:
    """Schedules on an asyncio event loop. The callback runs on the loop's own thread."""

    def __init__(self, loop: asyncio.AbstractEventLoop) -> None:
        self.loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        return self.loop.call_later(delay, callback)
