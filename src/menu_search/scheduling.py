"""Scheduler implementations for the search session.

Both classes satisfy the Scheduler protocol through structural typing.
"""

import asyncio
import heapq
from collections.abc import Callable


class AsyncioScheduler:
    """Schedules callbacks on an asyncio event loop.

    ``asyncio.TimerHandle.cancel()`` is synchronous, so cancelling the
    pending search and scheduling its replacement inside one handler call
    never leaves two live timers.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """Initialize the scheduler.

        Args:
            loop: Event loop to schedule on. If None, the running loop at
                  call time is used.
        """
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        """Run ``callback`` after ``delay`` seconds on the event loop."""
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


class ManualHandle:
    """Handle returned by ManualScheduler."""

    def __init__(self, when: float, callback: Callable[[], None]) -> None:
        self.when = when
        self._callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        """Cancel the callback if it has not fired yet."""
        self.cancelled = True

    def _run(self) -> None:
        self.fired = True
        self._callback()


class ManualScheduler:
    """Deterministic virtual-clock scheduler.

    Time only moves when ``advance()`` is called, which makes debounce
    behaviour reproducible in tests and in headless hosts.

    Example:
        ```python
        scheduler = ManualScheduler()
        scheduler.call_later(0.28, run_search)
        scheduler.advance(0.28)  # run_search() fires here
        ```
    """

    def __init__(self) -> None:
        """Initialize the clock at t=0."""
        self._now = 0.0
        self._seq = 0
        self._queue: list[tuple[float, int, ManualHandle]] = []

    @property
    def now(self) -> float:
        """Get the current virtual time in seconds."""
        return self._now

    @property
    def pending(self) -> int:
        """Get the number of callbacks still waiting to fire."""
        return sum(1 for _, _, handle in self._queue if not handle.cancelled)

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualHandle:
        """Schedule ``callback`` at now + ``delay``."""
        handle = ManualHandle(self._now + delay, callback)
        self._seq += 1
        heapq.heappush(self._queue, (handle.when, self._seq, handle))
        return handle

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing every callback that comes due.

        Callbacks fire in due-time order, with the clock set to their due
        time while they run. Callbacks scheduled by a firing callback fire
        in the same call if they fall inside the window.

        Args:
            seconds: How far to move the clock

        Returns:
            Number of callbacks fired
        """
        target = self._now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            when, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self._now = when
            handle._run()
            fired += 1
        self._now = target
        return fired
