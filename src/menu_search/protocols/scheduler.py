"""Delayed-callback scheduler protocol.

The search session debounces input by scheduling a single delayed search
and cancelling it when more input arrives. Anything that can run a callback
later and cancel it synchronously can drive the session:

- asyncio event loops (``loop.call_later``)
- a manual virtual clock in tests
- a GUI toolkit's timer API
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class ScheduledHandle(Protocol):
    """Handle to a scheduled callback."""

    def cancel(self) -> None:
        """Cancel the callback.

        Must take effect immediately: once cancel() returns, the callback
        never runs. Cancelling an already fired or cancelled handle is a
        no-op.
        """
        ...


@runtime_checkable
class Scheduler(Protocol):
    """Protocol for schedulers of delayed callbacks.

    Example:
        ```python
        scheduler: Scheduler = AsyncioScheduler()
        handle = scheduler.call_later(0.28, run_search)
        handle.cancel()
        ```
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledHandle:
        """Run ``callback`` once after ``delay`` seconds.

        Args:
            delay: Delay in seconds
            callback: Zero-argument callable

        Returns:
            A handle that can cancel the callback
        """
        ...
