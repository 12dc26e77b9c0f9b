"""Restartable one-shot timer on the asyncio event loop."""

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)


class DebounceTimer:
    """One-shot timer with at most one pending firing.

    ``restart`` cancels whatever is pending and schedules a fresh firing
    ``delay`` seconds from now, so a burst of restarts fires once, after the
    last one. Coroutine callbacks are run as tasks on the same loop.

    Attributes:
        delay: Seconds between the last restart and the firing.
    """

    def __init__(
        self,
        delay: float,
        callback: Callable[[], Awaitable[Any] | Any],
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self.delay = delay
        self._callback = callback
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None
        self._task: asyncio.Task | None = None

    @property
    def pending(self) -> bool:
        """Whether a firing is scheduled and not yet run or cancelled."""
        return self._handle is not None

    def restart(self) -> None:
        """Cancel any pending firing and schedule a new one."""
        self.cancel()
        loop = self._loop or asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        """Cancel the pending firing, if any. Already-running callbacks continue."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        result = self._callback()
        if inspect.isawaitable(result):
            self._task = asyncio.ensure_future(result)
            self._task.add_done_callback(self._log_failure)

    @staticmethod
    def _log_failure(task: asyncio.Task) -> None:
        if not task.cancelled() and task.exception() is not None:
            logger.error(f"Debounced callback failed: {task.exception()!r}")
