from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, Union


logger = logging.getLogger("portfolio.scheduling")

ScheduledFn = Callable[[], Union[None, Awaitable[Any]]]


class DebouncedExecutor:
    """
    One pending call per executor. Scheduling again cancels the earlier
    pending call, so only the most recent trigger runs.
    """

    def __init__(self, name: str = "debounce"):
        self.name = name
        self._handle: Optional[asyncio.TimerHandle] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, fn: ScheduledFn, delay: float) -> None:
        loop = asyncio.get_running_loop()
        self.cancel()
        self._handle = loop.call_later(max(0.0, float(delay)), self._fire, fn)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, fn: ScheduledFn) -> None:
        self._handle = None
        try:
            result = fn()
        except Exception:
            logger.exception("debounced call failed | executor=%s", self.name)
            return
        if inspect.isawaitable(result):
            self._task = asyncio.ensure_future(result)
            self._task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: asyncio.Task) -> None:
        if self._task is task:
            self._task = None
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("debounced task failed | executor=%s err=%s", self.name, exc)


async def sleep_frame(delay: float = 0.0) -> None:
    """Yield to the loop once, the equivalent of waiting for the next frame."""
    await asyncio.sleep(max(0.0, float(delay)))
