"""Frame schedulers: the tick source that drives counter animations."""
from __future__ import annotations

import asyncio
import itertools
import time
from abc import ABC, abstractmethod
from typing import Any, Callable

FrameCallback = Callable[[], None]


class FrameScheduler(ABC):
    """Invokes a callback once on the next frame."""

    @abstractmethod
    def request_frame(self, callback: FrameCallback) -> Any:
        """Schedule ``callback`` for the next frame and return a cancellable handle."""

    @abstractmethod
    def cancel_frame(self, handle: Any) -> None:
        """Cancel a pending frame. Cancelling an already-fired handle is a no-op."""


class AsyncioFrameScheduler(FrameScheduler):
    """Fires frames on the running event loop at a fixed interval."""

    def __init__(self, interval_ms: float = 16, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._interval = interval_ms / 1000
        self._loop = loop

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        return self._loop or asyncio.get_running_loop()

    def request_frame(self, callback: FrameCallback) -> asyncio.TimerHandle:
        return self._get_loop().call_later(self._interval, callback)

    def cancel_frame(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()


class BlockingFrameScheduler(FrameScheduler):
    """Synchronous frame loop for environments without an event loop (Streamlit, CLI).

    Callbacks queue up until :meth:`run` is called; ``run`` then sleeps one
    interval per frame and fires everything pending until nothing is left.
    """

    def __init__(self, interval_ms: float = 16, sleep: Callable[[float], None] = time.sleep) -> None:
        self._interval = interval_ms / 1000
        self._sleep = sleep
        self._ids = itertools.count(1)
        self._pending: dict[int, FrameCallback] = {}

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request_frame(self, callback: FrameCallback) -> int:
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def run_frame(self) -> int:
        """Fire every callback pending at the start of this frame; return how many ran."""
        due = list(self._pending.items())
        self._pending.clear()
        for _, callback in due:
            callback()
        return len(due)

    def run(self, max_frames: int | None = None) -> int:
        frames = 0
        while self._pending and (max_frames is None or frames < max_frames):
            self._sleep(self._interval)
            self.run_frame()
            frames += 1
        return frames
