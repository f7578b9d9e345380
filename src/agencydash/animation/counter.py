"""Animated numeric counter.

Interpolates the displayed value from 0 to a target over a fixed duration,
one step per frame, and always finishes on exactly the target.
"""
from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import Any, Callable

from agencydash.animation.schedulers import FrameScheduler

logger = logging.getLogger(__name__)

DEFAULT_DURATION_MS = 2000


def monotonic_ms() -> float:
    return time.monotonic() * 1000


@dataclass(slots=True)
class CounterState:
    current_value: int
    target_value: int
    start_time: float
    duration_ms: int


class AnimatedCounter:
    """Counts up to ``target`` over ``duration_ms``.

    ``on_change`` receives each newly displayed value. It is only called when
    the displayed value actually changes, and never after :meth:`close`.
    A duration of zero or less jumps straight to the target.
    """

    def __init__(
        self,
        target: int,
        *,
        scheduler: FrameScheduler,
        duration_ms: int = DEFAULT_DURATION_MS,
        prefix: str = "",
        clock: Callable[[], float] = monotonic_ms,
        on_change: Callable[[int], None] | None = None,
    ) -> None:
        self.prefix = prefix
        self._scheduler = scheduler
        self._clock = clock
        self._on_change = on_change
        self._handle: Any = None
        self._closed = False
        self.state = CounterState(current_value=0, target_value=int(target), start_time=clock(), duration_ms=duration_ms)

    @property
    def value(self) -> int:
        return self.state.current_value

    @property
    def text(self) -> str:
        return f"{self.prefix}{self.state.current_value:,}"

    @property
    def running(self) -> bool:
        return self._handle is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def start(self) -> None:
        """(Re)start the animation from 0 toward the current target."""
        self._ensure_open()
        self._cancel_pending()
        self.state = CounterState(
            current_value=0,
            target_value=self.state.target_value,
            start_time=self._clock(),
            duration_ms=self.state.duration_ms,
        )
        self._emit(0)

        if self.state.duration_ms <= 0:
            self._finish()
            return
        self._handle = self._scheduler.request_frame(self._tick)

    def set_target(self, target: int) -> None:
        """Change the target and restart from 0. Setting the same target is a no-op."""
        self._ensure_open()
        target = int(target)
        if target == self.state.target_value:
            return
        self.state.target_value = target
        self.start()

    def set_duration(self, duration_ms: int) -> None:
        """Change the duration and restart from 0. Setting the same duration is a no-op."""
        self._ensure_open()
        if duration_ms == self.state.duration_ms:
            return
        self.state.duration_ms = duration_ms
        self.start()

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("AnimatedCounter is closed.")

    def close(self) -> None:
        """Cancel any pending frame. Idempotent."""
        self._cancel_pending()
        self._closed = True

    def _cancel_pending(self) -> None:
        if self._handle is not None:
            self._scheduler.cancel_frame(self._handle)
            self._handle = None

    def _emit(self, value: int) -> None:
        if self._on_change is not None and not self._closed:
            self._on_change(value)

    def _set(self, value: int) -> None:
        if value != self.state.current_value:
            self.state.current_value = value
            self._emit(value)

    def _finish(self) -> None:
        # flooring can leave the last computed step short of the target
        self._set(self.state.target_value)
        logger.debug("Counter reached %s", self.state.target_value)

    def _tick(self) -> None:
        self._handle = None
        if self._closed:
            return

        elapsed = self._clock() - self.state.start_time
        progress = min(elapsed / self.state.duration_ms, 1.0)
        self._set(math.floor(progress * self.state.target_value))

        if progress < 1:
            self._handle = self._scheduler.request_frame(self._tick)
        else:
            self._finish()
