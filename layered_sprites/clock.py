from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Protocol


class Clock(Protocol):
    """Source of seconds for FrameTimer; tests swap in a scripted one."""

    def now(self) -> float: ...


class RealClock:
    def now(self) -> float:
        return time.monotonic()


@dataclass(frozen=True, slots=True)
class ElapsedTime:
    """Per-frame timing handed to update/draw."""

    step_s: float = 0.0  # since the previous frame
    total_s: float = 0.0  # since the first frame


class FrameTimer:
    """Produces an ElapsedTime for each tick of the game loop."""

    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._started_at_s: float | None = None
        self._last_s: float | None = None

    def tick(self) -> ElapsedTime:
        now = self._clock.now()
        if self._started_at_s is None or self._last_s is None:
            self._started_at_s = now
            self._last_s = now
            return ElapsedTime()
        step = max(0.0, now - self._last_s)
        self._last_s = now
        return ElapsedTime(step_s=step, total_s=now - self._started_at_s)
