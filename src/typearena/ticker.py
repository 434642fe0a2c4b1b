"""Repeating tick sources used to push live stats while a session runs."""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class Ticker(Protocol):
    """Calls a callback at a fixed interval between start() and stop()."""

    @property
    def running(self) -> bool: ...
    def start(self, callback: Callable[[], None], interval: float) -> None: ...
    def stop(self) -> None: ...


class FrameTicker:
    """Tick source advanced by the game loop's frame delta.

    Nothing fires on its own: call advance(dt) once per frame. A stopped
    ticker drops any accumulated time, so a late frame never delivers a
    tick for a session that has already ended.
    """

    def __init__(self) -> None:
        self._callback: Callable[[], None] | None = None
        self._interval = 0.0
        self._accumulated = 0.0

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(self, callback: Callable[[], None], interval: float) -> None:
        if interval <= 0:
            raise ValueError("tick interval must be positive")
        self._callback = callback
        self._interval = interval
        self._accumulated = 0.0

    def stop(self) -> None:
        self._callback = None
        self._accumulated = 0.0

    def advance(self, dt: float) -> int:
        """Advance by dt seconds. Returns the number of ticks delivered."""
        if self._callback is None:
            return 0
        self._accumulated += dt
        fired = 0
        while self._callback is not None and self._accumulated >= self._interval:
            self._accumulated -= self._interval
            self._callback()
            fired += 1
        return fired
