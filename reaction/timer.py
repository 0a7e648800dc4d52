from __future__ import annotations
from typing import Callable, Optional


class RoundTimer:
    """
    Repeating timer polled from the frame loop.

    Each instance is a single-use handle: once cancelled it never fires again,
    so the owner replaces it with a fresh instance rather than restarting it.
    """

    def __init__(self, interval_ms: float, callback: Callable[[], None]):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.interval_ms = float(interval_ms)
        self.callback = callback
        self._next_fire_ms: Optional[float] = None
        self._cancelled = False

    @property
    def active(self) -> bool:
        return self._next_fire_ms is not None and not self._cancelled

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def start(self, now_ms: float) -> None:
        if self._cancelled:
            raise RuntimeError("cannot start a cancelled RoundTimer")
        self._next_fire_ms = now_ms + self.interval_ms

    def cancel(self) -> None:
        self._cancelled = True
        self._next_fire_ms = None

    def poll(self, now_ms: float) -> int:
        """Fires once per interval elapsed since the last fire; returns the count."""
        fired = 0
        while self.active and now_ms >= self._next_fire_ms:
            self._next_fire_ms += self.interval_ms
            fired += 1
            self.callback()
        return fired
