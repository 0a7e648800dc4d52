from __future__ import annotations
import random
import time
from typing import Callable, List, Optional, Tuple

import numpy as np

from .config import ReactionOptions
from .const import TARGET_START
from .state import GameState, ProgressTrack, Results, TargetPosition
from .timer import RoundTimer

Listener = Callable[["GameController"], None]


class GameController:
    """
    Owns one reaction session: state machine, target placement, tap timing
    and the summary statistics shown on the results screen.

    All times come from `clock` (seconds, float). The presentation layer calls
    `update()` once per frame so the round timer can relocate the target, and
    observes changes through `subscribe()`.
    """

    def __init__(
        self,
        options: Optional[ReactionOptions] = None,
        clock: Optional[Callable[[], float]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.options = options or ReactionOptions()
        self._clock = clock or time.monotonic
        self._rng = rng or random.Random()
        self._listeners: List[Listener] = []
        self._timer: Optional[RoundTimer] = None

        self.target = TargetPosition(*TARGET_START)
        self._init_state()

    def _init_state(self):
        self.game_state: GameState = GameState.Initial
        self.progress = ProgressTrack(self.options.rounds)
        self._tap_intervals: List[float] = []
        self.last_tap_time: Optional[float] = None

    # ---------- Read-only views ----------
    @property
    def tap_intervals(self) -> Tuple[float, ...]:
        return tuple(self._tap_intervals)

    @property
    def round_timer(self) -> Optional[RoundTimer]:
        return self._timer

    @property
    def rounds(self) -> int:
        return len(self.progress)

    # ---------- Observers ----------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self):
        for listener in list(self._listeners):
            listener(self)

    # ---------- Operations ----------
    def start(self) -> None:
        now = self._clock()
        self.last_tap_time = now
        self.game_state = GameState.Playing
        self._relocate()
        self._start_timer(now)
        self._notify()

    def tap(self) -> None:
        if self.game_state != GameState.Playing:
            return
        self._record_tap(self._clock())
        self._advance_progress()
        if self.game_state != GameState.Completed:
            self._relocate()
        self._notify()

    def reset(self) -> None:
        self._init_state()
        self._stop_timer()
        self._notify()

    def relocate_target(self) -> None:
        self._relocate()
        self._notify()

    def update(self, now: Optional[float] = None) -> int:
        """Lets the round timer fire any ticks that are due; returns how many fired."""
        if self._timer is None:
            return 0
        if now is None:
            now = self._clock()
        return self._timer.poll(now * 1000.0)

    # ---------- Statistics ----------
    def best_round_index(self) -> int:
        if not self._tap_intervals:
            return 0
        return int(np.argmin(self._tap_intervals))

    def average_interval_ms(self) -> float:
        # NaN (with a numpy RuntimeWarning) when nothing has been recorded
        return float(np.mean(np.asarray(self._tap_intervals, dtype=float)))

    def results(self) -> Results:
        return Results(
            intervals=self.tap_intervals,
            best_index=self.best_round_index(),
            average_ms=self.average_interval_ms(),
        )

    # ---------- Internals ----------
    def _record_tap(self, now: float):
        if self.last_tap_time is not None:
            self._tap_intervals.append((now - self.last_tap_time) * 1000.0)
        self.last_tap_time = now

    def _advance_progress(self):
        if self.progress.advance():
            self.game_state = GameState.Completed
            self._stop_timer()

    def _relocate(self):
        lo, hi = self.options.target_min, self.options.target_max
        self.target = TargetPosition(
            x=self._rng.uniform(lo, hi), y=self._rng.uniform(lo, hi))

    def _start_timer(self, now: float):
        self._stop_timer()
        self._timer = RoundTimer(
            self.options.relocate_interval_ms, self.relocate_target)
        self._timer.start(now * 1000.0)

    def _stop_timer(self):
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
