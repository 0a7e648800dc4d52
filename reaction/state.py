from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple


class GameState(Enum):
    Initial = 1
    Playing = 2
    Completed = 3


class ProgressState(Enum):
    Future = 1
    Current = 2
    Completed = 3

    @property
    def color(self) -> Tuple[int, int, int]:
        return _PROGRESS_COLORS[self]


_PROGRESS_COLORS = {
    ProgressState.Current: (255, 204, 0),     # yellow
    ProgressState.Completed: (52, 199, 89),   # green
    ProgressState.Future: (142, 142, 147),    # gray
}


class ProgressTrack:
    """
    One slot per round. Exactly one slot is Current until the last round
    completes; slots only ever move Future -> Current -> Completed.
    """

    def __init__(self, rounds: int):
        if rounds < 1:
            raise ValueError(f"rounds must be at least 1, got {rounds}")
        self._slots: List[ProgressState] = (
            [ProgressState.Current] + [ProgressState.Future] * (rounds - 1))

    @property
    def current_index(self) -> Optional[int]:
        try:
            return self._slots.index(ProgressState.Current)
        except ValueError:
            return None

    @property
    def is_complete(self) -> bool:
        return all(s == ProgressState.Completed for s in self._slots)

    def advance(self) -> bool:
        """Completes the Current slot. Returns True if that was the last one."""
        idx = self.current_index
        if idx is None:
            # no Current slot: nothing to advance
            return False
        self._slots[idx] = ProgressState.Completed
        if idx < len(self._slots) - 1:
            self._slots[idx + 1] = ProgressState.Current
            return False
        return True

    def as_tuple(self) -> Tuple[ProgressState, ...]:
        return tuple(self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[ProgressState]:
        return iter(tuple(self._slots))

    def __getitem__(self, index: int) -> ProgressState:
        return self._slots[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, ProgressTrack):
            return self._slots == other._slots
        if isinstance(other, (list, tuple)):
            return self._slots == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ProgressTrack({[s.name for s in self._slots]})"


@dataclass(frozen=True)
class TargetPosition:
    # fractions of the play area, not pixels
    x: float
    y: float

    def to_screen(self, size: Tuple[int, int]) -> Tuple[int, int]:
        w, h = size
        return int(self.x * w), int(self.y * h)


@dataclass(frozen=True)
class Results:
    intervals: Tuple[float, ...]
    best_index: int
    average_ms: float
