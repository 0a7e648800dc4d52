from __future__ import annotations
import pygame
from typing import List, Tuple

from engine.api.config import EngineConfig
from engine.api.frame_data import Point


class PointerInput:
    """
    Turns mouse clicks and touch presses into per-frame tap points.
    - Only the press counts as a tap; holding or dragging does not repeat it.
    - Touch events arrive normalized (0..1) and are scaled to the screen.
    - Respects --mirror by converting window coords -> logical coords.
    """

    def __init__(self, cfg: EngineConfig):
        self.mirror = cfg.mirror
        self._pending: List[Point] = []

    def _to_logical(self, x: float, y: float, w: int, h: int) -> Tuple[float, float]:
        if self.mirror:
            x = (w - 1) - x
        return float(x), float(y)

    def handle_pygame_event(self, event: pygame.event.Event, screen_size: Tuple[int, int]) -> None:
        w, h = screen_size

        if event.type == pygame.MOUSEBUTTONDOWN:
            # SDL also reports touches as emulated mouse presses; keep the real one
            if event.button != 1 or getattr(event, "touch", False):
                return
            self._pending.append(Point(*self._to_logical(*event.pos, w, h)))

        elif event.type == pygame.FINGERDOWN:
            self._pending.append(
                Point(*self._to_logical(event.x * w, event.y * h, w, h)))

    def drain(self) -> List[Point]:
        """Return the taps collected since the last call and forget them."""
        taps, self._pending = self._pending, []
        return taps
