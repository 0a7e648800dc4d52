from __future__ import annotations

import pygame

from engine.app.context import Context

from .frame_data import FrameData


class Game:
    """
    Interface every game folder's get_game() must return.
    """

    def on_load(self, ctx: Context, manifest: dict) -> None:
        """Called once after the game module loads, before the first frame."""
        ...

    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        """Called every frame; dt_ms is milliseconds elapsed."""
        ...

    def on_draw(self, surface: pygame.Surface) -> None:
        ...

    def on_event(self, event: pygame.event.Event) -> None:
        """Optional: raw pygame events (keyboard fallbacks etc.)."""
        ...

    def on_unload(self) -> None:
        ...
