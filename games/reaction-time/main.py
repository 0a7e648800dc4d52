from __future__ import annotations
import sys
import pygame
from typing import Optional, Tuple

from engine.api import Game, FrameData
from engine.app.context import Context
from engine.render.shapes import draw_text_centered
from reaction import GameController, GameState, ReactionOptions


# Buttons
BUTTON_RADIUS = 48                  # start button and target are 96 px circles
START_COLOR = (0, 122, 255)
TARGET_COLOR = (255, 59, 48)
RESET_COLOR = (0, 122, 255)
BUTTON_TEXT_COLOR = (255, 255, 255)

# Bars (progress strip on top, reset button at the bottom)
BAR_HEIGHT = 50
BAR_MARGIN = 8
BAR_BG = (60, 60, 64)
DOT_RADIUS = 10
DOT_SPACING = 28

# Results table
RESULT_COLOR = (230, 230, 230)
BEST_COLOR = (255, 255, 255)
AVERAGE_BG = (90, 84, 40)
RESULT_LINE_H = 32
HUD_FONT_SIZE = 26


class ReactionTime(Game):
    def on_load(self, ctx: Context, manifest):
        self.ctx = ctx
        self.manifest = manifest
        self.w, self.h = ctx.screen_size

        self.controller = GameController(
            options=ReactionOptions.from_manifest(manifest),
            clock=ctx.resources.get("clock"),
            rng=ctx.resources.get("rng"),
        )
        if ctx.cfg.debug:
            self._last_logged: Optional[Tuple] = None
            self.controller.subscribe(self._log_transition)

        self.start_center = (self.w // 2, self.h // 2)
        self.progress_rect = pygame.Rect(
            BAR_MARGIN, BAR_MARGIN, self.w - 2 * BAR_MARGIN, BAR_HEIGHT)
        self.reset_rect = pygame.Rect(
            BAR_MARGIN, self.h - BAR_HEIGHT - BAR_MARGIN, self.w - 2 * BAR_MARGIN, BAR_HEIGHT)

        self.controller.reset()

    # ---------- Helpers ----------
    @staticmethod
    def _in_circle(px, py, center, r) -> bool:
        dx = px - center[0]
        dy = py - center[1]
        return dx * dx + dy * dy <= r * r

    def _target_center(self) -> Tuple[int, int]:
        return self.controller.target.to_screen(self.ctx.screen_size)

    def _log_transition(self, c: GameController):
        idx = c.progress.current_index
        key = (c.game_state, idx, len(c.tap_intervals))
        # timer relocations alone are not worth a line
        if key == self._last_logged:
            return
        self._last_logged = key
        round_no = c.rounds if idx is None else idx + 1
        line = (f"[reaction] state={c.game_state.name.lower()} round={round_no}/{c.rounds} "
                f"intervals={len(c.tap_intervals)}")
        if c.game_state == GameState.Completed:
            line += f" best={c.best_round_index() + 1} avg={c.average_interval_ms():.0f}ms"
        print(line, file=sys.stderr)

    def _handle_tap(self, x: float, y: float):
        state = self.controller.game_state
        if state == GameState.Initial:
            if self._in_circle(x, y, self.start_center, BUTTON_RADIUS):
                self.controller.start()
            return

        if self.reset_rect.collidepoint(x, y):
            self.controller.reset()
            return

        if state == GameState.Playing and self._in_circle(x, y, self._target_center(), BUTTON_RADIUS):
            self.controller.tap()

    # ---------- Update ----------
    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        for p in frame.taps:
            self._handle_tap(p.x, p.y)
        self.controller.update()

    # ---------- Draw ----------
    def on_draw(self, surface: pygame.Surface) -> None:
        state = self.controller.game_state

        if state == GameState.Initial:
            pygame.draw.circle(surface, START_COLOR, self.start_center, BUTTON_RADIUS)
            draw_text_centered(surface, "Start", self.start_center, BUTTON_TEXT_COLOR, size=HUD_FONT_SIZE)
            return

        self._draw_progress(surface)

        if state == GameState.Playing:
            pygame.draw.circle(surface, TARGET_COLOR, self._target_center(), BUTTON_RADIUS)
        else:
            self._draw_results(surface)

        self._draw_reset(surface)

    def _draw_progress(self, surface: pygame.Surface):
        pygame.draw.rect(surface, BAR_BG, self.progress_rect, border_radius=8)
        n = self.controller.rounds
        x0 = self.progress_rect.centerx - (n - 1) * DOT_SPACING // 2
        cy = self.progress_rect.centery
        for i, slot in enumerate(self.controller.progress):
            pygame.draw.circle(surface, slot.color, (x0 + i * DOT_SPACING, cy), DOT_RADIUS)

    def _draw_reset(self, surface: pygame.Surface):
        pill = self.reset_rect.inflate(-16, -8)
        pygame.draw.rect(surface, RESET_COLOR, pill, border_radius=pill.h // 2)
        draw_text_centered(surface, "Reset", pill.center, BUTTON_TEXT_COLOR, size=HUD_FONT_SIZE)

    def _draw_results(self, surface: pygame.Surface):
        results = self.controller.results()
        n = len(results.intervals)
        cx = self.w // 2
        y = self.h // 2 - (n + 1) * RESULT_LINE_H // 2

        for i, ms in enumerate(results.intervals):
            best = i == results.best_index
            draw_text_centered(surface, f"Click {i + 1}: {ms:.0f} ms", (cx, y),
                               BEST_COLOR if best else RESULT_COLOR, size=HUD_FONT_SIZE, bold=best)
            y += RESULT_LINE_H

        box = pygame.Rect(0, 0, 300, RESULT_LINE_H + 16)
        box.center = (cx, y + RESULT_LINE_H // 2)
        pygame.draw.rect(surface, AVERAGE_BG, box)
        if n:
            avg = f"Average time: {results.average_ms:.0f} ms"
        else:
            avg = "Average time: -- ms"
        draw_text_centered(surface, avg, box.center, RESULT_COLOR, size=HUD_FONT_SIZE, bold=True)

    # ---------- Events ----------
    def on_event(self, event: pygame.event.Event) -> None:
        # Keyboard fallback: space/enter starts, R/backspace resets
        if event.type != pygame.KEYDOWN:
            return
        if event.key in (pygame.K_SPACE, pygame.K_RETURN):
            if self.controller.game_state == GameState.Initial:
                self.controller.start()
        elif event.key in (pygame.K_r, pygame.K_BACKSPACE):
            self.controller.reset()

    def on_unload(self) -> None:
        self.controller.reset()


def get_game():
    return ReactionTime()
