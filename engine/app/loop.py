from __future__ import annotations
import sys
import time
from pathlib import Path
from typing import Optional
import pygame

from engine.api.config import EngineConfig
from engine.api.frame_data import FrameData
from engine.app.context import Context
from engine.app.loader import find_game_root, load_game_manifest, load_game_module
from engine.input.pointer_input import PointerInput

BACKGROUND = (12, 14, 18)


def run_game(
    game_id: str,
    screen_size: tuple[int, int],
    fps: int = 60,
    mirror: bool = False,
    debug: bool = False,
    games_dir: Optional[Path] = None,
):
    cfg = EngineConfig(
        screen_size=screen_size,
        fps=fps,
        mirror=mirror,
        debug=debug,
    )

    # load game before opening a window so a bad id fails fast
    try:
        game_root = find_game_root(game_id, games_dir)
        manifest = load_game_manifest(game_root)
        module = load_game_module(game_root)
    except (FileNotFoundError, AttributeError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    game = module.get_game()

    pygame.init()
    try:
        pygame.display.set_caption(manifest.get("name", game_id))
        screen = pygame.display.set_mode(screen_size)
        clock = pygame.time.Clock()

        input_layer = PointerInput(cfg)

        # Render target: draw to off-screen if mirroring, otherwise draw directly to screen
        render_surface = screen if not mirror else pygame.Surface(
            screen_size).convert()

        ctx = Context(
            screen=render_surface,
            clock=clock,
            cfg=cfg,
            screen_size=screen_size,
        )

        # invalid manifest options are reported like loader errors
        try:
            game.on_load(ctx, manifest)
        except ValueError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1

        running = True
        try:
            while running:
                dt = clock.tick(fps)
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        running = False
                    input_layer.handle_pygame_event(event, screen_size)
                    game.on_event(event)

                frame_data = FrameData(timestamp=time.time(),
                                       taps=input_layer.drain())

                # ---- draw to render_surface ----
                render_surface.fill(BACKGROUND)
                game.on_update(dt, frame_data)
                game.on_draw(render_surface)

                # ---- present to window ----
                if mirror:
                    flipped = pygame.transform.flip(render_surface, True, False)
                    screen.blit(flipped, (0, 0))

                pygame.display.flip()
        finally:
            game.on_unload()
    finally:
        pygame.quit()
    return 0
