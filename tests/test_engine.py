import importlib.util
import argparse
from pathlib import Path

import pygame
import pytest

from engine.api import EngineConfig, Point
from engine.app.loader import find_game_root, load_game_manifest, load_game_module
from engine.input.pointer_input import PointerInput

REPO_ROOT = Path(__file__).resolve().parents[1]


def write_game(root: Path, manifest: str = "name: Demo\n", main: str = "def get_game():\n    return object()\n"):
    root.mkdir(parents=True)
    if manifest is not None:
        (root / "manifest.yaml").write_text(manifest, encoding="utf-8")
    if main is not None:
        (root / "main.py").write_text(main, encoding="utf-8")
    return root


def test_find_game_root_lists_available_games(tmp_path):
    write_game(tmp_path / "demo")
    write_game(tmp_path / "_TEMPLATE")
    assert find_game_root("demo", tmp_path) == tmp_path / "demo"
    with pytest.raises(FileNotFoundError, match="available: demo"):
        find_game_root("missing", tmp_path)


def test_bundled_game_is_found():
    root = find_game_root("reaction-time")
    assert root == REPO_ROOT / "games" / "reaction-time"
    manifest = load_game_manifest(root)
    assert manifest["options"]["rounds"] == 5
    assert manifest["options"]["relocate_interval_ms"] == 3000


def test_manifest_required(tmp_path):
    root = write_game(tmp_path / "demo", manifest=None)
    with pytest.raises(FileNotFoundError, match="manifest.yaml"):
        load_game_manifest(root)


def test_empty_manifest_means_defaults(tmp_path):
    root = write_game(tmp_path / "demo", manifest="")
    assert load_game_manifest(root) == {}


def test_manifest_must_be_mapping(tmp_path):
    root = write_game(tmp_path / "demo", manifest="- just\n- a list\n")
    with pytest.raises(ValueError):
        load_game_manifest(root)


def test_module_requires_main_and_factory(tmp_path):
    no_main = write_game(tmp_path / "a", main=None)
    with pytest.raises(FileNotFoundError, match="main.py"):
        load_game_module(no_main)

    no_factory = write_game(tmp_path / "b", main="x = 1\n")
    with pytest.raises(AttributeError, match="get_game"):
        load_game_module(no_factory)

    ok = write_game(tmp_path / "c-game")
    module = load_game_module(ok)
    assert callable(module.get_game)


def test_pointer_input_collects_presses_once():
    pointer = PointerInput(EngineConfig(screen_size=(800, 600)))
    pointer.handle_pygame_event(
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(120, 340)), (800, 600))
    pointer.handle_pygame_event(
        pygame.event.Event(pygame.MOUSEMOTION, pos=(130, 340), rel=(10, 0), buttons=(1, 0, 0)), (800, 600))
    pointer.handle_pygame_event(
        pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(130, 340)), (800, 600))
    assert pointer.drain() == [Point(120.0, 340.0)]
    assert pointer.drain() == []


def test_pointer_input_ignores_other_buttons_and_emulated_touch():
    pointer = PointerInput(EngineConfig(screen_size=(800, 600)))
    pointer.handle_pygame_event(
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(10, 10)), (800, 600))
    pointer.handle_pygame_event(
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10), touch=True), (800, 600))
    assert pointer.drain() == []


def test_pointer_input_scales_touches_and_mirrors():
    pointer = PointerInput(EngineConfig(screen_size=(800, 600), mirror=True))
    pointer.handle_pygame_event(
        pygame.event.Event(pygame.FINGERDOWN, x=0.25, y=0.5, touch_id=0, finger_id=0), (800, 600))
    pointer.handle_pygame_event(
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 20)), (800, 600))
    assert pointer.drain() == [Point(599.0, 300.0), Point(799.0, 20.0)]


def _load_launcher():
    spec = importlib.util.spec_from_file_location("launcher_run", REPO_ROOT / "launchers" / "run.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_launcher_parses_screen_size():
    launcher = _load_launcher()
    assert launcher.screen_size("1920X1080") == (1920, 1080)
    for bad in ("wide", "0x720", "1280"):
        with pytest.raises(argparse.ArgumentTypeError):
            launcher.screen_size(bad)


def test_run_game_reports_bad_options(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    main = (REPO_ROOT / "games" / "reaction-time" / "main.py").read_text(encoding="utf-8")
    write_game(tmp_path / "bad-opts", manifest="options:\n  rounds: 0\n", main=main)

    from engine.app.loop import run_game

    assert run_game("bad-opts", (320, 240), games_dir=tmp_path) == 1
    assert "ERROR: rounds must be at least 1, got 0" in capsys.readouterr().err
    assert not pygame.get_init()


def test_run_game_reports_unknown_game(tmp_path, capsys):
    from engine.app.loop import run_game

    assert run_game("nope", (320, 240), games_dir=tmp_path) == 1
    assert "ERROR: No game 'nope'" in capsys.readouterr().err
