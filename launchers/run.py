import argparse
import sys
from pathlib import Path
import os
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = "hide"

# Ensure repo root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from engine.app.loop import run_game


def screen_size(value: str):
    try:
        w, h = map(int, value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WxH, e.g. 1280x720, got {value!r}")
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError(f"screen size must be positive, got {value!r}")
    return w, h


def main(argv=None):
    parser = argparse.ArgumentParser(description="Reaction Tap Launcher")
    parser.add_argument("--game", default="reaction-time", help="Game folder name under games/")
    parser.add_argument("--screen", type=screen_size, default=(1280, 720), help="Screen size WxH, e.g. 1280x720")
    parser.add_argument("--fps", type=int, default=60, help="Frame rate cap")
    parser.add_argument("--mirror", action="store_true", help="Mirror the game window horizontally")
    parser.add_argument("--debug", action="store_true", help="Print game state transitions to stderr")
    args = parser.parse_args(argv)

    return run_game(
        game_id=args.game,
        screen_size=args.screen,
        fps=args.fps,
        mirror=args.mirror,
        debug=args.debug,
    )


if __name__ == "__main__":
    sys.exit(main())
