import os
import random
import sys

import pytest

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

# Ensure the repo root (containing `engine` and `reaction`) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from reaction import GameController, ReactionOptions


class FakeClock:
    """Manually advanced time source, in seconds."""

    def __init__(self, start=100.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds
        return self.now


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def controller(clock, rng):
    return GameController(options=ReactionOptions(), clock=clock, rng=rng)
