from .config import ReactionOptions
from .controller import GameController
from .state import GameState, ProgressState, ProgressTrack, Results, TargetPosition
from .timer import RoundTimer

__all__ = [
    "GameController",
    "GameState",
    "ProgressState",
    "ProgressTrack",
    "ReactionOptions",
    "Results",
    "RoundTimer",
    "TargetPosition",
]
