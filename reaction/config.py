from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .const import RELOCATE_INTERVAL_MS, ROUND_COUNT, TARGET_MAX, TARGET_MIN


@dataclass(frozen=True)
class ReactionOptions:
    rounds: int = ROUND_COUNT
    relocate_interval_ms: float = RELOCATE_INTERVAL_MS
    target_min: float = TARGET_MIN
    target_max: float = TARGET_MAX

    def __post_init__(self):
        if isinstance(self.rounds, bool) or not isinstance(self.rounds, int):
            raise ValueError(f"rounds must be a whole number, got {self.rounds!r}")
        if self.rounds < 1:
            raise ValueError(f"rounds must be at least 1, got {self.rounds}")
        if self.relocate_interval_ms <= 0:
            raise ValueError(
                f"relocate_interval_ms must be positive, got {self.relocate_interval_ms}")
        if not (0.0 <= self.target_min <= self.target_max <= 1.0):
            raise ValueError(
                f"target bounds must satisfy 0 <= min <= max <= 1, got "
                f"({self.target_min}, {self.target_max})")

    @classmethod
    def from_manifest(cls, manifest: Optional[Dict[str, Any]]) -> "ReactionOptions":
        """
        Reads the optional `options` mapping of a game manifest, e.g.:

            options:
              rounds: 5
              relocate_interval_ms: 3000
              target_min: 0.2
              target_max: 0.8

        Missing keys fall back to the defaults in const.py.
        """
        opts = (manifest or {}).get("options") or {}
        return cls(
            rounds=opts.get("rounds", ROUND_COUNT),
            relocate_interval_ms=float(
                opts.get("relocate_interval_ms", RELOCATE_INTERVAL_MS)),
            target_min=float(opts.get("target_min", TARGET_MIN)),
            target_max=float(opts.get("target_max", TARGET_MAX)),
        )
