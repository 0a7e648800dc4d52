from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


@dataclass
class Point:
    x: float
    y: float


@dataclass
class FrameData:
    timestamp: float
    # taps that landed since the previous frame, already in logical screen coords
    taps: List[Point] = field(default_factory=list)
