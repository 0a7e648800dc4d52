from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

import pygame

from engine.api.config import EngineConfig


@dataclass
class Context:
    screen: Optional[pygame.Surface]
    clock: Optional[pygame.time.Clock]
    cfg: EngineConfig
    screen_size: Tuple[int, int]
    # shared objects a game may look up (e.g. an injected time source)
    resources: dict[str, Any] = field(default_factory=dict)
