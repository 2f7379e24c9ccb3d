"""Discrete things that happened during a tick, for sound, score and storage layers."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class EventKind(Enum):
    DOT_EATEN = auto()
    POWER_ACTIVATED = auto()
    GHOST_EATEN = auto()
    LIFE_LOST = auto()
    GAME_OVER = auto()
    WIN = auto()


@dataclass(frozen=True)
class Event:
    kind: EventKind
    points: int = 0
    # Final score, set on GAME_OVER and WIN
    score: Optional[int] = None
