"""The player's actor: heading buffer, movement and power-mode timer."""

from __future__ import annotations
import logging
from typing import Iterable, Optional

from .actor import Actor
from .config import DEFAULT_CONFIG, GameConfig
from .geometry import Heading, Vec2
from .mover import scale_speed

logger = logging.getLogger(__name__)


class PacMan(Actor):
    def __init__(self, config: GameConfig = DEFAULT_CONFIG):
        ts = config.tile_size
        col, row = config.pacman_start
        super().__init__(Vec2(col * ts, row * ts), config.pacman_radius, ts, heading=Heading.RIGHT)
        self.config = config
        self.buffered_heading: Optional[Heading] = None
        self.lives = config.starting_lives
        self.power_mode = False
        self.power_timer = 0.0

    def set_buffered_heading(self, heading: Optional[Heading]):
        """Queue a turn; it is retried every tick until a corridor opens."""
        self.buffered_heading = heading

    def update(self, elapsed_ms: float, grid, ghosts: Iterable = ()):
        cfg = self.config

        # Pre-turning: take the queued heading as soon as it leads somewhere
        if self.buffered_heading is not None and self.can_head(self.buffered_heading, grid):
            self.turn(self.buffered_heading)
            self.buffered_heading = None

        self.advance(scale_speed(cfg.pacman_speed, elapsed_ms, cfg.reference_ms), grid)

        if self.power_mode:
            self.power_timer -= elapsed_ms
            if self.power_timer <= 0:
                self.power_mode = False
                self.power_timer = 0.0
                for ghost in ghosts:
                    ghost.frightened = False
                logger.debug("Power mode expired")

    def activate_power(self, duration_ms: float):
        self.power_mode = True
        self.power_timer = duration_ms

    def reset(self):
        """Back to the start tile after a lost life; lives are kept."""
        super().reset()
        self.buffered_heading = None
        self.power_mode = False
        self.power_timer = 0.0
