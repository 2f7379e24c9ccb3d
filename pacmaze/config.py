"""Game constants and the default maze.

Distances are pixels, times are milliseconds and speeds are pixels per
``reference_ms`` of simulated time.  Tile coordinates are ``(col, row)``.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .errors import ConfigError

# ---------------------------------------------------------------------------
# DEFAULT MAZE LAYOUT
# '#' wall, ' ' open, '.' dot, 'o' power pellet, '-' ghost lair (pen + gate)
# ---------------------------------------------------------------------------

MAZE_LAYOUT = (
    "############################",
    "#............##............#",
    "#.####.#####.##.#####.####.#",
    "#o####.#####.##.#####.####o#",
    "#.####.#####.##.#####.####.#",
    "#..........................#",
    "#.####.##.########.##.####.#",
    "#.####.##.########.##.####.#",
    "#......##....##....##......#",
    "######.##### ## #####.######",
    "######.##### ## #####.######",
    "######.##          ##.######",
    "######.## ###--### ##.######",
    "######.## #------# ##.######",
    "      .   #------#   .      ",
    "######.## #------# ##.######",
    "######.## ######## ##.######",
    "######.##          ##.######",
    "######.## ######## ##.######",
    "######.## ######## ##.######",
    "#............##............#",
    "#.####.#####.##.#####.####.#",
    "#.####.#####.##.#####.####.#",
    "#o..##.......  .......##..o#",
    "###.##.##.########.##.##.###",
    "###.##.##.########.##.##.###",
    "#......##....##....##......#",
    "#.##########.##.##########.#",
    "#.##########.##.##########.#",
    "#..........................#",
    "############################",
)

TUNNEL_ROWS = (14,)

# Spawn points in tile units; .5 is the middle of a tile.
PACMAN_START = (13.5, 23.5)

# Indexed by ghost archetype: direct, ambush, pincer, threshold.
GHOST_HOMES = (
    (13.5, 11.5),  # above the pen
    (13.5, 14.5),
    (11.5, 14.5),
    (15.5, 14.5),
)

SCATTER_CORNERS = (
    (25, 0),   # top-right
    (2, 0),    # top-left
    (25, 30),  # bottom-right
    (2, 30),   # bottom-left
)

# Tile ghosts head for while standing inside the lair.
LAIR_EXIT = (13, 11)


@dataclass(frozen=True)
class GameConfig:
    tile_size: int = 16
    cols: int = 28
    rows: int = 31

    # Speeds, pixels per reference_ms
    pacman_speed: float = 2.2
    ghost_speed: float = 2.0
    ghost_frightened_speed: float = 1.0
    reference_ms: float = 16.0
    max_elapsed_ms: float = 100.0

    # Timers
    scatter_duration_ms: float = 20000.0
    chase_duration_ms: float = 20000.0
    power_duration_ms: float = 6000.0

    # Collision
    pacman_radius: float = 7.0
    ghost_radius: float = 7.0
    dot_tolerance: float = 3.0
    pellet_tolerance: float = 5.0
    corner_collision: bool = False

    # Scoring
    starting_lives: int = 3
    dot_points: int = 10
    pellet_points: int = 50
    ghost_points: int = 200

    # Ghost targeting
    ambush_lookahead: int = 4
    threshold_tiles: float = 8.0
    ghosts_may_reverse: bool = True

    # Layout anchors
    tunnel_rows: Tuple[int, ...] = TUNNEL_ROWS
    pacman_start: Tuple[float, float] = PACMAN_START
    ghost_homes: Tuple[Tuple[float, float], ...] = GHOST_HOMES
    scatter_corners: Tuple[Tuple[int, int], ...] = SCATTER_CORNERS
    lair_exit: Tuple[int, int] = LAIR_EXIT

    def __post_init__(self):
        if self.tile_size <= 0:
            raise ConfigError(f"tile_size must be positive, got {self.tile_size}")
        if self.cols < 3 or self.rows < 1:
            raise ConfigError(f"maze of {self.cols}x{self.rows} tiles is too small")
        if self.reference_ms <= 0 or self.max_elapsed_ms <= 0:
            raise ConfigError("reference_ms and max_elapsed_ms must be positive")

        for name in ("pacman_speed", "ghost_speed", "ghost_frightened_speed"):
            speed = getattr(self, name)
            if speed < 0:
                raise ConfigError(f"{name} must not be negative")
            # A single clamped tick must never carry an actor across a whole tile.
            if speed * self.max_elapsed_ms / self.reference_ms >= self.tile_size:
                raise ConfigError(f"{name}={speed} skips whole tiles at {self.max_elapsed_ms} ms per tick")

        for name in ("scatter_duration_ms", "chase_duration_ms", "power_duration_ms"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive")

        for name in ("pacman_radius", "ghost_radius"):
            radius = getattr(self, name)
            if not 0 < radius < self.tile_size:
                raise ConfigError(f"{name} must be between 0 and tile_size")
        if self.dot_tolerance < 0 or self.pellet_tolerance < 0:
            raise ConfigError("pickup tolerances must not be negative")

        if self.starting_lives < 1:
            raise ConfigError("starting_lives must be at least 1")
        if len(self.ghost_homes) != 4 or len(self.scatter_corners) != 4:
            raise ConfigError("exactly four ghost homes and scatter corners are required")
        for row in self.tunnel_rows:
            if not 0 <= row < self.rows:
                raise ConfigError(f"tunnel row {row} is outside the maze")

    @property
    def width(self) -> int:
        return self.cols * self.tile_size

    @property
    def height(self) -> int:
        return self.rows * self.tile_size


DEFAULT_CONFIG = GameConfig()
