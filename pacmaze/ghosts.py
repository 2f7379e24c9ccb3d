"""Ghost personalities and the scatter/chase/frightened state machine."""

from __future__ import annotations
import logging
import random
from enum import Enum, auto
from typing import List, Sequence

from .actor import Actor
from .config import DEFAULT_CONFIG, GameConfig
from .geometry import Heading, Tile, Vec2, tile_center
from .maze import CellKind
from .mover import scale_speed

logger = logging.getLogger(__name__)


class GhostMode(Enum):
    SCATTER = auto()
    CHASE = auto()
    FRIGHTENED = auto()


class Archetype(Enum):
    """Chase personality; the value indexes the per-ghost config tables."""
    DIRECT = 0      # Pac-Man's tile
    AMBUSH = 1      # a few tiles ahead of Pac-Man
    PINCER = 2      # Pac-Man's tile mirrored through the direct ghost
    THRESHOLD = 3   # Pac-Man when far away, its corner when close

    @property
    def nickname(self) -> str:
        return ("BLINKY", "PINKY", "INKY", "CLYDE")[self.value]


class Ghost(Actor):
    def __init__(self, archetype: Archetype, config: GameConfig = DEFAULT_CONFIG):
        ts = config.tile_size
        col, row = config.ghost_homes[archetype.value]
        super().__init__(Vec2(col * ts, row * ts), config.ghost_radius, ts, heading=Heading.LEFT)
        self.archetype = archetype
        self.config = config
        self.mode = GhostMode.SCATTER
        self.mode_timer = 0.0
        self.frightened = False
        self.force_reverse = False
        self.stalled = False

    @property
    def home(self) -> Vec2:
        return self.start_pos.copy()

    @property
    def scatter_corner(self) -> Tile:
        return tuple(self.config.scatter_corners[self.archetype.value])

    @property
    def behavior(self) -> GhostMode:
        """What the ghost is doing right now; FRIGHTENED overrides the timer mode."""
        return GhostMode.FRIGHTENED if self.frightened else self.mode

    def in_lair(self, grid) -> bool:
        return grid.cell(*self.tile) is CellKind.GHOST_LAIR

    # --- MODE TIMER ---

    def mode_duration(self, mode: GhostMode) -> float:
        if mode is GhostMode.SCATTER:
            return self.config.scatter_duration_ms
        return self.config.chase_duration_ms

    def tick_mode_timer(self, elapsed_ms: float):
        """Advance the scatter/chase cycle; keeps running while frightened."""
        self.mode_timer += elapsed_ms
        limit = self.mode_duration(self.mode)
        while self.mode_timer >= limit:
            self.mode_timer -= limit
            self.mode = GhostMode.CHASE if self.mode is GhostMode.SCATTER else GhostMode.SCATTER
            self.force_reverse = True
            limit = self.mode_duration(self.mode)
            logger.debug("%s switched to %s", self.archetype.nickname, self.mode.name)

    def frighten(self):
        self.frightened = True
        self.force_reverse = True

    # --- TARGETING ---

    def target_tile(self, pacman, grid, pack: Sequence["Ghost"] = (), rng=random) -> Tile:
        """Tile this ghost is heading for, by mode and personality.

        ``pack`` is the full ghost list; it is only read, for the pincer
        ghost's reference to the direct ghost's position.
        """
        if self.frightened:
            return self._flee_tile(pacman, grid, rng)
        if self.mode is GhostMode.SCATTER:
            return self.scatter_corner

        pac_col, pac_row = pacman.tile
        if self.archetype is Archetype.DIRECT:
            return (pac_col, pac_row)

        if self.archetype is Archetype.AMBUSH:
            ahead = self.config.ambush_lookahead
            return (pac_col + pacman.heading.dx * ahead, pac_row + pacman.heading.dy * ahead)

        if self.archetype is Archetype.PINCER:
            leader = next((g for g in pack if g.archetype is Archetype.DIRECT), None)
            if leader is None:
                return (pac_col, pac_row)
            lead_col, lead_row = leader.tile
            return (2 * pac_col - lead_col, 2 * pac_row - lead_row)

        # THRESHOLD
        if self.pos.dist(pacman.pos) > self.config.threshold_tiles * self.tile_size:
            return (pac_col, pac_row)
        return self.scatter_corner

    def _flee_tile(self, pacman, grid, rng) -> Tile:
        pac_tile = pacman.tile
        while True:
            tile = (rng.randint(0, grid.cols - 1), rng.randint(0, grid.rows - 1))
            if tile != pac_tile:
                return tile

    def choose_heading(self, legal: List[Heading], target: Tile) -> Heading:
        """Greedy pick: the legal one-tile step nearest the target.

        ``legal`` is in Heading declaration order, so ties go to the
        earliest of right, left, up, down.
        """
        origin = tile_center(self.tile, self.tile_size)
        goal = tile_center(target, self.tile_size)
        best = legal[0]
        best_dist = float("inf")
        for heading in legal:
            dist = (origin + heading.vector * self.tile_size).dist(goal)
            if dist < best_dist:
                best, best_dist = heading, dist
        return best

    def legal_headings(self, grid, allow_lair: bool = False) -> List[Heading]:
        legal = self.open_headings(grid, allow_lair)
        if not self.config.ghosts_may_reverse and not self.force_reverse and len(legal) > 1:
            legal = [h for h in legal if h is not self.heading.reverse]
        self.force_reverse = False
        return legal

    # --- PER-TICK UPDATE ---

    def update(self, elapsed_ms: float, pacman, grid, pack: Sequence["Ghost"] = (), rng=random):
        cfg = self.config
        self.tick_mode_timer(elapsed_ms)

        in_lair = self.in_lair(grid)
        legal = self.legal_headings(grid, allow_lair=in_lair)
        if not legal:
            if not self.stalled:
                logger.warning("%s has no legal heading at %s", self.archetype.nickname, self.tile)
            self.stalled = True
        else:
            self.stalled = False
            if in_lair:
                target = tuple(cfg.lair_exit)
            else:
                target = self.target_tile(pacman, grid, pack, rng)
            self.turn(self.choose_heading(legal, target))

        base = cfg.ghost_frightened_speed if self.frightened else cfg.ghost_speed
        self.advance(scale_speed(base, elapsed_ms, cfg.reference_ms), grid, allow_lair=in_lair)

    def send_home(self):
        """Captured: back to the home tile, no longer frightened."""
        super().reset()
        self.frightened = False
        self.force_reverse = False

    def reset(self):
        super().reset()
        self.mode = GhostMode.SCATTER
        self.mode_timer = 0.0
        self.frightened = False
        self.force_reverse = False
        self.stalled = False


def make_ghosts(config: GameConfig = DEFAULT_CONFIG) -> List[Ghost]:
    return [Ghost(archetype, config) for archetype in Archetype]
