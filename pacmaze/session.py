"""One game: owns the grid, the actors and the resolver, and advances them per tick."""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterable, List, Optional, Tuple

from .config import DEFAULT_CONFIG, MAZE_LAYOUT, GameConfig
from .events import Event
from .geometry import Heading, Tile
from .ghosts import Archetype, GhostMode, make_ghosts
from .maze import CellKind, Grid
from .mover import clamp_elapsed
from .pacman import PacMan
from .resolver import Resolver, SessionState

logger = logging.getLogger(__name__)

Listener = Callable[[Event], None]


@dataclass(frozen=True)
class PacManView:
    x: float
    y: float
    heading: Heading
    power_mode: bool
    lives: int


@dataclass(frozen=True)
class GhostView:
    archetype: Archetype
    x: float
    y: float
    heading: Heading
    mode: GhostMode
    frightened: bool


@dataclass(frozen=True)
class SessionSnapshot:
    state: SessionState
    score: int
    walls: FrozenSet[Tile]
    lair: FrozenSet[Tile]
    dots: FrozenSet[Tile]
    pellets: FrozenSet[Tile]
    pacman: PacManView
    ghosts: Tuple[GhostView, ...]


class Session:
    """A single play-through, driven by one ``update()`` call per frame.

    Construction raises ConfigError/MazeError for an unplayable setup;
    ``update()`` itself never raises for in-game conditions.
    """

    def __init__(self, config: Optional[GameConfig] = None, layout: Iterable[str] = MAZE_LAYOUT,
                 rng: Optional[random.Random] = None):
        self.config = config or DEFAULT_CONFIG
        self.layout = tuple(layout)
        self.rng = rng or random.Random()
        self.resolver = Resolver(self.config)
        self.listeners: List[Listener] = []
        self.pacman = PacMan(self.config)
        self.ghosts = make_ghosts(self.config)
        self._build_maze()
        self.score = 0
        self.state = SessionState.PLAYING
        logger.info("Session started: %d dots, %d power pellets", len(self.dots), len(self.pellets))

    def _build_maze(self):
        self.grid = Grid.from_layout(self.layout, self.config)
        self.dots = self.grid.collectibles(CellKind.DOT)
        self.pellets = self.grid.collectibles(CellKind.POWER_PELLET)
        self._walls = frozenset(self.grid.walls())
        self._lair = frozenset(self.grid.lair())

    # --- INPUT ---

    def set_buffered_heading(self, heading: Optional[Heading]):
        self.pacman.set_buffered_heading(heading)

    def subscribe(self, listener: Listener):
        self.listeners.append(listener)

    # --- SIMULATION ---

    @property
    def is_over(self) -> bool:
        return self.state is not SessionState.PLAYING

    def update(self, elapsed_ms: float) -> List[Event]:
        if self.is_over:
            return []
        elapsed_ms = clamp_elapsed(elapsed_ms, self.config.max_elapsed_ms)

        self.pacman.update(elapsed_ms, self.grid, self.ghosts)
        pack = tuple(self.ghosts)
        for ghost in self.ghosts:
            ghost.update(elapsed_ms, self.pacman, self.grid, pack, self.rng)

        events = self.resolver.resolve(self)
        for event in events:
            for listener in self.listeners:
                listener(event)
        return events

    def reset_positions(self):
        """Put every actor back at its start after Pac-Man is caught."""
        self.pacman.reset()
        for ghost in self.ghosts:
            ghost.reset()

    def restart(self):
        self._build_maze()
        self.reset_positions()
        self.pacman.lives = self.config.starting_lives
        self.score = 0
        self.state = SessionState.PLAYING
        logger.info("Session restarted")

    # --- OUTPUT ---

    def snapshot(self) -> SessionSnapshot:
        pac = self.pacman
        return SessionSnapshot(
            state=self.state,
            score=self.score,
            walls=self._walls,
            lair=self._lair,
            dots=frozenset(self.dots),
            pellets=frozenset(self.pellets),
            pacman=PacManView(pac.pos.x, pac.pos.y, pac.heading, pac.power_mode, pac.lives),
            ghosts=tuple(
                GhostView(g.archetype, g.pos.x, g.pos.y, g.heading, g.mode, g.frightened)
                for g in self.ghosts
            ),
        )
