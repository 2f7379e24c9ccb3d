"""Per-tick contact checks: pickups, ghost collisions and the end of the game."""

from __future__ import annotations
import logging
from enum import Enum, auto
from typing import List

from .config import DEFAULT_CONFIG, GameConfig
from .events import Event, EventKind
from .geometry import tile_center

logger = logging.getLogger(__name__)


class SessionState(Enum):
    PLAYING = auto()
    WIN = auto()
    GAME_OVER = auto()


class Resolver:
    """Turns the positions left by movement into score, lives and state changes.

    Works on a session-like object exposing ``grid``, ``pacman``, ``ghosts``,
    ``dots``, ``pellets``, ``score``, ``state`` and ``reset_positions()``.
    """

    def __init__(self, config: GameConfig = DEFAULT_CONFIG):
        self.config = config

    def resolve(self, session) -> List[Event]:
        events: List[Event] = []
        self.eat_dots(session, events)
        self.eat_pellets(session, events)
        self.check_ghosts(session, events)

        if session.state is SessionState.PLAYING and not session.dots and not session.pellets:
            session.state = SessionState.WIN
            events.append(Event(EventKind.WIN, score=session.score))
            logger.info("Maze cleared with %d points", session.score)
        return events

    def _within_reach(self, session, tile, tolerance: float) -> bool:
        pac = session.pacman
        center = tile_center(tile, session.grid.tile_size)
        return pac.pos.dist(center) < pac.radius + tolerance

    def eat_dots(self, session, events: List[Event]):
        cfg = self.config
        for tile in sorted(session.dots):
            if not self._within_reach(session, tile, cfg.dot_tolerance):
                continue
            session.grid.consume(*tile)
            session.dots.discard(tile)
            session.score += cfg.dot_points
            events.append(Event(EventKind.DOT_EATEN, points=cfg.dot_points))

    def eat_pellets(self, session, events: List[Event]):
        cfg = self.config
        for tile in sorted(session.pellets):
            if not self._within_reach(session, tile, cfg.pellet_tolerance):
                continue
            session.grid.consume(*tile)
            session.pellets.discard(tile)
            session.score += cfg.pellet_points
            session.pacman.activate_power(cfg.power_duration_ms)
            for ghost in session.ghosts:
                ghost.frighten()
            events.append(Event(EventKind.POWER_ACTIVATED, points=cfg.pellet_points))
            logger.debug("Power pellet at %s eaten, %d left", tile, len(session.pellets))

    def check_ghosts(self, session, events: List[Event]):
        cfg = self.config
        pac = session.pacman
        for ghost in session.ghosts:
            if pac.pos.dist(ghost.pos) >= pac.radius + ghost.radius:
                continue

            if ghost.frightened:
                ghost.send_home()
                session.score += cfg.ghost_points
                events.append(Event(EventKind.GHOST_EATEN, points=cfg.ghost_points))
                logger.debug("%s captured", ghost.archetype.nickname)
                continue

            pac.lives -= 1
            events.append(Event(EventKind.LIFE_LOST))
            logger.info("Caught by %s, %d lives left", ghost.archetype.nickname, pac.lives)
            session.reset_positions()
            if pac.lives <= 0:
                session.state = SessionState.GAME_OVER
                events.append(Event(EventKind.GAME_OVER, score=session.score))
                logger.info("Game over with %d points", session.score)
            # Everyone was moved back to start; nothing else can touch this tick.
            break
