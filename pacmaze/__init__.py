"""Pac-Man maze, ghost AI and scoring core with a pygame front end."""

from .config import DEFAULT_CONFIG, MAZE_LAYOUT, GameConfig
from .errors import ConfigError, MazeError, PacmazeError
from .events import Event, EventKind
from .geometry import Heading, Vec2
from .ghosts import Archetype, Ghost, GhostMode
from .maze import CellKind, Grid
from .pacman import PacMan
from .resolver import SessionState
from .session import Session, SessionSnapshot

__version__ = "1.0.0"
