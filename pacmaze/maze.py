"""Maze grid: cell kinds, walkability, tunnel wrap and collectible consumption."""

from __future__ import annotations
import logging
import math
from collections import deque
from enum import Enum, auto
from typing import Iterable, List, Optional, Set

from .config import DEFAULT_CONFIG, MAZE_LAYOUT, GameConfig
from .errors import MazeError
from .geometry import Tile

logger = logging.getLogger(__name__)


class CellKind(Enum):
    WALL = auto()
    OPEN = auto()
    DOT = auto()
    POWER_PELLET = auto()
    GHOST_LAIR = auto()


CELL_CODES = {
    "#": CellKind.WALL,
    " ": CellKind.OPEN,
    ".": CellKind.DOT,
    "o": CellKind.POWER_PELLET,
    "-": CellKind.GHOST_LAIR,
}

COLLECTIBLE_KINDS = (CellKind.DOT, CellKind.POWER_PELLET)


class Grid:
    """Tile map of one session.

    Only DOT and POWER_PELLET cells ever change (to OPEN, through
    :meth:`consume`); everything else is fixed at construction.
    """

    def __init__(self, cells: List[List[CellKind]], config: GameConfig = DEFAULT_CONFIG):
        self.config = config
        self.cols = config.cols
        self.rows = config.rows
        self.tile_size = config.tile_size
        self.tunnel_rows = frozenset(config.tunnel_rows)
        self._cells = [list(row) for row in cells]

    @classmethod
    def from_layout(cls, layout: Iterable[str] = MAZE_LAYOUT,
                    config: GameConfig = DEFAULT_CONFIG) -> "Grid":
        """Parse and validate a layout of cell codes, raising MazeError if unplayable."""
        lines = list(layout)
        if len(lines) != config.rows:
            raise MazeError(f"layout has {len(lines)} rows, expected {config.rows}")

        cells = []
        for r, line in enumerate(lines):
            if len(line) != config.cols:
                raise MazeError(f"row {r} has {len(line)} columns, expected {config.cols}")
            try:
                cells.append([CELL_CODES[ch] for ch in line])
            except KeyError as e:
                raise MazeError(f"unknown cell code {e.args[0]!r} in row {r}") from None

        grid = cls(cells, config)
        grid.validate()
        logger.debug("Loaded %dx%d maze with %d dots and %d power pellets",
                     grid.cols, grid.rows,
                     len(grid.collectibles(CellKind.DOT)),
                     len(grid.collectibles(CellKind.POWER_PELLET)))
        return grid

    # --- QUERIES ---

    @property
    def width(self) -> int:
        return self.cols * self.tile_size

    @property
    def height(self) -> int:
        return self.rows * self.tile_size

    def is_tunnel_row(self, row: int) -> bool:
        return row in self.tunnel_rows

    def cell(self, col: int, row: int) -> Optional[CellKind]:
        """Cell kind at a tile, or None when the tile is off the map."""
        if not 0 <= row < self.rows:
            return None
        if not 0 <= col < self.cols:
            if not self.is_tunnel_row(row):
                return None
            col %= self.cols
        return self._cells[row][col]

    def is_walkable(self, col: int, row: int, allow_lair: bool = False) -> bool:
        kind = self.cell(col, row)
        if kind is None or kind is CellKind.WALL:
            return False
        if kind is CellKind.GHOST_LAIR:
            return allow_lair
        return True

    def can_occupy(self, x: float, y: float, radius: float, allow_lair: bool = False) -> bool:
        """Whether a body of ``radius`` centered at (x, y) fits.

        Only the tile under the center is checked unless the config asks for
        the stricter four-corner test, which makes actors stick at corridor
        turns when they are not exactly centered.
        """
        ts = self.tile_size
        if not self.config.corner_collision:
            return self.is_walkable(math.floor(x / ts), math.floor(y / ts), allow_lair)
        corners = ((x + radius, y + radius), (x - radius, y + radius),
                   (x + radius, y - radius), (x - radius, y - radius))
        return all(self.is_walkable(math.floor(cx / ts), math.floor(cy / ts), allow_lair)
                   for cx, cy in corners)

    def resolve_tunnel(self, x: float) -> float:
        if x < 0:
            return self.width + x
        if x >= self.width:
            return x - self.width
        return x

    def collectibles(self, kind: CellKind) -> Set[Tile]:
        return {(c, r)
                for r, row in enumerate(self._cells)
                for c, cell in enumerate(row)
                if cell is kind}

    def walls(self) -> Set[Tile]:
        return self.collectibles(CellKind.WALL)

    def lair(self) -> Set[Tile]:
        return self.collectibles(CellKind.GHOST_LAIR)

    # --- MUTATION ---

    def consume(self, col: int, row: int) -> Optional[CellKind]:
        """Clear a dot or power pellet; returns what was there, None otherwise."""
        kind = self.cell(col, row)
        if kind not in COLLECTIBLE_KINDS:
            return None
        self._cells[row][col % self.cols] = CellKind.OPEN
        return kind

    # --- VALIDATION ---

    def validate(self):
        cfg = self.config
        last_col, last_row = self.cols - 1, self.rows - 1

        if not self.tunnel_rows:
            raise MazeError("maze has no tunnel row")

        for c in range(self.cols):
            for r in (0, last_row):
                if self._cells[r][c] is not CellKind.WALL:
                    raise MazeError(f"border tile ({c}, {r}) is not a wall")
        for r in range(1, last_row):
            edges = (self._cells[r][0], self._cells[r][last_col])
            if self.is_tunnel_row(r):
                if any(kind in (CellKind.WALL, CellKind.GHOST_LAIR) for kind in edges):
                    raise MazeError(f"tunnel row {r} is blocked at the maze edge")
            elif any(kind is not CellKind.WALL for kind in edges):
                raise MazeError(f"border of row {r} is open but it is not a tunnel row")

        start = (math.floor(cfg.pacman_start[0]), math.floor(cfg.pacman_start[1]))
        if not self.is_walkable(*start):
            raise MazeError(f"Pac-Man start tile {start} is not walkable")
        for home in cfg.ghost_homes:
            tile = (math.floor(home[0]), math.floor(home[1]))
            if not self.is_walkable(*tile, allow_lair=True):
                raise MazeError(f"ghost home tile {tile} is not walkable")
        if self.lair() and not self.is_walkable(*cfg.lair_exit):
            raise MazeError(f"lair exit {cfg.lair_exit} must be walkable outside the lair")

        targets = self.collectibles(CellKind.DOT) | self.collectibles(CellKind.POWER_PELLET)
        if not targets:
            raise MazeError("maze has no dots or power pellets")
        unreachable = targets - self.reachable_from(start)
        if unreachable:
            raise MazeError(f"{len(unreachable)} collectibles cannot be reached, e.g. {min(unreachable)}")

    def reachable_from(self, start: Tile) -> Set[Tile]:
        """Tiles Pac-Man can walk to from ``start``, wrapping through tunnels."""
        seen = {start}
        queue = deque([start])
        while queue:
            col, row = queue.popleft()
            for dc, dr in ((1, 0), (-1, 0), (0, -1), (0, 1)):
                nc, nr = col + dc, row + dr
                if not self.is_walkable(nc, nr):
                    continue
                nxt = (nc % self.cols, nr)
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return seen

