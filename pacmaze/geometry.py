"""Positions, headings and tile arithmetic shared by every actor."""

from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

Tile = Tuple[int, int]


@dataclass
class Vec2:
    x: float
    y: float

    def __add__(self, o): return Vec2(self.x + o.x, self.y + o.y)
    def __sub__(self, o): return Vec2(self.x - o.x, self.y - o.y)
    def __mul__(self, k): return Vec2(self.x * k, self.y * k)
    def __eq__(self, o): return abs(self.x - o.x) < 0.001 and abs(self.y - o.y) < 0.001

    def dist_sq(self, o):
        dx = self.x - o.x
        dy = self.y - o.y
        return dx * dx + dy * dy

    def dist(self, o):
        return math.sqrt(self.dist_sq(o))

    def copy(self):
        return Vec2(self.x, self.y)


class Heading(Enum):
    # Declaration order doubles as the ghost tie-break order.
    RIGHT = (1, 0)
    LEFT = (-1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def vector(self) -> Vec2:
        return Vec2(self.dx, self.dy)

    @property
    def angle(self) -> float:
        """Screen-space angle: right 0, down pi/2, left pi, up -pi/2."""
        return math.atan2(self.dy, self.dx)

    @property
    def reverse(self) -> "Heading":
        return _REVERSE[self]

    def is_perpendicular(self, other: "Heading") -> bool:
        return self.dx != other.dx and self.dy != other.dy


_REVERSE = {
    Heading.RIGHT: Heading.LEFT,
    Heading.LEFT: Heading.RIGHT,
    Heading.UP: Heading.DOWN,
    Heading.DOWN: Heading.UP,
}


def tile_of(pos: Vec2, tile_size: int) -> Tile:
    return (math.floor(pos.x / tile_size), math.floor(pos.y / tile_size))


def tile_center(tile: Tile, tile_size: int) -> Vec2:
    col, row = tile
    return Vec2((col + 0.5) * tile_size, (row + 0.5) * tile_size)
