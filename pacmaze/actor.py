"""Common state of everything that moves through the maze."""

from __future__ import annotations
from typing import List

from .geometry import Heading, Tile, Vec2, tile_center, tile_of
from .mover import align_to_lane, step


class Actor:
    def __init__(self, start: Vec2, radius: float, tile_size: int,
                 heading: Heading = Heading.LEFT):
        self.start_pos = start.copy()
        self.start_heading = heading
        self.pos = start.copy()
        self.heading = heading
        self.radius = radius
        self.tile_size = tile_size

    @property
    def tile(self) -> Tile:
        return tile_of(self.pos, self.tile_size)

    def can_head(self, heading: Heading, grid, allow_lair: bool = False) -> bool:
        """Probe just past half a tile from the current tile's center."""
        center = tile_center(self.tile, self.tile_size)
        reach = self.tile_size / 2 + 1
        return step(center, heading, reach, self.radius, grid, allow_lair) != center

    def open_headings(self, grid, allow_lair: bool = False) -> List[Heading]:
        return [h for h in Heading if self.can_head(h, grid, allow_lair)]

    def turn(self, heading: Heading):
        if heading.is_perpendicular(self.heading):
            self.pos = align_to_lane(self.pos, heading, self.tile_size)
        self.heading = heading

    def advance(self, speed: float, grid, allow_lair: bool = False):
        self.pos = step(self.pos, self.heading, speed, self.radius, grid, allow_lair)

    def reset(self):
        self.pos = self.start_pos.copy()
        self.heading = self.start_heading

    def __repr__(self):
        return f"{type(self).__name__}(pos=({self.pos.x:.1f}, {self.pos.y:.1f}), heading={self.heading.name})"
