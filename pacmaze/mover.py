"""Movement rules shared by Pac-Man and the ghosts."""

from __future__ import annotations
import math

from .geometry import Heading, Vec2, tile_center, tile_of


def clamp_elapsed(elapsed_ms: float, max_ms: float = 100.0) -> float:
    """Bound a frame delta so a stalled frame cannot push actors through walls."""
    return max(0.0, min(max_ms, elapsed_ms))


def scale_speed(base_speed: float, elapsed_ms: float, reference_ms: float = 16.0) -> float:
    return base_speed * elapsed_ms / reference_ms


def step(position: Vec2, heading: Heading, speed: float, radius: float, grid,
         allow_lair: bool = False) -> Vec2:
    """Move ``speed`` pixels along ``heading``, or stay put if the target is blocked.

    There is no sliding along walls.  On tunnel rows x wraps around the maze
    edge.  When the tile beyond the landing tile is blocked the actor halts
    at the landing tile's center instead of pressing into the wall.
    """
    candidate = position + heading.vector * speed
    row = math.floor(position.y / grid.tile_size)
    if grid.is_tunnel_row(row):
        candidate.x = grid.resolve_tunnel(candidate.x)
    if not grid.can_occupy(candidate.x, candidate.y, radius, allow_lair):
        return position.copy()

    col, row = tile_of(candidate, grid.tile_size)
    if not grid.is_walkable(col + heading.dx, row + heading.dy, allow_lair):
        center = tile_center((col, row), grid.tile_size)
        if (candidate.x - center.x) * heading.dx > 0:
            candidate.x = center.x
        if (candidate.y - center.y) * heading.dy > 0:
            candidate.y = center.y
    return candidate


def align_to_lane(position: Vec2, heading: Heading, tile_size: int) -> Vec2:
    """Center the coordinate across ``heading`` on its tile.

    Called when an actor turns onto a perpendicular heading so it runs down
    the middle of the new corridor.
    """
    aligned = position.copy()
    if heading.dx:
        aligned.y = (math.floor(position.y / tile_size) + 0.5) * tile_size
    else:
        aligned.x = (math.floor(position.x / tile_size) + 0.5) * tile_size
    return aligned
