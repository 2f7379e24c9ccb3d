import pytest

from pacmaze.config import GameConfig
from pacmaze.geometry import Heading, Vec2, tile_center, tile_of
from pacmaze.maze import CellKind, Grid
from pacmaze.mover import align_to_lane, clamp_elapsed, scale_speed, step


def test_blocked_by_wall_in_three_cell_strip():
    config = GameConfig(cols=3, rows=1, tunnel_rows=())
    grid = Grid([[CellKind.WALL, CellKind.OPEN, CellKind.WALL]], config)
    start = tile_center((1, 0), 16)

    moved = step(start, Heading.RIGHT, 2.2, 3, grid)

    assert tile_of(moved, 16) == (1, 0)
    assert moved == start


@pytest.mark.parametrize("speed", [0.5, 2.2, 8, 13.75])
def test_walls_are_impenetrable(grid, speed):
    for row in range(grid.rows):
        for col in range(grid.cols):
            if not grid.is_walkable(col, row):
                continue
            center = tile_center((col, row), grid.tile_size)
            for heading in Heading:
                ahead = grid.cell(col + heading.dx, row + heading.dy)
                if ahead is CellKind.WALL:
                    assert step(center, heading, speed, 7, grid) == center, (col, row, heading)


def test_moves_freely_along_a_corridor(grid):
    start = tile_center((1, 5), 16)
    moved = step(start, Heading.RIGHT, 2.2, 7, grid)
    assert moved.x == pytest.approx(start.x + 2.2)
    assert moved.y == start.y


def test_halts_at_tile_center_before_a_wall(grid):
    # (1, 5) has a wall to its left
    start = Vec2(1.8 * 16, 5.5 * 16)
    moved = step(start, Heading.LEFT, 10, 7, grid)
    assert moved == tile_center((1, 5), 16)


def test_step_does_not_mutate_input(grid):
    start = tile_center((1, 5), 16)
    step(start, Heading.RIGHT, 2.0, 7, grid)
    assert start == tile_center((1, 5), 16)


def test_tunnel_wrap_left_edge(grid):
    start = Vec2(2, 14.5 * 16)
    moved = step(start, Heading.LEFT, 3, 7, grid)
    assert moved.x == pytest.approx(grid.width - 1)
    assert tile_of(moved, 16) == (27, 14)


def test_tunnel_wrap_right_edge(grid):
    start = Vec2(grid.width - 1, 14.5 * 16)
    moved = step(start, Heading.RIGHT, 1, 7, grid)
    assert moved.x == pytest.approx(0)


def test_lair_needs_permission(grid):
    above_gate = tile_center((13, 11), 16)
    assert step(above_gate, Heading.DOWN, 10, 7, grid) == above_gate
    assert step(above_gate, Heading.DOWN, 10, 7, grid, allow_lair=True) != above_gate


def test_clamp_elapsed():
    assert clamp_elapsed(-5) == 0
    assert clamp_elapsed(16) == 16
    assert clamp_elapsed(5000) == 100
    assert clamp_elapsed(250, max_ms=50) == 50


def test_scale_speed_is_frame_rate_independent():
    assert scale_speed(2.2, 16) == pytest.approx(2.2)
    assert scale_speed(2.2, 32) == pytest.approx(4.4)
    assert scale_speed(2.0, 8, reference_ms=16) == pytest.approx(1.0)


def test_align_to_lane():
    pos = Vec2(37.0, 90.0)
    assert align_to_lane(pos, Heading.UP, 16) == Vec2(40.0, 90.0)
    assert align_to_lane(pos, Heading.LEFT, 16) == Vec2(37.0, 88.0)
