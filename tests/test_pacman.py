from unittest.mock import Mock

import pytest

from pacmaze.geometry import Heading, Vec2
from pacmaze.pacman import PacMan


@pytest.fixture
def pacman(config):
    return PacMan(config)


def test_starts_on_the_start_tile(pacman):
    assert pacman.tile == (13, 23)
    assert pacman.heading is Heading.RIGHT
    assert pacman.buffered_heading is None
    assert pacman.lives == 3
    assert not pacman.power_mode


def test_advances_along_heading(pacman, grid):
    x = pacman.pos.x
    pacman.update(16, grid)
    assert pacman.pos.x == pytest.approx(x + 2.2)


def test_buffered_turn_into_wall_is_kept_for_later(pacman, grid):
    # the tile above the start is a wall
    pacman.set_buffered_heading(Heading.UP)
    pacman.update(16, grid)
    assert pacman.heading is Heading.RIGHT
    assert pacman.buffered_heading is Heading.UP


def test_buffered_turn_commits_when_corridor_opens(pacman, grid):
    # (12, 22) is open above (12, 23)
    pacman.pos = Vec2(12.5 * 16 + 3, 23.5 * 16)
    pacman.set_buffered_heading(Heading.UP)
    pacman.update(16, grid)

    assert pacman.heading is Heading.UP
    assert pacman.buffered_heading is None
    assert pacman.pos.x == 12.5 * 16
    assert pacman.pos.y == pytest.approx(23.5 * 16 - 2.2)


def test_early_turn_retried_until_intersection(pacman, grid):
    pacman.pos = Vec2(10.5 * 16, 23.5 * 16)
    pacman.set_buffered_heading(Heading.UP)
    for _ in range(20):
        pacman.update(16, grid)
        if pacman.heading is Heading.UP:
            break
    assert pacman.heading is Heading.UP
    assert pacman.tile[0] == 12


def test_reverse_commits_immediately(pacman, grid):
    pacman.set_buffered_heading(Heading.LEFT)
    pacman.update(16, grid)
    assert pacman.heading is Heading.LEFT
    assert pacman.pos.x < 13.5 * 16


def test_power_mode_counts_down_and_calms_ghosts(pacman, grid):
    ghosts = [Mock(frightened=True), Mock(frightened=True)]
    pacman.activate_power(100)

    pacman.update(60, grid, ghosts)
    assert pacman.power_mode
    assert all(g.frightened for g in ghosts)

    pacman.update(40, grid, ghosts)
    assert not pacman.power_mode
    assert pacman.power_timer == 0
    assert not any(g.frightened for g in ghosts)


def test_reset_keeps_lives(pacman, grid):
    pacman.lives = 2
    pacman.activate_power(1000)
    pacman.set_buffered_heading(Heading.DOWN)
    pacman.update(16, grid)
    pacman.reset()

    assert pacman.tile == (13, 23)
    assert pacman.heading is Heading.RIGHT
    assert pacman.buffered_heading is None
    assert not pacman.power_mode
    assert pacman.lives == 2
