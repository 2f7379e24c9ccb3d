import random

import pytest

from pacmaze.config import GameConfig
from pacmaze.maze import Grid
from pacmaze.session import Session

# 9x7 maze with a tunnel through row 3 and no ghost lair.
MINI_LAYOUT = (
    "#########",
    "#o......#",
    "#.##.##.#",
    "   . .   ",
    "#.##.##.#",
    "#.......#",
    "#########",
)


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def grid(config):
    return Grid.from_layout(config=config)


@pytest.fixture
def mini_config():
    return GameConfig(
        cols=9,
        rows=7,
        tunnel_rows=(3,),
        pacman_start=(4.5, 3.5),
        ghost_homes=((1.5, 1.5), (7.5, 1.5), (1.5, 5.5), (7.5, 5.5)),
        scatter_corners=((8, 0), (0, 0), (8, 6), (0, 6)),
    )


@pytest.fixture
def mini_session(mini_config):
    return Session(mini_config, MINI_LAYOUT, rng=random.Random(7))


@pytest.fixture
def session(config):
    return Session(config, rng=random.Random(1234))
