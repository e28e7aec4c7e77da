import random

import pytest

from shmup.config import GameConfig
from shmup.grid import Grid
from shmup.ecs import World
from shmup.player import create_player


class FirstColumn(random.Random):
    """Spawner RNG that always takes the leftmost free column."""

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def grid(config):
    g = Grid(config.width, config.height)
    g.generate()
    return g


@pytest.fixture
def world():
    return World()


@pytest.fixture
def player(config):
    return create_player(config.player_start)


@pytest.fixture
def quiet_config():
    """Only bullets move on their own; enemies are placed by hand."""
    return GameConfig(enemy_move_ms=10 ** 9, enemy_spawn_ms=10 ** 9)
