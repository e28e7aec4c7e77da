"""
Enemy Spawner
==============
Drops new enemies along the top row at random columns.
"""

import logging
import random
from typing import List, Optional

from .ecs import World
from .grid import Grid
from .components import Enemy
from .config import ENEMY_SYM
from .enemies import create_enemy

logger = logging.getLogger(__name__)

SPAWN_ROW = 1


def free_columns(world: World, width: int, row: int = SPAWN_ROW) -> List[int]:
    """
    Anchor columns on `row` where a new enemy fits.

    A column is free when its footprint stays inside the walls and does
    not overlap any live enemy.
    """
    columns = []
    for x in range(1, width - 2):
        blocked = any(
            abs(enemy.x - x) <= 1 and abs(enemy.y - row) <= 1
            for enemy in world.query_enemies()
        )
        if not blocked:
            columns.append(x)
    return columns


def spawn_system(world: World, grid: Grid, rng: random.Random,
                 glyph: str = ENEMY_SYM) -> Optional[Enemy]:
    """Spawn one enemy at a uniformly chosen free column, if any."""
    columns = free_columns(world, grid.width)
    if not columns:
        logger.debug('spawn skipped: top row is full')
        return None
    return create_enemy(world, grid, rng.choice(columns), SPAWN_ROW, glyph)
