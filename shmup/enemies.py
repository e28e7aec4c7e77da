"""
Enemies
========
Enemy creation and removal. Every enemy is a 2x2 block of its glyph.
"""

import logging

from .ecs import World
from .grid import Grid
from .components import Enemy
from .config import ENEMY_SYM

logger = logging.getLogger(__name__)


def create_enemy(world: World, grid: Grid, x: int, y: int,
                 glyph: str = ENEMY_SYM) -> Enemy:
    """Add an enemy anchored at (x, y) and draw its footprint."""
    enemy = world.add_enemy(x, y, glyph)
    grid.add_enemy(enemy.pos, glyph)
    logger.debug('enemy %d spawned at %s', enemy.id, enemy.pos)
    return enemy


def kill_enemy(world: World, grid: Grid, enemy: Enemy) -> int:
    """Blank the enemy's footprint and mark it for removal."""
    grid.clear_enemy(enemy.pos)
    world.destroy_entity(enemy.id)
    return enemy.id
