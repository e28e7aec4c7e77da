"""
Systems
========
Per-tick enemy behaviour: descent toward the bottom wall and contact
with the player.
"""

import logging
from typing import List

from .ecs import World
from .grid import Grid
from .components import Player
from .collision import hit_enemy
from .enemies import kill_enemy

logger = logging.getLogger(__name__)


def enemy_advance_system(world: World, grid: Grid, player: Player) -> List[int]:
    """
    Move every enemy down one row.

    An enemy whose footprint already rests on the row above the bottom wall
    is removed instead and costs the player one health. Returns the IDs of
    every enemy removed during the sweep.
    """
    removed = []
    last_row = grid.height - 3  # Lowest legal anchor row

    for enemy in world.query_enemies():
        if enemy.y < last_row:
            grid.clear_enemy(enemy.pos)
            enemy.y += 1
            grid.add_enemy(enemy.pos, enemy.glyph)

            # Descending onto the player counts as contact
            hit = hit_enemy(player, enemy, grid)
            if hit is not None:
                world.destroy_entity(hit)
                removed.append(hit)
        else:
            player.damage(1)
            removed.append(kill_enemy(world, grid, enemy))
            logger.debug('enemy %d reached the bottom, health %d',
                         enemy.id, player.health)

    world.process_dead_entities()
    return removed


def overlap_system(world: World, grid: Grid, player: Player) -> List[int]:
    """Remove every enemy the player is standing in. Returns their IDs."""
    removed = []
    for enemy in world.query_enemies():
        hit = hit_enemy(player, enemy, grid)
        if hit is not None:
            world.destroy_entity(hit)
            removed.append(hit)
    world.process_dead_entities()
    return removed
