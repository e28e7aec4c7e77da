"""
Projectile System
==================
Bullet lifecycle: spawn above the player, climb one row per bullet tick,
hit an enemy or leave through the top wall.
"""

import logging
from typing import List, Optional

from .ecs import World
from .grid import Grid
from .components import Bullet
from .enemies import kill_enemy

logger = logging.getLogger(__name__)


def spawn_bullet(world: World, x: int, y: int, glyph: str) -> Bullet:
    """Spawn a single bullet. Drawing is left to the caller."""
    return world.add_bullet(x, y, glyph)


def resolve_bullet_hit(world: World, grid: Grid, bullet: Bullet) -> Optional[int]:
    """
    Destroy the enemy under `bullet`, if there is one.

    Both the enemy and the bullet are marked for removal. Returns the
    killed enemy's ID, or None when the bullet's cell is clear.
    """
    enemy = world.enemy_at(bullet.pos)
    if enemy is None:
        return None
    kill_enemy(world, grid, enemy)
    world.destroy_entity(bullet.id)
    logger.debug('bullet %d destroyed enemy %d at %s',
                 bullet.id, enemy.id, enemy.pos)
    return enemy.id


def bullet_system(world: World, grid: Grid) -> List[int]:
    """
    Move every bullet up one row and resolve hits.

    Returns the IDs of enemies destroyed this sweep.
    """
    kills = []

    for bullet in world.query_bullets():
        # Leave anything drawn over the bullet alone
        if grid.get(bullet.pos) == bullet.glyph:
            grid.set(bullet.pos, grid.blank)

        if bullet.y <= 1:
            world.destroy_entity(bullet.id)
            continue

        bullet.y -= 1
        killed = resolve_bullet_hit(world, grid, bullet)
        if killed is None:
            grid.set(bullet.pos, bullet.glyph)
        else:
            kills.append(killed)

    world.process_dead_entities()
    return kills
