"""
Collision
==========
Point-versus-footprint tests between single cells and 2x2 enemies.
"""

import logging
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


def footprint_contains(anchor: Tuple[int, int], pos: Tuple[int, int]) -> bool:
    """Check if `pos` lies inside the 2x2 footprint anchored at `anchor`."""
    ax, ay = anchor
    x, y = pos
    return x in (ax, ax + 1) and y in (ay, ay + 1)


def hit_enemy(player, enemy, grid) -> Optional[int]:
    """
    Check if the player is inside an enemy's footprint.

    On a hit the player loses one health, the footprint is blanked on the
    grid and the enemy's ID is returned so the caller can remove it.
    Returns None when they do not overlap; nothing is changed then.
    """
    if not footprint_contains(enemy.pos, player.pos):
        return None

    player.damage(1)
    grid.clear_enemy(enemy.pos)
    logger.debug('player hit by enemy %d at %s, health %d',
                 enemy.id, enemy.pos, player.health)
    return enemy.id
