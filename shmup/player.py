"""
Player Module
==============
Player creation, movement, firing and keyboard translation.
"""

from typing import Optional, Tuple

from .ecs import World
from .grid import Grid
from .components import Bullet, Key, Player
from .config import MAX_HEALTH, PLAYER_SYM
from .projectiles import spawn_bullet


def create_player(start: Tuple[int, int], glyph: str = PLAYER_SYM,
                  health: int = MAX_HEALTH) -> Player:
    """Create the player at `start` with full health."""
    x, y = start
    return Player(x, y, glyph, health)


class InputHandler:
    """
    Translates blessed keystrokes into game keys.

    Anything the game does not react to becomes None.
    """

    NAMED_KEYS = {
        'KEY_ESCAPE': Key.ESCAPE,
        'KEY_ENTER': Key.ENTER,
        'KEY_UP': Key.UP,
    }
    CHAR_KEYS = {
        'w': Key.W,
        'a': Key.A,
        's': Key.S,
        'd': Key.D,
        '\x1b': Key.ESCAPE,
        '\r': Key.ENTER,
        '\n': Key.ENTER,
    }

    def process_key(self, key) -> Optional[Key]:
        """Process a single key press from blessed's inkey()."""
        if key is None or not key:
            return None
        if key.is_sequence:
            return self.NAMED_KEYS.get(key.name)
        return self.CHAR_KEYS.get(str(key))


# Per-key step
_MOVES = {
    Key.W: (0, -1),
    Key.S: (0, 1),
    Key.A: (-1, 0),
    Key.D: (1, 0),
}


def move_player(player: Player, grid: Grid, key: Key) -> bool:
    """
    Step the player one cell, stopping at the inner edge of the walls.

    The vacated cell is blanked; the new cell is drawn by the next render.
    Returns True if the player moved.
    """
    if key not in _MOVES:
        return False
    dx, dy = _MOVES[key]
    nx, ny = player.x + dx, player.y + dy
    if not (1 <= nx <= grid.width - 2 and 1 <= ny <= grid.height - 2):
        return False

    grid.set(player.pos, grid.blank)
    player.x = nx
    player.y = ny
    return True


def fire_bullet(world: World, player: Player, glyph: str) -> Optional[Bullet]:
    """Spawn a bullet directly above the player. No-op against the top wall."""
    if player.y <= 1:
        return None
    return spawn_bullet(world, player.x, player.y - 1, glyph)
