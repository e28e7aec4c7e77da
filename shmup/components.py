"""
Component Definitions
======================
Entity records and the game mode. Plain dataclasses with no game logic.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Tuple

from .config import BULLET_SYM, ENEMY_SYM, MAX_HEALTH, PLAYER_SYM


class GameMode(Enum):
    TITLE = auto()      # Title screen
    PLAYING = auto()    # Currently playing
    PAUSE = auto()      # Pause screen
    GAME_OVER = auto()  # Game over screen


@dataclass
class Player:
    """The player's single-cell avatar."""
    x: int
    y: int
    glyph: str = PLAYER_SYM
    health: int = MAX_HEALTH

    @property
    def pos(self) -> Tuple[int, int]:
        return self.x, self.y

    def damage(self, amount: int = 1):
        """Lose health, never dropping below zero."""
        self.health = max(0, self.health - amount)


@dataclass
class Enemy:
    """A 2x2 enemy. (x, y) is the upper-left anchor of its footprint."""
    id: int
    x: int
    y: int
    glyph: str = ENEMY_SYM

    @property
    def pos(self) -> Tuple[int, int]:
        return self.x, self.y

    def footprint(self) -> List[Tuple[int, int]]:
        return [
            (self.x, self.y), (self.x + 1, self.y),
            (self.x, self.y + 1), (self.x + 1, self.y + 1),
        ]


@dataclass
class Bullet:
    """A single-cell projectile travelling upward."""
    id: int
    x: int
    y: int
    glyph: str = BULLET_SYM

    @property
    def pos(self) -> Tuple[int, int]:
        return self.x, self.y


class Key(Enum):
    """Keys the game reacts to, decoupled from the terminal library."""
    ESCAPE = auto()
    ENTER = auto()
    UP = auto()
    W = auto()
    A = auto()
    S = auto()
    D = auto()
