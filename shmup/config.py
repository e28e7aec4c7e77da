"""
Game Configuration
===================
Tunable constants and the GameConfig container passed to the game.
"""

import os
from dataclasses import dataclass
from typing import Tuple

from .errors import ConfigError


DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')

# Map dimensions
WIDTH = 30
HEIGHT = 30

# Glyphs
PLAYER_SYM = '@'
BULLET_SYM = '|'
ENEMY_SYM = 'X'
WALL_SYM = '#'
BLANK = ' '

# Timers (milliseconds)
ENEMY_SPD = 300       # Enemy movement interval
BULLET_SPD = 200      # Bullet movement interval
ENEMY_GEN_SPD = 1000  # Enemy generation interval
TICK_INTERVAL = 50    # Simulation tick while playing

MAX_HEALTH = 3
KILL_SCORE = 50

MIN_SIZE = 5


@dataclass
class GameConfig:
    """Everything the simulation and the front end need to know up front."""
    width: int = WIDTH
    height: int = HEIGHT

    player_glyph: str = PLAYER_SYM
    enemy_glyph: str = ENEMY_SYM
    bullet_glyph: str = BULLET_SYM
    wall_glyph: str = WALL_SYM
    blank: str = BLANK

    enemy_move_ms: float = ENEMY_SPD
    bullet_move_ms: float = BULLET_SPD
    enemy_spawn_ms: float = ENEMY_GEN_SPD
    tick_interval_ms: float = TICK_INTERVAL

    max_health: int = MAX_HEALTH
    kill_score: int = KILL_SCORE

    highscore_path: str = 'highscore.txt'
    title_path: str = os.path.join(DATA_DIR, 'title.txt')
    pause_path: str = os.path.join(DATA_DIR, 'pause.txt')
    log_path: str = 'shmup.log'

    @property
    def player_start(self) -> Tuple[int, int]:
        """Player spawn cell: centre column, row above the bottom wall."""
        return self.width // 2, self.height - 2

    @property
    def panel_x(self) -> int:
        """Left column of the stats panel."""
        return 5 * self.width // 4

    def validate(self) -> 'GameConfig':
        """Reject settings the simulation cannot run with."""
        if self.width < MIN_SIZE or self.height < MIN_SIZE:
            raise ConfigError(
                f'grid must be at least {MIN_SIZE}x{MIN_SIZE}, '
                f'got {self.width}x{self.height}'
            )
        for name in ('enemy_move_ms', 'bullet_move_ms',
                     'enemy_spawn_ms', 'tick_interval_ms'):
            if getattr(self, name) <= 0:
                raise ConfigError(f'{name} must be positive')
        if self.max_health < 1:
            raise ConfigError('max_health must be at least 1')
        return self
