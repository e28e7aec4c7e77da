"""
Game State
===========
The simulation context: mode, timers, score, and the entities they drive.

GameState never touches the terminal. The caller supplies the clock value
and already-translated keys to tick(), which keeps timing deterministic.
"""

import logging
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .config import GameConfig
from .grid import Grid
from .ecs import World
from .components import GameMode, Key
from .player import create_player, move_player, fire_bullet
from .projectiles import bullet_system, resolve_bullet_hit
from .spawner import spawn_system
from .systems import enemy_advance_system, overlap_system

logger = logging.getLogger(__name__)


@dataclass
class IntervalTimer:
    """Fires once at least `interval` ms have passed since it last fired."""
    interval: float
    last: float = 0.0

    def ready(self, now: float) -> bool:
        return now - self.last >= self.interval

    def reset(self, now: float):
        self.last = now


class GameState:
    """Central game state container. Passed through all phases."""

    def __init__(self, config: GameConfig, highscore: int = 0,
                 store=None, rng: Optional[random.Random] = None,
                 now: float = 0.0):
        self.config = config
        self.store = store
        self.rng = rng or random.Random()

        self.running = True
        self.mode = GameMode.TITLE

        self.score = 0
        self.highscore = highscore

        self.enemy_timer = IntervalTimer(config.enemy_move_ms, now)
        self.bullet_timer = IntervalTimer(config.bullet_move_ms, now)
        self.spawn_timer = IntervalTimer(config.enemy_spawn_ms, now)

        # Set up map and player
        self.grid = None
        self.world = None
        self.player = None
        self._reset_field()

    def _reset_field(self):
        self.grid = Grid(self.config.width, self.config.height,
                         self.config.blank, self.config.wall_glyph)
        self.grid.generate()
        self.world = World()
        self.player = create_player(self.config.player_start,
                                    self.config.player_glyph,
                                    self.config.max_health)

    def _reset_timers(self, now: float):
        for timer in (self.enemy_timer, self.bullet_timer, self.spawn_timer):
            timer.reset(now)

    def set_mode(self, mode: GameMode):
        if mode is not self.mode:
            logger.info('mode %s -> %s', self.mode.name, mode.name)
        self.mode = mode

    def start_game(self, now: float):
        """Fresh field, full health, zero score. Highscore carries over."""
        self._reset_field()
        self.score = 0
        self._reset_timers(now)
        self.set_mode(GameMode.PLAYING)

    def quit(self):
        logger.info('quit requested from %s', self.mode.name)
        self.running = False

    # -------------------------------------------------------------------------
    # Scoring
    # -------------------------------------------------------------------------

    def score_kills(self, kills: List[int]):
        """Award points for enemies destroyed by bullets."""
        if not kills:
            return
        self.score += self.config.kill_score * len(kills)
        if self.score > self.highscore:
            self.highscore = self.score

    def _trigger_game_over(self):
        logger.info('game over: score %d, highscore %d',
                    self.score, self.highscore)
        self.set_mode(GameMode.GAME_OVER)
        if self.store is not None:
            self.store.save(self.highscore)

    # -------------------------------------------------------------------------
    # Ticking
    # -------------------------------------------------------------------------

    def tick(self, now: float, keys: Iterable[Optional[Key]] = ()):
        """Advance one loop iteration at clock time `now` (milliseconds)."""
        if self.mode is GameMode.PLAYING:
            self._tick_playing(now, keys)
            return

        for key in keys:
            mode = self.mode
            self.handle_menu_key(key, now)
            if self.mode is not mode or not self.running:
                break

    def handle_menu_key(self, key: Optional[Key], now: float):
        """Title, Pause and GameOver only react to Escape and Enter."""
        if self.mode is GameMode.TITLE:
            if key is Key.ENTER:
                self._reset_timers(now)
                self.set_mode(GameMode.PLAYING)
            elif key is Key.ESCAPE:
                self.quit()
        elif self.mode is GameMode.PAUSE:
            if key is Key.ESCAPE:
                self.set_mode(GameMode.PLAYING)
            elif key is Key.ENTER:
                self.quit()
        elif self.mode is GameMode.GAME_OVER:
            if key is Key.ESCAPE:
                self.quit()
            elif key is Key.ENTER:
                self.start_game(now)

    def _tick_playing(self, now: float, keys: Iterable[Optional[Key]]):
        # Move existing enemies
        if self.enemy_timer.ready(now):
            enemy_advance_system(self.world, self.grid, self.player)
            self.enemy_timer.reset(now)

        # Move existing bullets forwards
        if self.bullet_timer.ready(now):
            self.score_kills(bullet_system(self.world, self.grid))
            self.bullet_timer.reset(now)

        # Generate an enemy every spawn interval
        if self.spawn_timer.ready(now):
            spawn_system(self.world, self.grid, self.rng,
                         self.config.enemy_glyph)
            self.spawn_timer.reset(now)

        for key in keys:
            self.handle_play_key(key)
            if self.mode is not GameMode.PLAYING:
                break

        # Check if player ran into an enemy
        overlap_system(self.world, self.grid, self.player)

        if self.player.health <= 0:
            self._trigger_game_over()

    def handle_play_key(self, key: Optional[Key]):
        """WASD to move, Up to shoot, Esc to pause."""
        if key is Key.ESCAPE:
            self.set_mode(GameMode.PAUSE)
        elif key is Key.UP:
            self._fire()
        elif key in (Key.W, Key.A, Key.S, Key.D):
            move_player(self.player, self.grid, key)

    def _fire(self):
        bullet = fire_bullet(self.world, self.player, self.config.bullet_glyph)
        if bullet is None:
            return
        killed = resolve_bullet_hit(self.world, self.grid, bullet)
        if killed is None:
            self.grid.set(bullet.pos, bullet.glyph)
        else:
            self.world.process_dead_entities()
            self.score_kills([killed])
