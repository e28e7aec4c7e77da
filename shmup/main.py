#!/usr/bin/env python3
"""
TEXT SHMUP - Terminal Arcade Shooter
=====================================
Hold the bottom of the map against a rain of 2x2 enemies.

Controls:
    WASD    - Move
    UP      - Shoot
    ESC     - Pause (in game) / Quit (title, game over)
    ENTER   - Start / Quit from pause / Play again
"""

import argparse
import logging
import random
import sys
import time

try:
    from blessed import Terminal
except ImportError:
    print("ERROR: 'blessed' library required. Install with: pip install blessed")
    sys.exit(1)

from .config import GameConfig, WIDTH, HEIGHT
from .components import GameMode
from .engine import Screen
from .errors import (
    ConfigError, ScreenTextError, ShmupError, TerminalTooSmallError
)
from .game import GameState
from .highscore import HighscoreStore
from .logger import setup_logging
from .player import InputHandler

logger = logging.getLogger(__name__)


# =============================================================================
# UI RENDERING
# =============================================================================

def render_health(screen: Screen, config: GameConfig, health: int):
    """Redraw the row of health dots."""
    x = config.panel_x
    y = 3 * config.height // 5 + 2
    screen.move_to(x, y)
    screen.clear_eol()
    screen.move_to(x, y)
    screen.write('* ' * health)


def render_stats(screen: Screen, game: GameState):
    """Side panel: highscore, score and health."""
    config = game.config
    x = config.panel_x

    screen.save_cursor()
    screen.put_text(x, config.height // 5, 'HIGHSCORE')
    screen.move_to(x, config.height // 5 + 2)
    screen.clear_eol()
    screen.write(str(game.highscore))

    screen.put_text(x, 2 * config.height // 5, 'SCORE')
    screen.move_to(x, 2 * config.height // 5 + 2)
    screen.clear_eol()
    screen.write(str(game.score))

    screen.put_text(x, 3 * config.height // 5, 'HEALTH')
    render_health(screen, config, game.player.health)
    screen.restore_cursor()


def render_playing(screen: Screen, game: GameState, texts: dict):
    game.grid.set(game.player.pos, game.player.glyph)
    screen.draw_grid(game.grid)
    render_stats(screen, game)


def render_title(screen: Screen, game: GameState, texts: dict):
    """Walled map with the rules over it."""
    screen.draw_grid(game.grid)
    screen.put_text(0, game.config.height // 3, texts['title'])


def render_pause(screen: Screen, game: GameState, texts: dict):
    screen.put_text(0, game.config.height // 3, texts['pause'])


def render_game_over(screen: Screen, game: GameState, texts: dict):
    config = game.config
    screen.put_text(config.width // 4 + 2, config.height // 2, 'GAME OVER')
    screen.put_text(config.width // 8, config.height // 2 + 1,
                    'Press ENTER to play again')
    render_stats(screen, game)


RENDERERS = {
    GameMode.TITLE: render_title,
    GameMode.PLAYING: render_playing,
    GameMode.PAUSE: render_pause,
    GameMode.GAME_OVER: render_game_over,
}


# =============================================================================
# STARTUP
# =============================================================================

def parse_args(argv=None) -> argparse.Namespace:
    defaults = GameConfig()
    parser = argparse.ArgumentParser(
        prog='text-shmup',
        description='Terminal arcade shooter.',
    )
    parser.add_argument('--width', type=int, default=WIDTH,
                        help='map width in cells (default: %(default)s)')
    parser.add_argument('--height', type=int, default=HEIGHT,
                        help='map height in cells (default: %(default)s)')
    parser.add_argument('--highscore', default=defaults.highscore_path,
                        help='highscore file, must exist (default: %(default)s)')
    parser.add_argument('--title-file', default=defaults.title_path,
                        help='title screen text')
    parser.add_argument('--pause-file', default=defaults.pause_path,
                        help='pause screen text')
    parser.add_argument('--log-file', default=defaults.log_path,
                        help='log destination (default: %(default)s)')
    parser.add_argument('--debug', action='store_true',
                        help='log at DEBUG level')
    parser.add_argument('--seed', type=int, default=None,
                        help='seed the enemy spawner')
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        width=args.width,
        height=args.height,
        highscore_path=args.highscore,
        title_path=args.title_file,
        pause_path=args.pause_file,
        log_path=args.log_file,
    ).validate()


def load_text(path: str) -> str:
    """Read a static text screen in full."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except OSError as e:
        raise ScreenTextError(f'cannot read {path!r}: {e.strerror}') from e
    except UnicodeError as e:
        raise ScreenTextError(f'{path!r} is not UTF-8 text: {e.reason}') from e


def check_terminal(screen: Screen, config: GameConfig):
    """The map plus the stats panel must fit on screen."""
    min_width = config.panel_x + max(len('HIGHSCORE'), 2 * config.max_health) + 1
    min_height = config.height + 1
    if screen.width < min_width or screen.height < min_height:
        raise TerminalTooSmallError(screen.width, screen.height,
                                    min_width, min_height)


def clock_ms() -> float:
    return time.perf_counter() * 1000.0


# =============================================================================
# MAIN LOOP
# =============================================================================

def run(screen: Screen, game: GameState, texts: dict, clock=clock_ms):
    """
    Drive the game until it quits.

    While playing, input is drained without blocking and one simulation
    tick runs per tick interval. Menu screens block on the next key.
    """
    handler = InputHandler()
    interval = game.config.tick_interval_ms
    shown = None

    while game.running:
        if game.mode is not shown:
            if game.mode is GameMode.PLAYING:
                screen.clear()
            shown = game.mode

        RENDERERS[game.mode](screen, game, texts)
        screen.flush()

        if game.mode is GameMode.PLAYING:
            started = clock()
            keys = [handler.process_key(k) for k in screen.poll_keys()]
            game.tick(started, keys)

            # Sleep for remaining tick time
            remaining = interval - (clock() - started)
            if remaining > 0:
                time.sleep(remaining / 1000.0)
        else:
            key = handler.process_key(screen.wait_key())
            game.tick(clock(), [key])


def main(argv=None):
    """Entry point. Loads files, sets up the terminal and runs the game."""
    args = parse_args(argv)
    try:
        config = build_config(args)
    except ConfigError as e:
        print(f'text-shmup: {e}', file=sys.stderr)
        sys.exit(1)

    setup_logging(config.log_path, logging.DEBUG if args.debug else logging.INFO)
    logger.info('starting: %dx%d map, highscore file %s',
                config.width, config.height, config.highscore_path)

    try:
        store = HighscoreStore(config.highscore_path)
        highscore = store.load()
        texts = {
            'title': load_text(config.title_path),
            'pause': load_text(config.pause_path),
        }

        screen = Screen(Terminal())
        check_terminal(screen, config)

        game = GameState(config, highscore=highscore, store=store,
                         rng=random.Random(args.seed), now=clock_ms())
        with screen.session():
            run(screen, game, texts)
    except ShmupError as e:
        logger.error('fatal: %s', e)
        print(f'text-shmup: {e}', file=sys.stderr)
        sys.exit(1)
    except Exception:
        logger.exception('unhandled exception during game execution')
        raise
    finally:
        logger.info('shutting down')


if __name__ == '__main__':
    main()
