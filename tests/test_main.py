import io
import itertools
import logging
from types import SimpleNamespace

import pytest
from blessed import Terminal
from blessed.keyboard import Keystroke

from shmup import main as shmup_main
from shmup.components import GameMode
from shmup.config import GameConfig
from shmup.engine import Screen
from shmup.errors import ConfigError, ScreenTextError, TerminalTooSmallError
from shmup.game import GameState

ENTER = Keystroke('\n', code=343, name='KEY_ENTER')
ESCAPE = Keystroke('\x1b', code=361, name='KEY_ESCAPE')
UP = Keystroke('\x1b[A', code=259, name='KEY_UP')

TEXTS = {'title': 'TITLE SCREEN', 'pause': 'PAUSE SCREEN'}


class ScriptedScreen(Screen):
    """Screen whose keyboard replays a fixed script."""

    def __init__(self, waits, polls):
        super().__init__(Terminal(stream=io.StringIO(), force_styling=None))
        self.waits = list(waits)
        self.polls = list(polls)

    def wait_key(self):
        return self.waits.pop(0)

    def poll_keys(self):
        return self.polls.pop(0) if self.polls else []


def fake_clock():
    counter = itertools.count(0, 100)
    return lambda: next(counter)


def test_parse_args_defaults():
    args = shmup_main.parse_args([])
    config = shmup_main.build_config(args)
    assert (config.width, config.height) == (30, 30)
    assert config.highscore_path == 'highscore.txt'
    assert args.seed is None
    assert not args.debug


def test_parse_args_overrides():
    args = shmup_main.parse_args(['--width', '40', '--height', '20',
                                  '--highscore', 'hs.txt', '--seed', '7'])
    config = shmup_main.build_config(args)
    assert (config.width, config.height) == (40, 20)
    assert config.highscore_path == 'hs.txt'
    assert args.seed == 7


def test_build_config_rejects_tiny_map():
    with pytest.raises(ConfigError):
        shmup_main.build_config(shmup_main.parse_args(['--width', '3']))


def test_load_text(tmp_path):
    path = tmp_path / 'title.txt'
    path.write_text('HELLO\n')
    assert shmup_main.load_text(str(path)) == 'HELLO\n'


def test_load_text_missing(tmp_path):
    with pytest.raises(ScreenTextError):
        shmup_main.load_text(str(tmp_path / 'missing.txt'))


def test_load_text_rejects_undecodable_bytes(tmp_path):
    path = tmp_path / 'title.txt'
    path.write_bytes(b'\xff\xfe')
    with pytest.raises(ScreenTextError, match='UTF-8'):
        shmup_main.load_text(str(path))


def test_packaged_screens_exist():
    config = GameConfig()
    assert 'ENTER' in shmup_main.load_text(config.title_path)
    assert 'ESC' in shmup_main.load_text(config.pause_path)


def test_check_terminal():
    config = GameConfig()
    shmup_main.check_terminal(SimpleNamespace(width=80, height=40), config)
    with pytest.raises(TerminalTooSmallError) as info:
        shmup_main.check_terminal(SimpleNamespace(width=40, height=40), config)
    assert info.value.min_width == 47
    with pytest.raises(TerminalTooSmallError):
        shmup_main.check_terminal(SimpleNamespace(width=80, height=24), config)


def test_check_terminal_reads_screen_size(monkeypatch):
    monkeypatch.setattr(Terminal, 'width', property(lambda self: 40))
    monkeypatch.setattr(Terminal, 'height', property(lambda self: 40))
    screen = Screen(Terminal(stream=io.StringIO(), force_styling=None))
    with pytest.raises(TerminalTooSmallError) as info:
        shmup_main.check_terminal(screen, GameConfig())
    assert (info.value.width, info.value.height) == (40, 40)


def test_render_stats_panel():
    screen = Screen(Terminal(stream=io.StringIO(), force_styling=None))
    game = GameState(GameConfig(), highscore=900)
    game.score = 150
    shmup_main.render_stats(screen, game)
    screen.flush()
    assert screen.term.stream.getvalue() == 'HIGHSCORE900SCORE150HEALTH* * * '


def test_run_title_play_pause_quit():
    screen = ScriptedScreen(waits=[ENTER, ENTER], polls=[[UP], [ESCAPE]])
    game = GameState(GameConfig(), now=0)

    shmup_main.run(screen, game, TEXTS, clock=fake_clock())

    assert not game.running
    assert game.mode is GameMode.PAUSE
    assert len(game.world.bullets) == 1
    out = screen.term.stream.getvalue()
    assert 'TITLE SCREEN' in out
    assert 'PAUSE SCREEN' in out
    assert 'HIGHSCORE' in out


def test_run_title_escape_quits_immediately():
    screen = ScriptedScreen(waits=[ESCAPE], polls=[])
    game = GameState(GameConfig(), now=0)
    shmup_main.run(screen, game, TEXTS, clock=fake_clock())
    assert not game.running
    assert game.mode is GameMode.TITLE


def test_main_missing_highscore_is_fatal(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as info:
        shmup_main.main(['--highscore', 'absent.txt',
                         '--log-file', str(tmp_path / 'game.log')])
    assert info.value.code == 1
    assert 'absent.txt' in capsys.readouterr().err
    assert 'fatal' in (tmp_path / 'game.log').read_text()


@pytest.mark.parametrize('contents', [b'\xff', b'1_000'])
def test_main_unreadable_highscore_is_fatal(tmp_path, monkeypatch, capsys,
                                            contents):
    monkeypatch.chdir(tmp_path)
    (tmp_path / 'hs.txt').write_bytes(contents)
    with pytest.raises(SystemExit) as info:
        shmup_main.main(['--highscore', 'hs.txt',
                         '--log-file', str(tmp_path / 'game.log')])
    assert info.value.code == 1
    assert 'hs.txt' in capsys.readouterr().err


def test_main_bad_map_size_exits_1(tmp_path, capsys):
    with pytest.raises(SystemExit) as info:
        shmup_main.main(['--width', '3',
                         '--log-file', str(tmp_path / 'game.log')])
    assert info.value.code == 1
    assert 'at least 5x5' in capsys.readouterr().err


@pytest.fixture(autouse=True)
def detach_log_handlers():
    yield
    logger = logging.getLogger('shmup')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
