"""
Error Types
============
Everything here is fatal at startup; gameplay itself raises nothing.
"""


class ShmupError(Exception):
    """Base class for all game errors."""


class HighscoreError(ShmupError):
    """The highscore file is missing, unreadable or not an integer."""


class ScreenTextError(ShmupError):
    """A static text screen (title, pause) could not be loaded."""


class TerminalTooSmallError(ShmupError):
    """The terminal cannot fit the grid and the stats panel."""

    def __init__(self, width: int, height: int, min_width: int, min_height: int):
        self.width = width
        self.height = height
        self.min_width = min_width
        self.min_height = min_height
        super().__init__(
            f'Terminal too small: {width}x{height}. '
            f'Minimum: {min_width}x{min_height}'
        )


class ConfigError(ShmupError, ValueError):
    """Settings the simulation cannot run with (e.g. a map below 5x5)."""
