"""
Highscore Storage
==================
A plain-text file holding one base-10 integer.
"""

import logging
import re

from .errors import HighscoreError

logger = logging.getLogger(__name__)

# Optional sign, ASCII digits only
INTEGER = re.compile(r'[+-]?[0-9]+')


class HighscoreStore:
    """Reads the stored highscore and overwrites it when beaten."""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> int:
        """Return the stored highscore. The file must exist and parse."""
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                contents = f.read()
        except OSError as e:
            raise HighscoreError(
                f'cannot read highscore file {self.path!r}: {e.strerror}'
            ) from e
        except UnicodeError as e:
            raise HighscoreError(
                f'highscore file {self.path!r} is not UTF-8 text: {e.reason}'
            ) from e

        text = contents.strip()
        if not INTEGER.fullmatch(text):
            raise HighscoreError(
                f'highscore file {self.path!r} does not hold an integer: '
                f'{text[:20]!r}'
            )
        return int(text)

    def save(self, highscore: int) -> bool:
        """
        Persist `highscore` if it beats the stored value.

        The file is truncated to the new text, so a shorter number never
        leaves stale digits behind. Returns True if the file was written.
        """
        stored = self.load()
        if highscore <= stored:
            return False

        try:
            with open(self.path, 'r+', encoding='utf-8') as f:
                f.seek(0)
                f.write(str(highscore))
                f.truncate()
        except OSError as e:
            raise HighscoreError(
                f'cannot write highscore file {self.path!r}: {e.strerror}'
            ) from e

        logger.info('new highscore %d saved (was %d)', highscore, stored)
        return True
