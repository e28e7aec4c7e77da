"""
Rendering Engine
=================
Thin layer over a blessed Terminal: screen modes, cursor control,
coloured grid painting and key polling.
"""

from contextlib import contextmanager
from typing import Dict, List, Optional

try:
    from blessed import Terminal
except ImportError:
    raise ImportError("'blessed' library required. Install with: pip install blessed")

from .config import BULLET_SYM, ENEMY_SYM, PLAYER_SYM, WALL_SYM


# ANSI 256 color constants
NEON_CYAN = 51
NEON_YELLOW = 226
NEON_RED = 196
GRAY_MED = 245

DEFAULT_PALETTE = {
    PLAYER_SYM: NEON_CYAN,
    ENEMY_SYM: NEON_RED,
    BULLET_SYM: NEON_YELLOW,
    WALL_SYM: GRAY_MED,
}


class Screen:
    """
    Buffered writer for one terminal.

    Output accumulates until flush(), so a whole frame reaches the
    terminal in a single write.
    """

    def __init__(self, term: Terminal, palette: Optional[Dict[str, int]] = None):
        self.term = term
        self.palette = DEFAULT_PALETTE if palette is None else palette
        self._parts: List[str] = []
        self._painted: Dict[str, str] = {}

    @property
    def width(self) -> int:
        return self.term.width

    @property
    def height(self) -> int:
        return self.term.height

    @contextmanager
    def session(self):
        """Alternate screen, raw keyboard and hidden cursor for the duration."""
        with self.term.fullscreen(), self.term.cbreak(), self.term.hidden_cursor():
            self.clear()
            self.flush()
            try:
                yield self
            finally:
                self.write(self.term.normal)
                self.flush()

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def write(self, text: str):
        self._parts.append(text)

    def flush(self):
        """Send everything written since the last flush."""
        output = ''.join(self._parts)
        self._parts.clear()
        if output:
            self.term.stream.write(output)
            self.term.stream.flush()

    def move_to(self, x: int, y: int):
        self.write(self.term.move_xy(x, y))

    def clear_eol(self):
        self.write(self.term.clear_eol)

    def clear(self):
        self.write(self.term.home + self.term.clear)

    def save_cursor(self):
        self.write(self.term.save)

    def restore_cursor(self):
        self.write(self.term.restore)

    def put_text(self, x: int, y: int, text: str):
        """Write (possibly multi-line) text with every line starting at column x."""
        for i, line in enumerate(text.splitlines()):
            self.move_to(x, y + i)
            self.write(line)

    def paint(self, glyph: str) -> str:
        """Wrap a glyph in its palette colour."""
        painted = self._painted.get(glyph)
        if painted is None:
            color = self.palette.get(glyph)
            painted = glyph if color is None else self.term.color(color)(glyph)
            self._painted[glyph] = painted
        return painted

    def draw_grid(self, grid):
        """Paint the whole grid from the top-left corner."""
        self.move_to(0, 0)
        grid.display(self, paint=self.paint)

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def poll_keys(self) -> list:
        """Drain all pending keystrokes without waiting."""
        keys = []
        key = self.term.inkey(timeout=0)
        while key:
            keys.append(key)
            key = self.term.inkey(timeout=0)
        return keys

    def wait_key(self):
        """Block until a key is pressed."""
        return self.term.inkey()
