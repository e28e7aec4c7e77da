"""
Play Field
===========
Fixed-size character grid shared by the simulation and the renderer.

Coordinates are (x, y) with (0, 0) the upper-left corner. Writes are not
bounds-checked: callers keep every entity inside the wall ring, including the
+1 offsets of 2x2 enemy footprints.
"""

from typing import Callable, List, Optional, Tuple

from .config import BLANK, WALL_SYM


class Grid:
    """A width x height buffer of single display characters."""

    def __init__(self, width: int, height: int, blank: str = BLANK,
                 wall: str = WALL_SYM):
        self.width = width
        self.height = height
        self.blank = blank
        self.wall = wall
        self.cells: List[List[str]] = [
            [blank for _ in range(width)]
            for _ in range(height)
        ]

    def generate(self):
        """Wall off the top and bottom rows and the outer columns."""
        self.cells[0] = [self.wall] * self.width
        self.cells[self.height - 1] = [self.wall] * self.width
        for row in self.cells:
            row[0] = self.wall
            row[self.width - 1] = self.wall

    def set(self, pos: Tuple[int, int], glyph: str):
        x, y = pos
        self.cells[y][x] = glyph

    def get(self, pos: Tuple[int, int]) -> str:
        x, y = pos
        return self.cells[y][x]

    def add_enemy(self, pos: Tuple[int, int], glyph: str):
        """Draw a 2x2 footprint anchored at its upper-left cell."""
        x, y = pos
        self.set((x, y), glyph)
        self.set((x + 1, y), glyph)
        self.set((x, y + 1), glyph)
        self.set((x + 1, y + 1), glyph)

    def clear_enemy(self, pos: Tuple[int, int]):
        """Blank a 2x2 footprint."""
        self.add_enemy(pos, self.blank)

    def rows(self) -> List[str]:
        return [''.join(row) for row in self.cells]

    def display(self, sink, paint: Optional[Callable[[str], str]] = None):
        """
        Write every row to `sink`, top to bottom, one line per row.

        Lines end in CR LF so they stay aligned in raw terminal mode.
        `paint` may wrap each glyph (e.g. in colour sequences).
        """
        for row in self.cells:
            if paint is None:
                line = ''.join(row)
            else:
                line = ''.join(paint(c) for c in row)
            sink.write(line + '\r\n')
