"""
console.py: In-memory character-cell drawing surface the game draws into.

The pygame client subclasses Console to push the cells to a window; tests use
it as-is and inspect the grid.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .constants import SCREEN_WIDTH, SCREEN_HEIGHT, BLACK, WHITE
from .data_models import Key

Color = Tuple[int, int, int]


@dataclass
class Cell:
    glyph: str = " "
    fg: Color = WHITE
    bg: Color = BLACK


class Console:
    """
    A width x height grid of cells plus the per-frame inputs.

    ``frame_time_ms`` and ``key`` are filled in by the backend before each
    tick; the game sets ``quitting`` to ask the backend to exit.
    """

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT):
        self.width = width
        self.height = height
        self.frame_time_ms = 0.0
        self.key: Optional[Key] = None
        self.quitting = False
        self.cells: List[List[Cell]] = [
            [Cell() for _ in range(width)] for _ in range(height)
        ]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cls(self):
        self.cls_bg(BLACK)

    def cls_bg(self, color: Color):
        for row in self.cells:
            for cell in row:
                cell.glyph, cell.fg, cell.bg = " ", WHITE, color

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str):
        """Writes one glyph. Off-grid positions are ignored."""
        if not self.in_bounds(x, y):
            return
        cell = self.cells[y][x]
        cell.glyph, cell.fg, cell.bg = glyph, fg, bg

    def print(self, x: int, y: int, text: str):
        for offset, char in enumerate(text):
            self.set(x + offset, y, WHITE, BLACK, char)

    def print_centered(self, y: int, text: str):
        self.print(self.width // 2 - len(text) // 2, y, text)

    # -------- Inspection --------

    def glyph_at(self, x: int, y: int) -> str:
        return self.cells[y][x].glyph

    def row_text(self, y: int) -> str:
        return "".join(cell.glyph for cell in self.cells[y])
