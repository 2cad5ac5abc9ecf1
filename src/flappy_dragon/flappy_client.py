#!/usr/bin/env python3
"""
flappy_client.py

pygame window backend: draws the console grid, pumps events and drives
GameState.tick once per frame.
"""

import argparse
import random
from typing import Dict, Optional, Sequence, Tuple

import pygame

from .constants import (
    WINDOW_TITLE, SCREEN_WIDTH, SCREEN_HEIGHT, DEFAULT_CELL_SIZE, RENDER_FPS
)
from .console import Console, Color
from .data_models import Key
from .game_state import GameState

KEY_BINDINGS = {
    pygame.K_SPACE: Key.SPACE,
    pygame.K_p: Key.P,
    pygame.K_q: Key.Q,
}


def map_key(pygame_key: int) -> Optional[Key]:
    """Translates a pygame key code, None for keys the game ignores."""
    return KEY_BINDINGS.get(pygame_key)


# ----------------- Console backed by a pygame window -----------------

class PygameConsole(Console):
    def __init__(self, cell_size: int = DEFAULT_CELL_SIZE,
                 width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT):
        super().__init__(width, height)
        self.cell_size = cell_size
        self.screen = pygame.display.set_mode((width * cell_size, height * cell_size))
        pygame.display.set_caption(WINDOW_TITLE)
        self.font = pygame.font.Font(None, cell_size + cell_size // 3)
        self._glyph_cache: Dict[Tuple[str, Color], pygame.Surface] = {}

    def _glyph(self, glyph: str, fg: Color) -> pygame.Surface:
        surface = self._glyph_cache.get((glyph, fg))
        if surface is None:
            surface = self.font.render(glyph, True, fg)
            self._glyph_cache[(glyph, fg)] = surface
        return surface

    def present(self):
        """Blits every cell to the window and flips the display."""
        size = self.cell_size
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                rect = pygame.Rect(x * size, y * size, size, size)
                self.screen.fill(cell.bg, rect)
                if cell.glyph != " ":
                    surface = self._glyph(cell.glyph, cell.fg)
                    self.screen.blit(surface, surface.get_rect(center=rect.center))
        pygame.display.flip()


# ----------------- Game Client (window / event loop) -----------------

class FlappyClient:
    def __init__(self, seed: Optional[int] = None, fps: int = RENDER_FPS,
                 cell_size: int = DEFAULT_CELL_SIZE):
        self.seed = seed
        self.fps = fps
        self.cell_size = cell_size
        self.state = GameState(rng=random.Random(seed))
        self.console: Optional[PygameConsole] = None
        self.clock: Optional[pygame.time.Clock] = None

    def open(self):
        """Opens the window. pygame.error here is fatal."""
        pygame.init()
        try:
            self.console = PygameConsole(cell_size=self.cell_size)
        except pygame.error as e:
            print(f"Could not open display: {e}")
            pygame.quit()
            raise
        self.clock = pygame.time.Clock()
        print(f"{WINDOW_TITLE} started: {SCREEN_WIDTH}x{SCREEN_HEIGHT} cells, "
              f"{self.fps} FPS, seed={self.seed}")

    def run(self):
        """The main client execution loop."""
        self.open()
        console = self.console
        try:
            while not console.quitting:
                console.frame_time_ms = float(self.clock.tick(self.fps))
                console.key = self._poll_events(console)
                self.state.tick(console)
                console.present()
        finally:
            pygame.quit()
        print("Game closed.")

    def _poll_events(self, console: Console) -> Optional[Key]:
        """Drains the event queue, keeping only the first mapped key press."""
        pressed = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                console.quitting = True
            elif event.type == pygame.KEYDOWN and pressed is None:
                pressed = map_key(event.key)
        return pressed


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flappy-dragon", description=WINDOW_TITLE)
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for obstacle generation")
    parser.add_argument("--fps", type=_positive_int, default=RENDER_FPS,
                        help="window frames per second")
    parser.add_argument("--cell-size", type=_positive_int, default=DEFAULT_CELL_SIZE,
                        help="pixel size of one console cell")
    return parser


def main(argv: Optional[Sequence[str]] = None):
    args = build_parser().parse_args(argv)
    client = FlappyClient(seed=args.seed, fps=args.fps, cell_size=args.cell_size)
    client.run()


if __name__ == "__main__":
    main()
