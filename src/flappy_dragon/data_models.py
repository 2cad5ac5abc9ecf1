"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum

from .constants import PLAYER_START_X, PLAYER_START_Y


class GameMode(Enum):
    """Which per-frame routine the game state runs."""
    MENU = "menu"
    PLAYING = "playing"
    END = "end"


class Key(Enum):
    """Keys the game reacts to. At most one arrives per frame."""
    SPACE = "space"
    P = "p"
    Q = "q"


@dataclass
class Player:
    """The dragon. x only ever grows; the screen scrolls with it."""
    x: int = PLAYER_START_X
    y: int = PLAYER_START_Y
    velocity: float = 0.0


@dataclass
class Obstacle:
    """A wall with a vertical gap centred on gap_y."""
    x: int
    gap_y: int
    size: int
    x_velocity: float

    @property
    def half_size(self) -> int:
        return self.size // 2
