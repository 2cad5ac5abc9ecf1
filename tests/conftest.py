"""Shared fixtures for the game tests."""
import pytest

from flappy_dragon.console import Console
from flappy_dragon.game_state import GameState


class FixedRandom:
    """Stands in for random.Random with constant draws."""

    def __init__(self, gap_y=25, speed=2.0):
        self.gap_y = gap_y
        self.speed = speed

    def randrange(self, start, stop):
        return self.gap_y

    def uniform(self, a, b):
        return self.speed


@pytest.fixture
def fixed_rng_factory():
    return FixedRandom


@pytest.fixture
def fixed_rng(fixed_rng_factory):
    return fixed_rng_factory()


@pytest.fixture
def console():
    return Console()


@pytest.fixture
def playing_state(fixed_rng):
    state = GameState(rng=fixed_rng)
    state.restart()
    return state
