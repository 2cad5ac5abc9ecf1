"""Flappy Dragon: a flappy-bird style game on an 80x50 character console."""

__version__ = "0.1.0"
