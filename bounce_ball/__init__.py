"""Bounce Ball: keep the ball on the board with a paddle guarding the open edge."""

__version__ = "0.1.0"
