"""Cougar Craves: random dining ideas for BYU students."""

__version__ = "1.0.0"
