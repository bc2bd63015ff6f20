"""A top-down tank battle game with a keyboard-driven tank and a random bot."""

__version__ = "0.1.0"