"""A top-down dungeon action game played with pygame."""

__version__ = "0.0.1"