"""A small text roguelike played in the terminal."""

__version__ = "0.1.0"