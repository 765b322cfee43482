"""A terminal snake game and a collection of small puzzle solutions."""

__version__ = "0.1.0"