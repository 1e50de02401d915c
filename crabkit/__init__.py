"""A terminal roguelike, and building blocks for a small shell."""

__version__ = "0.1.0"