"""Solved programming drills on numbers, strings and grids, with a command-line runner."""

__version__ = "0.1.0"
__all__ = ["__version__"]