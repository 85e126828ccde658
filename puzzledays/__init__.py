"""Solutions to daily puzzles 0 to 20, with a runner that solves them concurrently."""

__version__ = "0.1.0"