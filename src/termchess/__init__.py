"""termchess — two-player chess board in the terminal."""

__version__ = "0.1.0"
