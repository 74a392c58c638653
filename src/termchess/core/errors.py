"""Exception hierarchy."""

from __future__ import annotations


class TermChessError(Exception):
    """Base class for errors raised by termchess."""


class InvalidStateError(TermChessError):
    """A caller broke a board invariant, e.g. relocating from an empty square."""
