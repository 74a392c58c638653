"""Core enumerations for the board domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Owning side of a piece."""

    WHITE = 0
    BLACK = 1

    @property
    def pawn_direction(self) -> int:
        """Rank step of a pawn advance: Black moves up the ranks, White down."""
        return 1 if self is Side.BLACK else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """The closed set of piece kinds."""

    PAWN = 1
    KING = 2
    QUEEN = 3
    BISHOP = 4
    KNIGHT = 5
    ROOK = 6
