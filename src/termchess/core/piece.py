"""Piece value object and display labels."""

from __future__ import annotations

from dataclasses import dataclass, replace

from termchess.core.enums import PieceType, Side

_LABELS: dict[PieceType, str] = {
    PieceType.PAWN: "PA",
    PieceType.KING: "KI",
    PieceType.QUEEN: "QU",
    PieceType.BISHOP: "BI",
    PieceType.KNIGHT: "KN",
    PieceType.ROOK: "TO",
}


def display_label(piece_type: PieceType) -> str:
    """Two-character code drawn for *piece_type*, e.g. PAWN -> 'PA'."""
    return _LABELS[piece_type]


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece on the board.

    ``has_moved`` is only meaningful for pawns, where it gates the
    two-square advance.
    """

    side: Side
    piece_type: PieceType
    has_moved: bool = False

    @property
    def label(self) -> str:
        return display_label(self.piece_type)

    def moved(self) -> Piece:
        """The piece as stored after a relocation."""
        if self.piece_type == PieceType.PAWN:
            return replace(self, has_moved=True)
        return self

    def __str__(self) -> str:
        return f"{self.side} {self.piece_type.name.lower()}"
