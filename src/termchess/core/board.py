"""Board - exclusive mapping from coordinate to piece."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from termchess.core.enums import PieceType, Side
from termchess.core.errors import InvalidStateError
from termchess.core.piece import Piece
from termchess.core.types import ALL_COORDS, Coordinate, coord_name, make_coord

_LOGGER = logging.getLogger(__name__)

# file -> piece type on each side's back rank
_BACK_RANK: tuple[tuple[int, PieceType], ...] = (
    (1, PieceType.ROOK),
    (2, PieceType.BISHOP),
    (3, PieceType.KNIGHT),
    (4, PieceType.KING),
    (5, PieceType.QUEEN),
    (6, PieceType.KNIGHT),
    (7, PieceType.BISHOP),
    (8, PieceType.ROOK),
)

# side -> (back rank, pawn rank)
_HOME_RANKS: dict[Side, tuple[int, int]] = {
    Side.BLACK: (1, 2),
    Side.WHITE: (8, 7),
}


class Board:
    """Mutable board. Absence of a coordinate means the square is empty."""

    __slots__ = ("_pieces",)

    def __init__(self) -> None:
        self._pieces: dict[Coordinate, Piece] = {}

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: Coordinate) -> Piece | None:
        return self._pieces.get(coord)

    def occupant_at(self, coord: Coordinate) -> Piece | None:
        return self._pieces.get(coord)

    def is_empty(self, coord: Coordinate) -> bool:
        return coord not in self._pieces

    def __contains__(self, coord: object) -> bool:
        return coord in self._pieces

    def __len__(self) -> int:
        return len(self._pieces)

    def __iter__(self) -> Iterator[Coordinate]:
        """Occupied coordinates, rank-major."""
        return (c for c in ALL_COORDS if c in self._pieces)

    def items(self) -> Iterator[tuple[Coordinate, Piece]]:
        return ((c, self._pieces[c]) for c in self)

    def pieces(self, side: Side) -> list[Coordinate]:
        """Coordinates occupied by *side*."""
        return [c for c, p in self.items() if p.side == side]

    # -- Mutation -----------------------------------------------------------

    def place(self, coord: Coordinate, piece: Piece | None) -> None:
        """Put *piece* on *coord* (``None`` empties it). Used for setups."""
        coord = make_coord(*coord)
        if piece is None:
            self._pieces.pop(coord, None)
        else:
            self._pieces[coord] = piece

    def relocate(self, from_coord: Coordinate, to_coord: Coordinate) -> Piece | None:
        """Move the occupant of *from_coord* onto *to_coord*.

        Whatever stood on *to_coord* is discarded and returned. Pawns
        always come out with ``has_moved`` set.
        """
        piece = self._pieces.pop(from_coord, None)
        if piece is None:
            raise InvalidStateError(
                f"Cannot relocate from empty square {coord_name(from_coord)}"
            )
        captured = self._pieces.get(to_coord)
        self._pieces[to_coord] = piece.moved()
        _LOGGER.debug(
            "%s %s -> %s", piece, coord_name(from_coord), coord_name(to_coord)
        )
        if captured is not None:
            _LOGGER.debug("captured %s on %s", captured, coord_name(to_coord))
        return captured

    def copy(self) -> Board:
        b = Board()
        b._pieces = self._pieces.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Starting placement: Black on ranks 1-2, White on ranks 7-8."""
        b = cls()
        for side, (back_rank, pawn_rank) in _HOME_RANKS.items():
            for file, piece_type in _BACK_RANK:
                b._pieces[(file, back_rank)] = Piece(side, piece_type)
            for file in range(1, 9):
                b._pieces[(file, pawn_rank)] = Piece(side, PieceType.PAWN)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._pieces == other._pieces

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(1, 9):
            row = []
            for file in range(1, 9):
                p = self._pieces.get((file, rank))
                row.append(p.label if p else "..")
            rows.append(f"{rank} {' '.join(row)}")
        rows.append("  a  b  c  d  e  f  g  h")
        return "\n".join(rows)
