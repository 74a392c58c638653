"""Move and attack square generation per piece type."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from termchess.core.enums import PieceType, Side
from termchess.core.types import Coordinate, clamp, is_on_board

if TYPE_CHECKING:
    from termchess.core.board import Board
    from termchess.core.piece import Piece


@dataclass(frozen=True, slots=True)
class AvailableBlocks:
    """Squares a selected piece can reach.

    ``move_blocks`` are empty destinations, ``attack_blocks`` are occupied
    ones it can capture into.
    """

    move_blocks: frozenset[Coordinate] = field(default_factory=frozenset)
    attack_blocks: frozenset[Coordinate] = field(default_factory=frozenset)

    EMPTY: ClassVar[AvailableBlocks]

    def __contains__(self, coord: object) -> bool:
        return coord in self.move_blocks or coord in self.attack_blocks

    @property
    def is_empty(self) -> bool:
        return not self.move_blocks and not self.attack_blocks

    @property
    def all_blocks(self) -> frozenset[Coordinate]:
        return self.move_blocks | self.attack_blocks


AvailableBlocks.EMPTY = AvailableBlocks()


def advance_rank(rank: int, steps: int, side: Side) -> int:
    """Rank reached after *steps* forward for *side*, saturating at the edge."""
    return clamp(rank + steps * side.pawn_direction)


def available_blocks(piece: Piece, board: Board, coord: Coordinate) -> AvailableBlocks:
    """Move/attack squares for *piece* standing on *coord*."""
    match piece.piece_type:
        case PieceType.PAWN:
            return _pawn_blocks(piece, board, coord)
        case (
            PieceType.KING
            | PieceType.QUEEN
            | PieceType.BISHOP
            | PieceType.KNIGHT
            | PieceType.ROOK
        ):
            return AvailableBlocks.EMPTY


def _pawn_blocks(piece: Piece, board: Board, coord: Coordinate) -> AvailableBlocks:
    file, rank = coord
    side = piece.side
    one_step = advance_rank(rank, 1, side)

    moves: set[Coordinate] = set()
    attacks: set[Coordinate] = set()

    # The double step is tested on its own; the square in between may be occupied.
    if not piece.has_moved:
        target = (file, advance_rank(rank, 2, side))
        if board.is_empty(target):
            moves.add(target)

    target = (file, one_step)
    if board.is_empty(target):
        moves.add(target)

    # Any occupant on a forward diagonal counts, whichever side owns it.
    for df in (1, -1):
        if not is_on_board(file + df, one_step):
            continue
        target = (file + df, one_step)
        if not board.is_empty(target):
            attacks.add(target)

    return AvailableBlocks(frozenset(moves), frozenset(attacks))
