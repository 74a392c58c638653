"""Core domain layer — board model and move rules with zero external dependencies.

Quick start::

    from termchess.core import Board, available_blocks

    board = Board.initial()
    pawn = board[(5, 2)]
    blocks = available_blocks(pawn, board, (5, 2))
    print(sorted(blocks.move_blocks))
"""

from termchess.core.board import Board
from termchess.core.enums import PieceType, Side
from termchess.core.errors import InvalidStateError, TermChessError
from termchess.core.move_rules import AvailableBlocks, advance_rank, available_blocks
from termchess.core.piece import Piece, display_label
from termchess.core.types import (
    ALL_COORDS,
    Coordinate,
    clamp,
    coord_name,
    is_on_board,
    make_coord,
    parse_coord,
)

__all__ = [
    # Enums
    "PieceType",
    "Side",
    # Types / helpers
    "ALL_COORDS",
    "Coordinate",
    "clamp",
    "coord_name",
    "is_on_board",
    "make_coord",
    "parse_coord",
    # Domain objects
    "AvailableBlocks",
    "Board",
    "Piece",
    "advance_rank",
    "available_blocks",
    "display_label",
    # Errors
    "InvalidStateError",
    "TermChessError",
]
