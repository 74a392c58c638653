"""Tests for pawn move/attack generation and the non-pawn placeholders."""

import pytest

from termchess.core.board import Board
from termchess.core.enums import PieceType, Side
from termchess.core.move_rules import AvailableBlocks, advance_rank, available_blocks
from termchess.core.piece import Piece

BLACK_PAWN = Piece(Side.BLACK, PieceType.PAWN)
WHITE_PAWN = Piece(Side.WHITE, PieceType.PAWN)
BLOCKER = Piece(Side.WHITE, PieceType.KNIGHT)


def _board_with(*placements: tuple[tuple[int, int], Piece]) -> Board:
    board = Board()
    for coord, piece in placements:
        board.place(coord, piece)
    return board


class TestAdvanceRank:
    def test_black_moves_up(self) -> None:
        assert advance_rank(2, 1, Side.BLACK) == 3
        assert advance_rank(2, 2, Side.BLACK) == 4

    def test_white_moves_down(self) -> None:
        assert advance_rank(7, 1, Side.WHITE) == 6
        assert advance_rank(7, 2, Side.WHITE) == 5

    def test_saturates_at_edges(self) -> None:
        assert advance_rank(8, 1, Side.BLACK) == 8
        assert advance_rank(7, 2, Side.BLACK) == 8
        assert advance_rank(1, 1, Side.WHITE) == 1
        assert advance_rank(2, 2, Side.WHITE) == 1


class TestPawnMoves:
    def test_unmoved_black_pawn_two_squares(self) -> None:
        board = _board_with(((5, 2), BLACK_PAWN))
        blocks = available_blocks(BLACK_PAWN, board, (5, 2))
        assert blocks.move_blocks == {(5, 3), (5, 4)}
        assert blocks.attack_blocks == frozenset()

    def test_unmoved_white_pawn_two_squares(self) -> None:
        board = _board_with(((4, 7), WHITE_PAWN))
        blocks = available_blocks(WHITE_PAWN, board, (4, 7))
        assert blocks.move_blocks == {(4, 6), (4, 5)}

    def test_moved_pawn_one_square(self) -> None:
        pawn = Piece(Side.BLACK, PieceType.PAWN, has_moved=True)
        board = _board_with(((5, 3), pawn))
        blocks = available_blocks(pawn, board, (5, 3))
        assert blocks.move_blocks == {(5, 4)}

    def test_one_step_blocked_keeps_two_step(self) -> None:
        board = _board_with(((5, 2), BLACK_PAWN), ((5, 3), BLOCKER))
        blocks = available_blocks(BLACK_PAWN, board, (5, 2))
        assert blocks.move_blocks == {(5, 4)}

    def test_two_step_blocked(self) -> None:
        board = _board_with(((5, 2), BLACK_PAWN), ((5, 4), BLOCKER))
        blocks = available_blocks(BLACK_PAWN, board, (5, 2))
        assert blocks.move_blocks == {(5, 3)}

    def test_straight_ahead_never_attacked(self) -> None:
        board = _board_with(((5, 2), BLACK_PAWN), ((5, 3), BLOCKER))
        blocks = available_blocks(BLACK_PAWN, board, (5, 2))
        assert (5, 3) not in blocks

    def test_pawn_on_last_rank_has_no_moves(self) -> None:
        pawn = Piece(Side.BLACK, PieceType.PAWN, has_moved=True)
        board = _board_with(((3, 8), pawn))
        blocks = available_blocks(pawn, board, (3, 8))
        assert blocks.is_empty


class TestPawnAttacks:
    def test_opposing_piece_on_diagonal(self) -> None:
        board = _board_with(((5, 2), BLACK_PAWN), ((6, 3), BLOCKER))
        blocks = available_blocks(BLACK_PAWN, board, (5, 2))
        assert (6, 3) in blocks.attack_blocks

    def test_both_diagonals(self) -> None:
        board = _board_with(((5, 2), BLACK_PAWN), ((6, 3), BLOCKER), ((4, 3), BLOCKER))
        blocks = available_blocks(BLACK_PAWN, board, (5, 2))
        assert blocks.attack_blocks == {(4, 3), (6, 3)}

    def test_white_attacks_downward(self) -> None:
        target = Piece(Side.BLACK, PieceType.BISHOP)
        board = _board_with(((4, 7), WHITE_PAWN), ((3, 6), target), ((3, 8), target))
        blocks = available_blocks(WHITE_PAWN, board, (4, 7))
        assert blocks.attack_blocks == {(3, 6)}

    def test_own_side_on_diagonal_is_attackable(self) -> None:
        friend = Piece(Side.BLACK, PieceType.KNIGHT)
        board = _board_with(((5, 2), BLACK_PAWN), ((6, 3), friend))
        blocks = available_blocks(BLACK_PAWN, board, (5, 2))
        assert (6, 3) in blocks.attack_blocks

    def test_empty_diagonal_not_attacked(self) -> None:
        board = _board_with(((5, 2), BLACK_PAWN))
        blocks = available_blocks(BLACK_PAWN, board, (5, 2))
        assert not blocks.attack_blocks

    @pytest.mark.parametrize("file", [1, 8])
    def test_edge_file_skips_off_board(self, file: int) -> None:
        board = Board.initial()
        board.place((file, 3), None)
        pawn = board[(file, 2)]
        assert pawn is not None
        blocks = available_blocks(pawn, board, (file, 2))
        assert all(1 <= f <= 8 and 1 <= r <= 8 for f, r in blocks.all_blocks)

    def test_initial_position_pawn(self) -> None:
        board = Board.initial()
        pawn = board[(5, 2)]
        assert pawn is not None
        blocks = available_blocks(pawn, board, (5, 2))
        assert blocks.move_blocks == {(5, 3), (5, 4)}
        assert blocks.attack_blocks == frozenset()


class TestOtherPieces:
    @pytest.mark.parametrize(
        "piece_type",
        [PieceType.KING, PieceType.QUEEN, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK],
    )
    def test_no_blocks(self, piece_type: PieceType) -> None:
        piece = Piece(Side.BLACK, piece_type)
        board = _board_with(((4, 4), piece), ((5, 5), BLOCKER))
        assert available_blocks(piece, board, (4, 4)) == AvailableBlocks.EMPTY


class TestAvailableBlocks:
    def test_contains_either_set(self) -> None:
        blocks = AvailableBlocks(frozenset({(1, 3)}), frozenset({(2, 3)}))
        assert (1, 3) in blocks
        assert (2, 3) in blocks
        assert (3, 3) not in blocks
        assert blocks.all_blocks == {(1, 3), (2, 3)}

    def test_empty(self) -> None:
        assert AvailableBlocks.EMPTY.is_empty
        assert not AvailableBlocks(frozenset({(1, 3)})).is_empty
