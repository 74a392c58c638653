"""GameSession — cursor, selection and board for one interactive session.

Turns input intents into cursor movement, selection and committed moves.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from termchess.core.board import Board
from termchess.core.move_rules import AvailableBlocks, available_blocks
from termchess.core.piece import Piece
from termchess.core.types import Coordinate, clamp, coord_name
from termchess.game.interfaces import (
    CURSOR_STEPS,
    InputIntent,
    InteractionPhase,
    SessionOutcome,
)

_LOGGER = logging.getLogger(__name__)

HOME_CURSOR: Coordinate = (1, 1)

# ── Event definitions ────────────────────────────────────────────────────────

SelectCallback = Callable[[Coordinate], None]
MoveCallback = Callable[[Coordinate, Coordinate, Piece | None], None]  # from, to, captured


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_select: list[SelectCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)


# ── State ────────────────────────────────────────────────────────────────────


@dataclass
class SelectionState:
    """Cursor focus plus the square whose moves are on display, if any."""

    cursor: Coordinate = HOME_CURSOR
    selected: Coordinate | None = None

    @property
    def phase(self) -> InteractionPhase:
        if self.selected is None:
            return InteractionPhase.IDLE
        return InteractionPhase.PIECE_SELECTED


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything a renderer needs for one frame."""

    board: Board
    blocks: AvailableBlocks
    cursor: Coordinate
    selected: Coordinate | None

    @property
    def selection_active(self) -> bool:
        return self.selected is not None


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """Single-session selection → move state machine.

    Not thread-safe: one intent is fully processed before the next.
    """

    __slots__ = ("_board", "_selection", "events")

    def __init__(self, board: Board | None = None) -> None:
        self._board = board if board is not None else Board.initial()
        self._selection = SelectionState()
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def selection(self) -> SelectionState:
        return self._selection

    @property
    def cursor(self) -> Coordinate:
        return self._selection.cursor

    @property
    def phase(self) -> InteractionPhase:
        return self._selection.phase

    # ── Queries ──────────────────────────────────────────────────────────

    def available_blocks(self) -> AvailableBlocks:
        """Blocks of the selected piece, empty when nothing is selected."""
        selected = self._selection.selected
        if selected is None:
            return AvailableBlocks.EMPTY
        piece = self._board[selected]
        if piece is None:
            return AvailableBlocks.EMPTY
        return available_blocks(piece, self._board, selected)

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            board=self._board.copy(),
            blocks=self.available_blocks(),
            cursor=self._selection.cursor,
            selected=self._selection.selected,
        )

    # ── Commands ─────────────────────────────────────────────────────────

    def handle(self, intent: InputIntent) -> SessionOutcome:
        """Process one intent to completion."""
        if intent in CURSOR_STEPS:
            return self.move_cursor(intent)
        if intent == InputIntent.CONFIRM:
            return self.confirm()
        return SessionOutcome.NONE

    def move_cursor(self, intent: InputIntent) -> SessionOutcome:
        df, dr = CURSOR_STEPS[intent]
        file, rank = self._selection.cursor
        new_cursor = (clamp(file + df), clamp(rank + dr))
        if new_cursor == self._selection.cursor:
            return SessionOutcome.NONE
        self._selection.cursor = new_cursor
        return SessionOutcome.CURSOR_MOVED

    def confirm(self) -> SessionOutcome:
        cursor = self._selection.cursor
        selected = self._selection.selected

        if selected is not None and cursor in self.available_blocks():
            captured = self._board.relocate(selected, cursor)
            self._selection.selected = None
            _LOGGER.debug("move %s -> %s", coord_name(selected), coord_name(cursor))
            for cb in self.events.on_move:
                cb(selected, cursor, captured)
            return SessionOutcome.MOVED

        if not self._board.is_empty(cursor):
            self._selection.selected = cursor
            _LOGGER.debug("selected %s", coord_name(cursor))
            for cb in self.events.on_select:
                cb(cursor)
            return SessionOutcome.SELECTED

        return SessionOutcome.NONE

    def reset(self) -> None:
        """Fresh starting board, cursor home, no selection."""
        self._board = Board.initial()
        self._selection = SelectionState()
        _LOGGER.debug("session reset")
