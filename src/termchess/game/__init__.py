"""Interaction layer — selection state machine over the board.

Quick start::

    from termchess.game import GameSession, InputIntent

    session = GameSession()
    session.handle(InputIntent.CURSOR_DOWN)
    session.handle(InputIntent.CONFIRM)  # picks up the pawn on a2
"""

from termchess.game.interfaces import (
    CURSOR_STEPS,
    InputIntent,
    InteractionPhase,
    IRenderer,
    SessionOutcome,
)
from termchess.game.session import (
    GameSession,
    SelectionState,
    SessionEvents,
    SessionSnapshot,
)

__all__ = [
    # Interfaces
    "CURSOR_STEPS",
    "InputIntent",
    "InteractionPhase",
    "IRenderer",
    "SessionOutcome",
    # Concrete
    "GameSession",
    "SelectionState",
    "SessionEvents",
    "SessionSnapshot",
]
