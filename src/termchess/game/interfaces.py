"""Abstract interfaces and state enums for the interaction layer.

The terminal driver depends on these, not on concrete renderers, so the
session can be driven and inspected without a terminal.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from termchess.game.session import SessionSnapshot


# ── Input intents ────────────────────────────────────────────────────────────


class InputIntent(IntEnum):
    """Neutral input signal delivered by the input source."""

    CURSOR_UP = auto()
    CURSOR_DOWN = auto()
    CURSOR_LEFT = auto()
    CURSOR_RIGHT = auto()
    CONFIRM = auto()
    OTHER = auto()


# (file delta, rank delta) per cursor intent
CURSOR_STEPS: dict[InputIntent, tuple[int, int]] = {
    InputIntent.CURSOR_UP: (0, -1),
    InputIntent.CURSOR_DOWN: (0, 1),
    InputIntent.CURSOR_LEFT: (-1, 0),
    InputIntent.CURSOR_RIGHT: (1, 0),
}


# ── State machine ────────────────────────────────────────────────────────────


class InteractionPhase(IntEnum):
    """States of the selection state machine."""

    IDLE = auto()
    PIECE_SELECTED = auto()


class SessionOutcome(IntEnum):
    """What a single intent did to the session."""

    NONE = auto()
    CURSOR_MOVED = auto()
    SELECTED = auto()
    MOVED = auto()


# ── Collaborators ────────────────────────────────────────────────────────────


class IRenderer(ABC):
    """Turns a session snapshot into something drawable. Never mutates."""

    @abstractmethod
    def render(self, snapshot: SessionSnapshot, status: str = "") -> str:
        """Return the full frame for *snapshot*."""
