"""Board colour schemes expressed as blessed formatter names."""

from __future__ import annotations

import logging
from dataclasses import dataclass

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board, as blessed colour names.

    Squares are ``(foreground, background)`` pairs. Highlights only replace
    the background, so the checker foreground shows through.
    """

    light_square: tuple[str, str]
    dark_square: tuple[str, str]
    move_block: str  # empty squares the selection can reach
    attack_block: str  # occupied squares the selection can capture
    cursor: str

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=("black", "white"),
            dark_square=("white", "black"),
            move_block="blue",
            attack_block="red",
            cursor="magenta",
        )

    @classmethod
    def contrast(cls) -> BoardTheme:
        return cls(
            light_square=("black", "bright_white"),
            dark_square=("bright_white", "bright_black"),
            move_block="cyan",
            attack_block="yellow",
            cursor="green",
        )


_THEMES = {
    "Classic": BoardTheme.default,
    "Contrast": BoardTheme.contrast,
}


def theme_by_name(name: str) -> BoardTheme:
    """Look up a preset, falling back to Classic for unknown names."""
    factory = _THEMES.get(name)
    if factory is None:
        _LOGGER.warning("Unknown board theme %r, using Classic", name)
        return BoardTheme.default()
    return factory()
