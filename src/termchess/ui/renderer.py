"""BoardRenderer — draws a session snapshot as a coloured 8x8 grid."""

from __future__ import annotations

from typing import TYPE_CHECKING

from termchess.core.types import Coordinate
from termchess.game.interfaces import IRenderer
from termchess.ui.theme import BoardTheme

if TYPE_CHECKING:
    from blessed import Terminal

    from termchess.game.session import SessionSnapshot

EMPTY_LABEL = "  "


class BoardRenderer(IRenderer):
    """Pure renderer: builds the frame text, never touches the session."""

    def __init__(
        self,
        term: Terminal,
        theme: BoardTheme | None = None,
        *,
        show_available_blocks: bool = True,
    ) -> None:
        self._term = term
        self._theme = theme or BoardTheme.default()
        self._show_available_blocks = show_available_blocks

    @property
    def theme(self) -> BoardTheme:
        return self._theme

    def square_style(self, coord: Coordinate, snapshot: SessionSnapshot) -> str:
        """Compound formatter name for *coord*, e.g. ``"black_on_blue"``.

        The checker square fixes the foreground; later rules win the background.
        """
        file, rank = coord
        theme = self._theme
        fg, bg = theme.light_square if file % 2 == rank % 2 else theme.dark_square
        if self._show_available_blocks:
            if coord in snapshot.blocks.move_blocks:
                bg = theme.move_block
            elif coord in snapshot.blocks.attack_blocks:
                bg = theme.attack_block
        if coord == snapshot.cursor:
            bg = theme.cursor
        return f"{fg}_on_{bg}"

    def render_square(self, coord: Coordinate, snapshot: SessionSnapshot) -> str:
        piece = snapshot.board[coord]
        text = piece.label if piece is not None else EMPTY_LABEL
        formatter = getattr(self._term, self.square_style(coord, snapshot))
        return formatter(text)

    def render(self, snapshot: SessionSnapshot, status: str = "") -> str:
        rows = [
            "".join(self.render_square((file, rank), snapshot) for file in range(1, 9))
            for rank in range(1, 9)
        ]
        if status:
            rows.append(status)
        return "\n".join(rows)
