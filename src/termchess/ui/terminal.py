"""TerminalApp — owns the blessed terminal and drives a GameSession."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from termchess.core.types import coord_name
from termchess.game.interfaces import IRenderer, SessionOutcome
from termchess.game.session import GameSession
from termchess.settings import AppSettings
from termchess.ui.keys import describe_key, intent_for_key, is_quit_key, is_reset_key
from termchess.ui.renderer import BoardRenderer
from termchess.ui.theme import theme_by_name

if TYPE_CHECKING:
    from blessed import Terminal
    from blessed.keyboard import Keystroke

_LOGGER = logging.getLogger(__name__)


class TerminalApp:
    """Read a key, feed the session, redraw. Until a quit key arrives."""

    def __init__(
        self,
        term: Terminal,
        settings: AppSettings | None = None,
        session: GameSession | None = None,
        renderer: IRenderer | None = None,
    ) -> None:
        self._term = term
        self._settings = settings or AppSettings()
        self._session = session or GameSession()
        self._renderer = renderer or BoardRenderer(
            term,
            theme_by_name(self._settings.theme),
            show_available_blocks=self._settings.show_available_blocks,
        )
        self._last_key = ""

    @property
    def session(self) -> GameSession:
        return self._session

    def status_line(self) -> str:
        if not self._settings.show_status:
            return ""
        selection = self._session.selection
        parts = [f"cursor {coord_name(selection.cursor)}"]
        if selection.selected is not None:
            parts.append(f"selected {coord_name(selection.selected)}")
        if self._last_key:
            parts.append(f"key {self._last_key}")
        return "  ".join(parts)

    def frame(self) -> str:
        return self._renderer.render(self._session.snapshot(), self.status_line())

    def step(self, key: Keystroke) -> bool:
        """Handle one key. Returns False when the session should end."""
        if is_quit_key(key):
            _LOGGER.info("quit requested")
            return False
        self._last_key = describe_key(key)
        if is_reset_key(key):
            _LOGGER.info("board reset")
            self._session.reset()
            return True
        intent = intent_for_key(key, vi_keys=self._settings.vi_keys)
        outcome = self._session.handle(intent)
        if outcome is not SessionOutcome.NONE:
            _LOGGER.debug("%s -> %s", intent.name, outcome.name)
        return True

    def draw(self) -> None:
        term = self._term
        print(term.home + term.clear + self.frame(), end="", flush=True)

    def run(self) -> None:
        term = self._term
        with term.fullscreen(), term.cbreak(), term.hidden_cursor():
            self.draw()
            try:
                while self.step(term.inkey()):
                    self.draw()
            except KeyboardInterrupt:
                _LOGGER.info("interrupted")
