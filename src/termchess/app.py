"""Application entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from termchess.settings import AppSettings

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: AppSettings) -> None:
    """Send records to the log file when set; the terminal belongs to the board."""
    if settings.log_file:
        logging.basicConfig(
            filename=settings.log_file,
            level=settings.log_level,
            format=_LOG_FORMAT,
        )
        return

    # stderr shares the screen with the board: only warnings and errors go there.
    requested = logging.getLevelName(settings.log_level)
    level = max(requested, logging.WARNING)
    logging.basicConfig(stream=sys.stderr, level=level, format=_LOG_FORMAT)
    if level != requested:
        _LOGGER.warning(
            "--log-level %s needs --log-file; logging warnings only", settings.log_level
        )


def run_application(argv: Sequence[str] | None = None) -> int:
    """Parse settings and run the terminal board until the user quits."""
    from blessed import Terminal

    from termchess.ui.terminal import TerminalApp

    settings = AppSettings.from_args(argv)
    configure_logging(settings)
    _LOGGER.info("starting with %s", settings)

    TerminalApp(Terminal(), settings).run()
    return 0


def main() -> None:
    """Launch termchess."""
    sys.exit(run_application())


if __name__ == "__main__":
    main()
