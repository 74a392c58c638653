"""User-configurable settings, read from the command line."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

THEME_NAMES: tuple[str, ...] = ("Classic", "Contrast")
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    theme: str = "Classic"
    show_available_blocks: bool = True
    show_status: bool = True

    # Input
    vi_keys: bool = False

    # Logging
    log_level: str = "WARNING"
    log_file: str | None = None

    @classmethod
    def from_args(cls, argv: Sequence[str] | None = None) -> AppSettings:
        args = build_parser().parse_args(argv)
        return cls(
            theme=args.theme,
            show_available_blocks=not args.no_hints,
            show_status=not args.no_status,
            vi_keys=args.vi_keys,
            log_level=args.log_level,
            log_file=args.log_file,
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termchess",
        description="Two-player chess board in the terminal. "
        "Arrow keys move the cursor, Enter selects and moves, r resets, q quits.",
    )
    parser.add_argument(
        "--theme",
        default="Classic",
        help=f"board colours, one of: {', '.join(THEME_NAMES)}",
    )
    parser.add_argument(
        "--no-hints",
        action="store_true",
        help="do not highlight the squares the selected piece can reach",
    )
    parser.add_argument(
        "--no-status",
        action="store_true",
        help="hide the status line under the board",
    )
    parser.add_argument(
        "--vi-keys",
        action="store_true",
        help="also move the cursor with h/j/k/l",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="write log records here instead of stderr",
    )
    return parser
