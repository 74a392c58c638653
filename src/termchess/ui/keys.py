"""Decode blessed keystrokes into input intents."""

from __future__ import annotations

from typing import TYPE_CHECKING

from termchess.game.interfaces import InputIntent

if TYPE_CHECKING:
    from blessed.keyboard import Keystroke

_NAMED_KEYS: dict[str, InputIntent] = {
    "KEY_UP": InputIntent.CURSOR_UP,
    "KEY_DOWN": InputIntent.CURSOR_DOWN,
    "KEY_LEFT": InputIntent.CURSOR_LEFT,
    "KEY_RIGHT": InputIntent.CURSOR_RIGHT,
    "KEY_ENTER": InputIntent.CONFIRM,
}

_CONFIRM_CHARS = frozenset({"\r", "\n"})

_VI_KEYS: dict[str, InputIntent] = {
    "k": InputIntent.CURSOR_UP,
    "j": InputIntent.CURSOR_DOWN,
    "h": InputIntent.CURSOR_LEFT,
    "l": InputIntent.CURSOR_RIGHT,
}

_QUIT_CHARS = frozenset({"q", "Q", "\x03"})
_RESET_CHARS = frozenset({"r", "R"})


def intent_for_key(key: Keystroke, *, vi_keys: bool = False) -> InputIntent:
    """Map *key* to an intent; anything unrecognised is ``OTHER``."""
    if key.is_sequence:
        return _NAMED_KEYS.get(key.name or "", InputIntent.OTHER)
    text = str(key)
    if text in _CONFIRM_CHARS:
        return InputIntent.CONFIRM
    if vi_keys and text in _VI_KEYS:
        return _VI_KEYS[text]
    return InputIntent.OTHER


def is_quit_key(key: Keystroke) -> bool:
    if key.is_sequence:
        return key.name == "KEY_ESCAPE"
    return str(key) in _QUIT_CHARS


def is_reset_key(key: Keystroke) -> bool:
    return not key.is_sequence and str(key) in _RESET_CHARS


def describe_key(key: Keystroke) -> str:
    """Short label for the status line."""
    if key.is_sequence and key.name:
        return key.name
    return repr(str(key))
