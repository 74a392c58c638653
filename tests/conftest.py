"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import io

import pytest
from blessed import Terminal

from termchess.core.board import Board
from termchess.game.session import GameSession


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def session() -> GameSession:
    return GameSession()


@pytest.fixture
def plain_term() -> Terminal:
    """Terminal with styling disabled: formatters return their text unchanged."""
    return Terminal(kind="xterm-256color", stream=io.StringIO(), force_styling=None)
