"""Coordinate type alias and helpers.

Coordinates are ``(file, rank)`` pairs, both 1-based::

    (1, 1) = a1, (8, 1) = h1, ..., (8, 8) = h8

Rank 1 is drawn at the top of the grid.
"""

from __future__ import annotations

from typing import TypeAlias

Coordinate: TypeAlias = tuple[int, int]

MIN_INDEX = 1
MAX_INDEX = 8

_FILE_LETTERS = "abcdefgh"


def is_on_board(file: int, rank: int) -> bool:
    """Whether both components lie within 1..8."""
    return MIN_INDEX <= file <= MAX_INDEX and MIN_INDEX <= rank <= MAX_INDEX


def make_coord(file: int, rank: int) -> Coordinate:
    """Create a coordinate, rejecting anything off the board."""
    if not is_on_board(file, rank):
        raise ValueError(f"Coordinate off the board: ({file}, {rank})")
    return (file, rank)


def clamp(value: int) -> int:
    """Clamp a single component into 1..8."""
    return max(MIN_INDEX, min(MAX_INDEX, value))


def coord_name(coord: Coordinate) -> str:
    """Human-readable name, e.g. (1, 1) -> 'a1', (5, 2) -> 'e2'."""
    file, rank = coord
    return f"{_FILE_LETTERS[file - 1]}{rank}"


def parse_coord(name: str) -> Coordinate:
    """Parse a coordinate name, e.g. 'e2' -> (5, 2)."""
    if len(name) != 2 or name[0] not in _FILE_LETTERS or name[1] not in "12345678":
        raise ValueError(f"Invalid coordinate name: {name!r}")
    return (_FILE_LETTERS.index(name[0]) + 1, int(name[1]))


# Rank-major, file-minor: the order rows are drawn in.
ALL_COORDS: tuple[Coordinate, ...] = tuple(
    (file, rank)
    for rank in range(MIN_INDEX, MAX_INDEX + 1)
    for file in range(MIN_INDEX, MAX_INDEX + 1)
)
