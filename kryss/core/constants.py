"""Shared constants and enumerations for the crossword solver."""

from __future__ import annotations

from enum import Enum
from typing import Tuple


UNKNOWN = "."
"""Placeholder rendered for cells whose letter is not known yet."""

UNREADABLE_KEY_MARKER = "xxxx"
"""Hint keys containing this marker were not readable when the board was typed in."""


class Orientation(str, Enum):
    """Direction in which a word extends from its anchor cell."""

    RIGHT = "R"
    LEFT = "L"
    DOWN = "D"
    UP = "U"

    @property
    def step(self) -> Tuple[int, int]:
        return _STEPS[self]

    def is_horizontal(self) -> bool:
        return self in (Orientation.RIGHT, Orientation.LEFT)

    def is_vertical(self) -> bool:
        return self in (Orientation.DOWN, Orientation.UP)


_STEPS = {
    Orientation.RIGHT: (1, 0),
    Orientation.LEFT: (-1, 0),
    Orientation.DOWN: (0, 1),
    Orientation.UP: (0, -1),
}


class WordStatus(str, Enum):
    """Derived placement state of a single slot."""

    PLACED = "placed"
    MISSING = "missing"
    AMBIGUOUS = "ambiguous"
    SOLVABLE = "solvable"


class WordFilter(str, Enum):
    """Word listing filters exposed by the query layer."""

    ALL = "all"
    PLACED = "placed"
    UNPLACED = "unplaced"
    MISSING = "missing"
    AMBIGUOUS = "ambiguous"

    def accepts(self, status: WordStatus) -> bool:
        if self == WordFilter.ALL:
            return True
        if self == WordFilter.UNPLACED:
            return status != WordStatus.PLACED
        return status.value == self.value


class BoardState(str, Enum):
    """Aggregate state of the board after a solver run."""

    UNSOLVED = "UNSOLVED"
    UNSOLVABLE = "UNSOLVABLE"
    AMBIGUOUS = "AMBIGUOUS"
    SOLVED = "SOLVED"
