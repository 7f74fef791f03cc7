"""Read-only views over a board and its dictionary."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..core.constants import Orientation, UNKNOWN, WordFilter, WordStatus
from ..core.models import Coordinate, Slot
from ..data.dictionary import WordDictionary
from .board import Board
from .resolver import classify, live_candidates


@dataclass(frozen=True)
class CellView:
    letter: Optional[str]
    in_solution: bool = False

    @property
    def known(self) -> bool:
        return self.letter is not None


@dataclass
class BoardView:
    """Row-major snapshot of every grid cell; ``None`` where no word passes."""

    width: int
    height: int
    rows: List[List[Optional[CellView]]] = field(default_factory=list)

    def cell(self, x: int, y: int) -> Optional[CellView]:
        return self.rows[y][x]


@dataclass
class CrossingInfo:
    label: str
    offset: int
    neighbor_offset: int


@dataclass
class SlotInfo:
    """Everything known about one slot."""

    label: str
    index: int
    key: Optional[str]
    orientation: Orientation
    origin: Coordinate
    length: int
    pattern: str
    status: WordStatus
    crossings: List[CrossingInfo]
    candidates: List[str]


def board_view(board: Board) -> BoardView:
    solution_cells = {cell for slot in board.solution_slots() for cell in slot.cells}
    rows: List[List[Optional[CellView]]] = []
    for y in range(board.height):
        row: List[Optional[CellView]] = []
        for x in range(board.width):
            if not board.covers(x, y):
                row.append(None)
                continue
            row.append(CellView(letter=board.cell(x, y), in_solution=(x, y) in solution_cells))
        rows.append(row)
    return BoardView(width=board.width, height=board.height, rows=rows)


def select(
    board: Board,
    dictionary: WordDictionary,
    word_filter: WordFilter = WordFilter.ALL,
) -> List[Slot]:
    return [slot for slot in board if word_filter.accepts(classify(board, dictionary, slot))]


def words(
    board: Board,
    dictionary: WordDictionary,
    word_filter: WordFilter = WordFilter.ALL,
) -> List[str]:
    return [slot.label for slot in select(board, dictionary, word_filter)]


def crossing(board: Board, slot: Slot) -> List[CrossingInfo]:
    return [
        CrossingInfo(label=other.label, offset=edge.offset, neighbor_offset=edge.neighbor_offset)
        for other, edge in board.crossing_slots(slot)
    ]


def candidates(board: Board, dictionary: WordDictionary, slot: Slot) -> List[str]:
    return live_candidates(board, dictionary, slot)


def info(board: Board, dictionary: WordDictionary, slot: Slot) -> SlotInfo:
    return SlotInfo(
        label=slot.label,
        index=slot.index,
        key=slot.key,
        orientation=slot.orientation,
        origin=slot.origin,
        length=slot.length,
        pattern=board.pattern(slot),
        status=classify(board, dictionary, slot),
        crossings=crossing(board, slot),
        candidates=live_candidates(board, dictionary, slot),
    )


def solution(board: Board, placeholder: str = UNKNOWN) -> str:
    """The answer phrase, one space between words, ``placeholder`` for unknown cells."""

    parts: List[str] = []
    for slot in board.solution_slots():
        parts.append("".join(letter or placeholder for letter in board.letters(slot)))
    return " ".join(parts)
