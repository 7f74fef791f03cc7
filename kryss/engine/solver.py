"""Fixpoint solver: place every word that has exactly one live candidate."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from ..core.constants import BoardState, WordStatus
from ..core.exceptions import ConflictError
from ..core.models import Slot
from ..data.dictionary import WordDictionary
from ..utils.logger import get_logger
from .board import Board
from .resolver import classify, live_candidates

LOGGER = get_logger(__name__)


@dataclass
class SolveReport:
    """Outcome of one :func:`solve` run."""

    placed: List[Tuple[str, str]] = field(default_factory=list)
    conflicts: Dict[str, ConflictError] = field(default_factory=dict)
    iterations: int = 0
    state: BoardState = BoardState.UNSOLVED

    @property
    def changed(self) -> bool:
        return bool(self.placed)


def find_solvable(board: Board, dictionary: WordDictionary) -> List[Tuple[Slot, str]]:
    """Return ``(slot, word)`` for every unplaced slot with a single live candidate."""

    solvable: List[Tuple[Slot, str]] = []
    for slot in board:
        if board.is_placed(slot):
            continue
        candidates = live_candidates(board, dictionary, slot)
        if len(candidates) == 1:
            solvable.append((slot, candidates[0]))
    return solvable


def board_state(board: Board, dictionary: WordDictionary) -> BoardState:
    statuses = {classify(board, dictionary, slot) for slot in board}
    statuses.discard(WordStatus.PLACED)
    if not statuses:
        return BoardState.SOLVED
    if WordStatus.AMBIGUOUS in statuses:
        return BoardState.AMBIGUOUS
    if WordStatus.SOLVABLE in statuses:
        return BoardState.UNSOLVED
    return BoardState.UNSOLVABLE


def solve(board: Board, dictionary: WordDictionary) -> SolveReport:
    """Repeat step and commit until no slot has exactly one live candidate.

    Args:
        board: Board whose slots are filled in place.
        dictionary: Candidate words per hint key. Never modified.

    Returns:
        A :class:`SolveReport`. Conflicting commits are reported per slot and
        leave that slot unplaced; they never abort the run.
    """

    report = SolveReport()
    # every productive step places at least one slot
    for _ in range(len(board) + 1):
        solvable = find_solvable(board, dictionary)
        if not solvable:
            break

        report.iterations += 1
        committed = 0
        for slot, word in solvable:
            try:
                board.place_word(slot, word)
            except ConflictError as exc:
                LOGGER.warning("Cannot place %s = %s: %s", slot.label, word, exc)
                report.conflicts[slot.label] = exc
                continue
            committed += 1
            report.placed.append((slot.label, word))
            LOGGER.info("Placing word %s = %s", slot.label, word)

        if not committed:
            break

    report.state = board_state(board, dictionary)
    LOGGER.debug(
        "Solver finished after %d step(s), %d placed, state %s",
        report.iterations,
        len(report.placed),
        report.state.value,
    )
    return report
