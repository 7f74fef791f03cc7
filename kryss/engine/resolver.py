"""Live candidate computation and word status classification."""

from __future__ import annotations

from typing import List

from ..core.constants import WordStatus
from ..core.models import Slot
from ..data.dictionary import WordDictionary
from ..data.pattern import matches
from .board import Board


def live_candidates(board: Board, dictionary: WordDictionary, slot: Slot) -> List[str]:
    """Dictionary words for ``slot`` that agree with its known letters.

    A placed slot has exactly one candidate, its own word, whatever the
    dictionary holds. Otherwise the dictionary order is kept so that "exactly
    one candidate" is deterministic.
    """

    placed = board.word(slot)
    if placed is not None:
        return [placed]

    pattern = board.letters(slot)
    return [word for word in dictionary.candidates_for(slot.key) if matches(word, pattern)]


def classify(board: Board, dictionary: WordDictionary, slot: Slot) -> WordStatus:
    if board.is_placed(slot):
        return WordStatus.PLACED
    count = len(live_candidates(board, dictionary, slot))
    if count == 0:
        return WordStatus.MISSING
    if count == 1:
        return WordStatus.SOLVABLE
    return WordStatus.AMBIGUOUS
