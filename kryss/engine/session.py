"""Interactive solving session: one board, one dictionary, one lookup client."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..core.constants import UNREADABLE_KEY_MARKER, WordFilter
from ..core.exceptions import (
    AmbiguousKeyError,
    LengthMismatchError,
    LookupServiceError,
    UnknownKeyError,
)
from ..core.models import Slot
from ..data.dictionary import WordDictionary
from ..data.normalization import clean_word
from ..io.board_file import read_board, write_board
from ..io.dictionary_file import read_dictionary, write_dictionary
from ..io.lookup import Constraint, WordLookup, satisfies
from ..utils.logger import get_logger
from . import queries
from .board import Board
from .solver import SolveReport, solve


LOGGER = get_logger(__name__)


@dataclass
class SessionConfig:
    """Files and switches a session is opened with."""

    board_path: Path | str
    dictionary_path: Path | str = "dict.json"
    fetch_missing: bool = False
    colors: bool = True


class Session:
    """Owns the mutable state of one solving session.

    Every command of the shell maps onto one method here, so the state can be
    driven and tested without a terminal.
    """

    def __init__(
        self,
        board: Board,
        dictionary: WordDictionary,
        lookup_client: Optional[WordLookup] = None,
    ) -> None:
        self.board = board
        self.dictionary = dictionary
        self.lookup_client = lookup_client

    @classmethod
    def open(cls, config: SessionConfig, lookup_client: Optional[WordLookup] = None) -> "Session":
        dictionary_path = Path(config.dictionary_path)
        if dictionary_path.exists():
            dictionary = read_dictionary(dictionary_path)
        else:
            LOGGER.warning("Dictionary %s not found, starting empty", dictionary_path)
            dictionary = WordDictionary(filename=str(dictionary_path))

        session = cls(read_board(config.board_path), dictionary, lookup_client)
        if config.fetch_missing:
            session.fetch_missing()
        return session

    # ------------------------------------------------------------------
    # Key resolution
    # ------------------------------------------------------------------
    def find(self, key: str) -> Slot:
        hits = self.board.find(key)
        if not hits:
            raise UnknownKeyError(f"Word not found: {key}")
        if len(hits) > 1:
            raise AmbiguousKeyError(key, [str(slot.index) for slot in hits])
        return hits[0]

    # ------------------------------------------------------------------
    # Solving and placement
    # ------------------------------------------------------------------
    def solve(self) -> SolveReport:
        return solve(self.board, self.dictionary)

    def place(self, key: str, word: str, force: bool = False) -> List[Slot]:
        """Place ``word`` at ``key`` and remember it in the dictionary.

        Returns the crossing words cleared by a forced placement.
        """

        slot = self.find(key)
        text = clean_word(word)
        if len(text) != slot.length:
            raise LengthMismatchError(
                f"Invalid length: {slot.label} needs {slot.length} letters, got {len(text)}"
            )

        cleared: List[Slot] = []
        if force:
            cleared = self.board.force_place(slot, text)
        else:
            self.board.place_word(slot, text)

        if slot.key is not None:
            self.dictionary.add_word(slot.key, text)
        return cleared

    def add(self, key: str, word: str) -> bool:
        return self.dictionary.add_word(key, word)

    # ------------------------------------------------------------------
    # Remote lookup
    # ------------------------------------------------------------------
    def lookup(self, key: str, constraint: Constraint = None) -> List[str]:
        """Fetch candidates for ``key``, merge them, return the ones fitting ``constraint``."""

        if self.lookup_client is None:
            LOGGER.info("No lookup client configured, using stored words for %s", key)
        elif UNREADABLE_KEY_MARKER in key:
            LOGGER.info("Skip looking up unreadable key %s", key)
        else:
            try:
                fetched = self.lookup_client.lookup(key)
            except LookupServiceError as exc:
                LOGGER.warning("Lookup of %s failed: %s", key, exc)
            else:
                added = self.dictionary.add_candidates(key, fetched)
                LOGGER.info("Lookup of %s added %d new word(s)", key, len(added))

        return [word for word in self.dictionary.candidates_for(key) if satisfies(word, constraint)]

    def fetch_missing(self) -> List[str]:
        """Look up every board key the dictionary knows nothing about."""

        fetched: List[str] = []
        for slot in self.board:
            if slot.key is None or slot.key in self.dictionary or slot.key in fetched:
                continue
            self.lookup(slot.key)
            fetched.append(slot.key)
        return fetched

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def board_view(self) -> queries.BoardView:
        return queries.board_view(self.board)

    def words(self, word_filter: WordFilter = WordFilter.ALL) -> List[str]:
        return queries.words(self.board, self.dictionary, word_filter)

    def select(self, word_filter: WordFilter = WordFilter.ALL) -> List[Slot]:
        return queries.select(self.board, self.dictionary, word_filter)

    def crossing(self, key: str) -> List[queries.CrossingInfo]:
        return queries.crossing(self.board, self.find(key))

    def candidates(self, key: str) -> List[str]:
        return queries.candidates(self.board, self.dictionary, self.find(key))

    def info(self, key: str) -> queries.SlotInfo:
        return queries.info(self.board, self.dictionary, self.find(key))

    def solution(self) -> str:
        return queries.solution(self.board)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def store_board(self, path: Path | str | None = None) -> Path:
        return write_board(self.board, path)

    def store_dictionary(self, path: Path | str | None = None) -> Path:
        return write_dictionary(self.dictionary, path)

    @property
    def has_unsaved_changes(self) -> bool:
        return self.board.changed or self.dictionary.changed
