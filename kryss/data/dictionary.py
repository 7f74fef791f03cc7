"""Hint dictionary: candidate words known for each hint key."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence

from ..core.constants import UNREADABLE_KEY_MARKER
from ..utils.logger import get_logger
from .normalization import clean_word, is_single_word


LOGGER = get_logger(__name__)


class WordDictionary:
    """Maps hint keys to ordered, duplicate-free candidate word lists.

    The dictionary only grows. Words are normalized on insertion so the pattern
    matcher and the board always compare like with like.
    """

    def __init__(
        self,
        words: Optional[Mapping[str, Iterable[str]]] = None,
        filename: Optional[str] = None,
    ) -> None:
        # dict keys double as an insertion-ordered set
        self._words: Dict[str, Dict[str, None]] = {}
        self.filename = filename
        self.changed = False
        for key, candidates in (words or {}).items():
            self.add_candidates(key, candidates)
        self.changed = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def add_candidates(self, key: str, words: Iterable[str]) -> List[str]:
        """Insert ``words`` under ``key`` and return the ones that were new."""

        if UNREADABLE_KEY_MARKER in key:
            LOGGER.warning("Adding words for unreadable key %r", key)

        bucket = self._words.setdefault(key, {})
        added: List[str] = []
        for raw in words:
            word = clean_word(raw)
            if not is_single_word(word):
                LOGGER.debug("Skipping candidate %r for %r", raw, key)
                continue
            if word in bucket:
                continue
            bucket[word] = None
            added.append(word)

        if added:
            self.changed = True
            LOGGER.debug("Added %d candidate(s) for %r", len(added), key)
        return added

    def add_word(self, key: str, word: str) -> bool:
        return bool(self.add_candidates(key, [word]))

    def candidates_for(self, key: Optional[str]) -> List[str]:
        if key is None:
            return []
        return list(self._words.get(key, ()))

    def keys(self) -> List[str]:
        return list(self._words)

    def items(self) -> Iterator[tuple[str, List[str]]]:
        for key, bucket in self._words.items():
            yield key, list(bucket)

    def __contains__(self, key: object) -> bool:
        return key in self._words

    def __len__(self) -> int:
        return len(self._words)

    def to_mapping(self) -> Dict[str, Sequence[str]]:
        return {key: list(bucket) for key, bucket in self._words.items()}
