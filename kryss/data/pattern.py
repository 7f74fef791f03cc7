"""Partial letter patterns and candidate matching."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..core.constants import UNKNOWN
from .normalization import clean_word, compose


Pattern = Sequence[Optional[str]]


def matches(candidate: str, pattern: Pattern) -> bool:
    """Return whether ``candidate`` agrees with every known cell of ``pattern``.

    ``pattern`` holds one entry per cell: a letter, or ``None``/``"."`` for an
    unknown cell. A length mismatch is never a match: the candidate is composed
    but neither trimmed nor uppercased as a whole before lengths are compared.
    """

    word = compose(candidate)
    if len(word) != len(pattern):
        return False
    for char, expected in zip(word, pattern):
        if expected is None or expected == UNKNOWN:
            continue
        if char.upper() != clean_word(expected):
            return False
    return True


def parse_pattern(text: str) -> List[Optional[str]]:
    """Turn ``"O.L."`` into ``["O", None, "L", None]``."""

    return [None if char == UNKNOWN else char for char in clean_word(text)]


def format_pattern(pattern: Pattern) -> str:
    return "".join(UNKNOWN if char is None else char for char in pattern)


__all__ = ["Pattern", "matches", "parse_pattern", "format_pattern"]
