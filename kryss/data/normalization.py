"""Shared helpers for Norwegian word normalization."""

from __future__ import annotations

import re
import unicodedata

NORWEGIAN_EXTRA_LETTERS = "ÆØÅ"

WHITESPACE_RE = re.compile(r"\s")


def compose(text: str) -> str:
    """NFC-compose ``text`` without trimming or changing case."""

    return unicodedata.normalize("NFC", text)


def clean_word(text: str) -> str:
    """Return ``text`` stripped, NFC-composed and uppercased.

    Letters outside the base Latin alphabet stay distinct: ``Å`` never becomes
    ``A`` and ``Ø`` never becomes ``O``. Composing first turns a decomposed
    ``A`` + ring above into the single character ``Å``.
    """

    if not text:
        return ""
    return compose(text.strip()).upper()


def clean_letter(char: str) -> str:
    letter = clean_word(char)
    if len(letter) != 1:
        raise ValueError(f"Expected a single letter, got {char!r}")
    return letter


def is_single_word(text: str) -> bool:
    return bool(text) and not WHITESPACE_RE.search(text)


__all__ = ["compose", "clean_word", "clean_letter", "is_single_word", "NORWEGIAN_EXTRA_LETTERS"]
