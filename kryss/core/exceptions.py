"""Custom exception hierarchy for the crossword solver."""

from __future__ import annotations

from typing import Optional, Sequence


class KryssError(Exception):
    """Base exception for solver failures."""


class ConflictError(KryssError):
    """Raised when a known cell would be overwritten with a different letter."""

    def __init__(
        self,
        label: str,
        offset: int,
        existing: Optional[str],
        attempted: Optional[str],
    ) -> None:
        self.label = label
        self.offset = offset
        self.existing = existing
        self.attempted = attempted
        super().__init__(
            f"Word {label}: cell {offset} holds {existing!r}, cannot set {attempted!r}"
        )


class LengthMismatchError(KryssError):
    """Raised when a word does not fit the length of its slot."""


class InvalidWordError(KryssError):
    """Raised when a word holds something other than one letter per cell."""


class UnknownKeyError(KryssError):
    """Raised when a key does not name any slot on the board."""


class AmbiguousKeyError(KryssError):
    """Raised when a key names more than one slot."""

    def __init__(self, key: str, labels: Sequence[str]) -> None:
        self.key = key
        self.labels = list(labels)
        super().__init__(
            f"Key {key!r} matches several words: {', '.join(self.labels)}"
        )


class DuplicateCrossingError(KryssError):
    """Two slots share more than one cell. Reported, never raised."""


class GridStructureError(KryssError):
    """Raised when the slot layout is too corrupt to build a board."""


class BoardFormatError(KryssError):
    """Raised when a board description file cannot be parsed."""


class DictionaryLoadError(KryssError):
    """Raised when the dictionary JSON cannot be parsed."""


class LookupServiceError(KryssError):
    """Raised when the remote word lookup fails."""
