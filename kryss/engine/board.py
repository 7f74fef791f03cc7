"""Board representation: slots, the per-cell letter store and the crossing index."""

from __future__ import annotations

import copy
from collections import defaultdict
from typing import Dict, Iterator, List, Optional, Sequence, Set, Tuple

from ..core.constants import Orientation
from ..core.exceptions import (
    ConflictError,
    DuplicateCrossingError,
    GridStructureError,
    InvalidWordError,
    LengthMismatchError,
)
from ..core.models import Coordinate, Crossing, Slot
from ..data.normalization import clean_letter, clean_word, is_single_word
from ..data.pattern import format_pattern, matches
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

CrossingIndex = Dict[int, List[Crossing]]


def cells_of(slot: Slot) -> List[Coordinate]:
    return slot.cells


def build_crossing_index(
    slots: Sequence[Slot],
) -> Tuple[CrossingIndex, List[DuplicateCrossingError]]:
    """Group every slot cell by coordinate and link the slots sharing one.

    Returns the index (slot index -> crossings ordered by own offset) and the
    structural issues found on the way. A pair of slots sharing more than one
    coordinate is indexed at the first shared coordinate only.
    """

    owners: Dict[Coordinate, List[Tuple[int, int]]] = defaultdict(list)
    for slot in slots:
        for offset, coordinate in enumerate(slot.cells):
            owners[coordinate].append((slot.index, offset))

    index: CrossingIndex = {slot.index: [] for slot in slots}
    linked: Set[Tuple[int, int]] = set()
    reported: Set[Tuple[int, int]] = set()
    issues: List[DuplicateCrossingError] = []

    for coordinate, sharing in owners.items():
        for i, (a, offset_a) in enumerate(sharing):
            for b, offset_b in sharing[i + 1:]:
                if a == b:
                    continue
                pair = (min(a, b), max(a, b))
                if pair in linked:
                    if pair not in reported:
                        reported.add(pair)
                        issue = DuplicateCrossingError(
                            f"Words {slots[a].label} and {slots[b].label} share more than "
                            f"one cell (again at {coordinate})"
                        )
                        LOGGER.warning("%s", issue)
                        issues.append(issue)
                    continue
                linked.add(pair)
                index[a].append(Crossing(neighbor=b, offset=offset_a, neighbor_offset=offset_b))
                index[b].append(Crossing(neighbor=a, offset=offset_b, neighbor_offset=offset_a))

    for crossings in index.values():
        crossings.sort(key=lambda crossing: (crossing.offset, crossing.neighbor))
    return index, issues


class Board:
    """Encapsulates the slots of one crossword with placement helpers.

    Letters are kept once per grid coordinate, so two crossing slots read the
    same cell and cannot drift apart. :meth:`set_letter` is the only method
    that writes a letter.
    """

    def __init__(self, slots: Sequence[Slot], filename: Optional[str] = None) -> None:
        self.slots: List[Slot] = list(slots)
        for index, slot in enumerate(self.slots):
            slot.index = index
            slot._cells = None
            self._validate_slot(slot)

        self.filename = filename
        self.changed = False
        self._letters: Dict[Coordinate, Optional[str]] = {}
        self._owners: Dict[Coordinate, List[int]] = defaultdict(list)
        for slot in self.slots:
            for coordinate in slot.cells:
                self._letters[coordinate] = None
                self._owners[coordinate].append(slot.index)

        self.crossings, self.issues = build_crossing_index(self.slots)
        self.width = max((slot.xmax + 1 for slot in self.slots), default=0)
        self.height = max((slot.ymax + 1 for slot in self.slots), default=0)
        LOGGER.debug(
            "Built board with %d words on %dx%d cells",
            len(self.slots),
            self.width,
            self.height,
        )

    # ------------------------------------------------------------------
    # Initialization helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _validate_slot(slot: Slot) -> None:
        if not isinstance(slot.orientation, Orientation):
            raise GridStructureError(f"Word {slot.label} has invalid orientation {slot.orientation!r}")
        if slot.length < 1:
            raise GridStructureError(f"Word {slot.label} has non-positive length {slot.length}")
        for x, y in slot.cells:
            if x < 0 or y < 0:
                raise GridStructureError(f"Word {slot.label} extends outside the grid at {(x, y)}")

    # ------------------------------------------------------------------
    # Letter access
    # ------------------------------------------------------------------
    def cell(self, x: int, y: int) -> Optional[str]:
        return self._letters.get((x, y))

    def covers(self, x: int, y: int) -> bool:
        return (x, y) in self._letters

    def letters(self, slot: Slot) -> List[Optional[str]]:
        return [self._letters[coordinate] for coordinate in slot.cells]

    def pattern(self, slot: Slot) -> str:
        return format_pattern(self.letters(slot))

    def is_placed(self, slot: Slot) -> bool:
        return all(letter is not None for letter in self.letters(slot))

    def word(self, slot: Slot) -> Optional[str]:
        """The slot's word once every cell is known."""

        letters = self.letters(slot)
        if any(letter is None for letter in letters):
            return None
        return "".join(letters)  # type: ignore[arg-type]

    def snapshot(self) -> Dict[Coordinate, Optional[str]]:
        return copy.copy(self._letters)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def set_letter(self, slot: Slot, offset: int, char: str) -> None:
        letter = clean_letter(char)
        coordinate = slot.cells[offset]
        existing = self._letters[coordinate]
        if existing is not None and existing != letter:
            raise ConflictError(slot.label, offset, existing, letter)
        if existing is None:
            self._letters[coordinate] = letter
            self.changed = True

    @staticmethod
    def _checked_text(slot: Slot, word: str) -> str:
        """Normalize ``word`` and refuse anything that cannot fill ``slot``."""

        text = clean_word(word)
        if not is_single_word(text):
            raise InvalidWordError(f"Word {slot.label}: {word!r} is not a single word")
        for char in text:
            try:
                clean_letter(char)
            except ValueError as exc:
                raise InvalidWordError(f"Word {slot.label}: {exc}") from exc
        if len(text) != slot.length:
            raise LengthMismatchError(
                f"Word {slot.label} has length {slot.length}, {text!r} has {len(text)}"
            )
        return text

    def place_word(self, slot: Slot, word: str) -> None:
        """Write ``word`` into ``slot``, all letters or none."""

        text = self._checked_text(slot, word)
        letters = self.letters(slot)
        if not matches(text, letters):
            for offset, (existing, letter) in enumerate(zip(letters, text)):
                if existing is not None and existing != letter:
                    raise ConflictError(slot.label, offset, existing, letter)

        for offset, letter in enumerate(text):
            self.set_letter(slot, offset, letter)
        LOGGER.debug("Placed %s = %s", slot.label, text)

    def force_place(self, slot: Slot, word: str) -> List[Slot]:
        """Overwrite ``slot`` with ``word``, clearing crossing words that disagree.

        Every word owning a cell that disagrees with ``word`` is cleared, except
        for letters still held by other fully placed words. Returns the crossing
        slots that were cleared.
        """

        text = self._checked_text(slot, word)
        to_clear: Set[int] = {slot.index}
        for offset, coordinate in enumerate(slot.cells):
            existing = self._letters[coordinate]
            if existing is not None and existing != text[offset]:
                to_clear.update(self._owners[coordinate])

        held: Dict[Coordinate, str] = {}
        for other in self.slots:
            if other.index in to_clear or not self.is_placed(other):
                continue
            for coordinate in other.cells:
                held[coordinate] = self._letters[coordinate]  # type: ignore[assignment]

        cleared: List[Slot] = []
        for index in sorted(to_clear):
            other = self.slots[index]
            for coordinate in other.cells:
                if coordinate not in held:
                    self._letters[coordinate] = None
            if index != slot.index:
                cleared.append(other)
                LOGGER.info("Unplacing word %s", other.label)

        self.changed = True
        self.place_word(slot, text)
        return cleared

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[Slot]:
        return iter(self.slots)

    def __len__(self) -> int:
        return len(self.slots)

    def crossing_slots(self, slot: Slot) -> List[Tuple[Slot, Crossing]]:
        return [(self.slots[c.neighbor], c) for c in self.crossings.get(slot.index, [])]

    def solution_slots(self) -> List[Slot]:
        return [slot for slot in self.slots if slot.is_solution()]

    def find(self, key: str) -> List[Slot]:
        """Slots named by ``key``: a board index, a hint key or a placed word."""

        if key.isdecimal():
            index = int(key)
            return [self.slots[index]] if index < len(self.slots) else []

        word = clean_word(key)
        hits: List[Slot] = []
        for slot in self.slots:
            if slot.key == key or self.word(slot) == word:
                hits.append(slot)
        return hits

    def describe(self, slot: Slot) -> str:
        word = self.word(slot)
        if word is not None:
            return f"{slot.label} = {word}"
        return f"{slot.label} = {self.pattern(slot)} ?"
