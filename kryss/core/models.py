"""Data models supporting the crossword solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import Orientation


Coordinate = Tuple[int, int]


@dataclass
class Slot:
    """One word position in the grid.

    Letters are not stored on the slot. The owning board keeps one letter per
    coordinate, and :meth:`kryss.engine.board.Board.letters` reads them back
    through :attr:`cells`.
    """

    orientation: Orientation
    x: int
    y: int
    length: int
    key: Optional[str] = None
    index: int = -1
    _cells: Optional[List[Coordinate]] = field(default=None, repr=False, compare=False)

    @property
    def origin(self) -> Coordinate:
        return (self.x, self.y)

    @property
    def cells(self) -> List[Coordinate]:
        if self._cells is None:
            dx, dy = self.orientation.step
            self._cells = [(self.x + dx * i, self.y + dy * i) for i in range(self.length)]
        return self._cells

    @property
    def label(self) -> str:
        """Key for hinted slots, board index for solution slots."""

        return self.key if self.key is not None else str(self.index)

    def is_solution(self) -> bool:
        return self.key is None

    def offset_of(self, coordinate: Coordinate) -> Optional[int]:
        try:
            return self.cells.index(coordinate)
        except ValueError:
            return None

    @property
    def xmax(self) -> int:
        return max(x for x, _ in self.cells)

    @property
    def ymax(self) -> int:
        return max(y for _, y in self.cells)


@dataclass(frozen=True)
class Crossing:
    """Edge of the crossing index as seen from one slot."""

    neighbor: int
    offset: int
    neighbor_offset: int
