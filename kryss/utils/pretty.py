"""Pretty-print helpers for boards and words."""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Tuple

from colorama import Fore, Style

from ..core.constants import UNKNOWN, WordStatus
from ..engine.resolver import classify

if TYPE_CHECKING:
    from ..core.models import Slot
    from ..data.dictionary import WordDictionary
    from ..engine.board import Board
    from ..engine.queries import BoardView, SlotInfo


STATUS_COLORS = {
    WordStatus.PLACED: Fore.BLUE,
    WordStatus.SOLVABLE: Fore.BLUE,
    WordStatus.MISSING: Fore.RED,
    WordStatus.AMBIGUOUS: Fore.MAGENTA,
}

# without colours, fall back to intensity only
STATUS_STYLES = {
    WordStatus.MISSING: Style.BRIGHT,
    WordStatus.AMBIGUOUS: Style.DIM,
}


def paint(text: str, color: Optional[str], colors: bool, style: Optional[str] = None) -> str:
    if colors and color:
        return f"{color}{text}{Fore.RESET}"
    if style:
        return f"{style}{text}{Style.RESET_ALL}"
    return text


def highlight(char: str, colors: bool) -> str:
    return paint(char, Fore.BLUE, colors, Style.BRIGHT)


def format_board(view: BoardView, colors: bool = True) -> str:
    lines: List[str] = []
    for row in view.rows:
        rendered: List[str] = []
        for cell in row:
            if cell is None:
                rendered.append(" ")
            elif cell.letter is None:
                rendered.append(UNKNOWN)
            elif cell.in_solution:
                rendered.append(paint(cell.letter, Fore.GREEN, colors, Style.BRIGHT))
            else:
                rendered.append(cell.letter)
        lines.append("".join(rendered).rstrip())
    return "\n".join(lines)


def format_word(board: Board, slot: Slot, status: WordStatus, colors: bool = True) -> str:
    text = f"[{slot.index}] {board.describe(slot)}"
    return paint(text, STATUS_COLORS.get(status), colors, STATUS_STYLES.get(status))


def format_crossing(board: Board, slot: Slot, colors: bool = True) -> str:
    """Draw ``slot`` together with the words crossing it."""

    involved = [slot] + [other for other, _ in board.crossing_slots(slot)]
    coordinates = [cell for word in involved for cell in word.cells]
    xmin = min(x for x, _ in coordinates)
    ymin = min(y for _, y in coordinates)
    width = max(x for x, _ in coordinates) - xmin + 1
    height = max(y for _, y in coordinates) - ymin + 1

    canvas: Dict[Tuple[int, int], str] = {}
    for other in involved[1:]:
        for x, y in other.cells:
            canvas[(x, y)] = board.cell(x, y) or UNKNOWN
    for x, y in slot.cells:
        canvas[(x, y)] = highlight(board.cell(x, y) or UNKNOWN, colors)

    lines = []
    for y in range(ymin, ymin + height):
        row = "".join(canvas.get((x, y), " ") for x in range(xmin, xmin + width))
        lines.append(row.rstrip())
    return "\n".join(lines)


def format_info(info: SlotInfo) -> str:
    lines = [
        f"Orientation: {info.orientation.value}, X: {info.origin[0]}, "
        f"Y: {info.origin[1]}, Length: {info.length}",
    ]
    if info.key is not None:
        lines.append(f"Key: {info.key}")
    if info.status == WordStatus.PLACED:
        lines.append(f"Placed: {info.candidates[0]}")
    elif not info.candidates:
        lines.append("No candidates")
    else:
        lines.append("Candidates:")
        lines.extend(f"  {word}" for word in info.candidates)
    return "\n".join(lines)


def format_columns(items: Sequence[str], widths: Sequence[int], total_width: Optional[int] = None) -> str:
    """Lay ``items`` out in as many columns as the terminal allows.

    ``widths`` holds the printable width of each item, which differs from
    ``len`` once colour codes are embedded.
    """

    if not items:
        return ""
    total_width = total_width or shutil.get_terminal_size().columns
    column = max(widths) + 2
    per_row = max(1, total_width // column)
    lines = []
    for start in range(0, len(items), per_row):
        chunk = range(start, min(start + per_row, len(items)))
        lines.append(
            "".join(items[i] + " " * (column - widths[i]) for i in chunk).rstrip()
        )
    return "\n".join(lines)


def word_lines(
    board: Board,
    dictionary: WordDictionary,
    slots: Sequence[Slot],
    colors: bool = True,
) -> Tuple[List[str], List[int]]:
    """Formatted entries plus their printable widths for :func:`format_columns`."""

    items: List[str] = []
    widths: List[int] = []
    for slot in slots:
        items.append(format_word(board, slot, classify(board, dictionary, slot), colors))
        widths.append(len(f"[{slot.index}] {board.describe(slot)}"))
    return items, widths
