"""Reader and writer for the comma separated board description.

One word per line::

    # orientation,x,y,length,key[=WORD]
    R,0,0,4,capital of norway=OSLO
    D,0,0,3,number

The solution sentence is a single record of keyless words, four fields each::

    S,R,2,5,4,D,6,1,3=ROM

Blank lines and ``#`` comments are ignored, and a line ending with ``,``
continues on the next one.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from ..core.constants import Orientation
from ..core.exceptions import BoardFormatError, KryssError
from ..core.models import Slot
from ..engine.board import Board
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

SOLUTION_TAG = "S"
SLOT_FIELDS = 4


@dataclass
class SlotRecord:
    slot: Slot
    word: Optional[str] = None


def _logical_lines(text: str) -> Iterable[tuple[int, str]]:
    pending = ""
    start = 0
    for number, line in enumerate(text.splitlines(), start=1):
        if line.startswith("#"):
            continue
        trimmed = line.strip()
        if not trimmed:
            continue
        if not pending:
            start = number
        if trimmed.endswith(","):
            pending += trimmed
            continue
        yield start, pending + trimmed
        pending = ""
    if pending:
        yield start, pending.rstrip(",")


def _parse_slot(fields: Sequence[str], key_field: Optional[str], line: int) -> SlotRecord:
    try:
        orientation = Orientation(fields[0])
    except ValueError as exc:
        raise BoardFormatError(f"Line {line}: invalid orientation {fields[0]!r}") from exc

    word: Optional[str] = None
    length_field = fields[3]
    key: Optional[str] = None
    if key_field is not None:
        key, _, word = key_field.partition("=")
    else:
        length_field, _, word = length_field.partition("=")

    try:
        x, y, length = int(fields[1]), int(fields[2]), int(length_field)
    except ValueError as exc:
        raise BoardFormatError(f"Line {line}: invalid number in {','.join(fields)!r}") from exc

    return SlotRecord(
        slot=Slot(orientation=orientation, x=x, y=y, length=length, key=key),
        word=word or None,
    )


def parse_board(text: str) -> List[SlotRecord]:
    records: List[SlotRecord] = []
    for line, content in _logical_lines(text):
        parts = [part.strip() for part in content.split(",")]

        if parts[0] == SOLUTION_TAG:
            fields = parts[1:]
            if not fields or len(fields) % SLOT_FIELDS:
                raise BoardFormatError(
                    f"Line {line}: solution record needs {SLOT_FIELDS} fields per word"
                )
            for i in range(0, len(fields), SLOT_FIELDS):
                records.append(_parse_slot(fields[i:i + SLOT_FIELDS], None, line))
            continue

        if len(parts) == SLOT_FIELDS + 1:
            records.append(_parse_slot(parts[:SLOT_FIELDS], parts[SLOT_FIELDS], line))
        elif len(parts) == SLOT_FIELDS:
            records.append(_parse_slot(parts, None, line))
        else:
            raise BoardFormatError(f"Line {line}: expected 5 fields, got {len(parts)}")
    return records


def build_board(records: Sequence[SlotRecord], filename: Optional[str] = None) -> Board:
    """Create a board and place the words already solved in ``records``."""

    board = Board([record.slot for record in records], filename=filename)
    for record in records:
        if record.word is None:
            continue
        try:
            board.place_word(record.slot, record.word)
        except KryssError as exc:
            raise BoardFormatError(f"Word {record.slot.label}: {exc}") from exc
    board.changed = False
    return board


def read_board(path: Path | str) -> Board:
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise BoardFormatError(f"Cannot read board {source}: {exc}") from exc
    board = build_board(parse_board(text), filename=str(source))
    LOGGER.info("Loaded board %s with %d words", source, len(board))
    return board


def _format_slot(board: Board, slot: Slot) -> str:
    fields = [slot.orientation.value, str(slot.x), str(slot.y), str(slot.length)]
    word = board.word(slot)
    if slot.key is not None:
        fields.append(slot.key if word is None else f"{slot.key}={word}")
    elif word is not None:
        fields[-1] = f"{slot.length}={word}"
    return ",".join(fields)


def format_board(board: Board) -> str:
    lines = [_format_slot(board, slot) for slot in board if not slot.is_solution()]
    solution = [_format_slot(board, slot) for slot in board.solution_slots()]
    if solution:
        lines.append(",".join([SOLUTION_TAG, *solution]))
    return "\n".join(lines) + "\n"


def write_board(board: Board, path: Path | str | None = None) -> Path:
    """Write ``board`` to ``path`` (default: the file it was read from)."""

    target = path or board.filename
    if target is None:
        raise BoardFormatError("No file name given for the board")
    destination = Path(target)
    destination.write_text(format_board(board), encoding="utf-8")
    board.filename = str(destination)
    board.changed = False
    LOGGER.info("Board saved to %s", destination)
    return destination
