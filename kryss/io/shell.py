"""Interactive command shell driving a :class:`~kryss.engine.session.Session`."""

from __future__ import annotations

import cmd
import shlex
from typing import List, Optional, TextIO

from ..core.constants import BoardState, WordFilter
from ..core.exceptions import AmbiguousKeyError, KryssError
from ..core.models import Slot
from ..engine.resolver import classify
from ..engine.session import Session
from ..utils.logger import get_logger
from ..utils.pretty import (
    format_board,
    format_columns,
    format_crossing,
    format_info,
    format_word,
    word_lines,
)


LOGGER = get_logger(__name__)

COMMAND_LIST = (
    "solve",
    "words",
    "placed",
    "unplaced",
    "missing",
    "ambiguous",
    "crossing <key>",
    "candidates <key>",
    "solution",
    "board",
    "info <key>",
    "place [--force] <key> <word>",
    "lookup <key> [<length>|<pattern>]",
    "add <key> <word>",
    "store board [<filename>]",
    "store dictionary [<filename>]",
    "set colors on|off",
    "help",
    "quit",
)


class KryssShell(cmd.Cmd):
    """Line oriented front end. Keys containing spaces must be quoted."""

    prompt = "kryss> "

    def __init__(
        self,
        session: Session,
        colors: bool = True,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        super().__init__(stdin=stdin, stdout=stdout)
        if stdin is not None:
            self.use_rawinput = False
        self.session = session
        self.colors = colors

    # ------------------------------------------------------------------
    # Plumbing
    # ------------------------------------------------------------------
    def write(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def onecmd(self, line: str) -> bool:
        try:
            return super().onecmd(line)
        except AmbiguousKeyError as exc:
            self.write(str(exc))
            for label in exc.labels:
                self._write_word(self.session.board.slots[int(label)])
            self.write("Use the number in brackets to pick one.")
        except (KryssError, ValueError) as exc:
            LOGGER.debug("Command %r failed: %s", line, exc)
            self.write(str(exc))
        return False

    def emptyline(self) -> bool:
        return False

    def default(self, line: str) -> bool:
        self.write(f"Bad command: {line}")
        return False

    def preloop(self) -> None:
        self.do_solve("")
        if self.session.words(WordFilter.UNPLACED):
            self.do_board("")

    def postloop(self) -> None:
        session = self.session
        if session.board.changed and self._confirm(f"Save changes to {session.board.filename}? (Y/n)"):
            session.store_board()
        if session.dictionary.changed and self._confirm(
            f"Save dictionary to {session.dictionary.filename}? (Y/n)"
        ):
            session.store_dictionary()

    def _confirm(self, question: str) -> bool:
        self.write(question)
        answer = self.stdin.readline() if not self.use_rawinput else input()
        return answer.strip().lower() in ("", "y", "yes")

    @staticmethod
    def _args(arg: str) -> List[str]:
        return shlex.split(arg)

    def _expect(self, arg: str, count: int, usage: str) -> Optional[List[str]]:
        args = self._args(arg)
        if len(args) != count:
            self.write(f"Usage: {usage}")
            return None
        return args

    def _write_word(self, slot: Slot) -> None:
        board, dictionary = self.session.board, self.session.dictionary
        self.write(format_word(board, slot, classify(board, dictionary, slot), self.colors))

    def _write_words(self, word_filter: WordFilter) -> None:
        slots = self.session.select(word_filter)
        items, widths = word_lines(self.session.board, self.session.dictionary, slots, self.colors)
        if items:
            self.write(format_columns(items, widths))

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def do_solve(self, arg: str) -> None:
        """solve: place every word with exactly one candidate, repeatedly."""

        report = self.session.solve()
        for label, exc in report.conflicts.items():
            self.write(f"Conflict in {label}: {exc}")
        for label, word in report.placed:
            self.write(f"Placing word {label} = {word}")
        if report.state == BoardState.SOLVED:
            self.write("Solved")
            self.write()
            self.do_board("")

    def do_board(self, arg: str) -> None:
        """board: show the grid."""

        self.write(format_board(self.session.board_view(), self.colors))
        self.write()

    def do_words(self, arg: str) -> None:
        """words: list every word."""

        self._write_words(WordFilter.ALL)

    def do_placed(self, arg: str) -> None:
        """placed: list placed words."""

        self._write_words(WordFilter.PLACED)

    def do_unplaced(self, arg: str) -> None:
        """unplaced: list words not placed yet."""

        self._write_words(WordFilter.UNPLACED)

    def do_missing(self, arg: str) -> None:
        """missing: list words without any candidate."""

        self._write_words(WordFilter.MISSING)

    def do_ambiguous(self, arg: str) -> None:
        """ambiguous: list words with several candidates."""

        self._write_words(WordFilter.AMBIGUOUS)

    def do_crossing(self, arg: str) -> None:
        """crossing <key>: show a word and the words crossing it."""

        args = self._expect(arg, 1, "crossing <key>")
        if args is None:
            return
        slot = self.session.find(args[0])
        board = self.session.board
        if not board.crossings.get(slot.index):
            self.write("No crossing words for key")
            return
        self._write_word(slot)
        self.write(format_crossing(board, slot, self.colors))
        self.write()
        for other, _ in board.crossing_slots(slot):
            self._write_word(other)

    def do_candidates(self, arg: str) -> None:
        """candidates <key>: list the live candidates of a word."""

        args = self._expect(arg, 1, "candidates <key>")
        if args is None:
            return
        for word in self.session.candidates(args[0]):
            self.write(f"  {word}")

    def do_info(self, arg: str) -> None:
        """info <key>: position, candidates and crossings of a word."""

        args = self._expect(arg, 1, "info <key>")
        if args is None:
            return
        slot = self.session.find(args[0])
        self._write_word(slot)
        self.write(format_info(self.session.info(args[0])))
        self.write()
        if self.session.board.crossings.get(slot.index):
            self.write(format_crossing(self.session.board, slot, self.colors))

    def do_solution(self, arg: str) -> None:
        """solution: show the solution sentence."""

        self.write(self.session.solution())

    def do_place(self, arg: str) -> None:
        """place [--force] <key> <word>: put a word on the board."""

        args = self._args(arg)
        force = bool(args) and args[0] == "--force"
        if force:
            args = args[1:]
        if len(args) != 2:
            self.write("Usage: place [--force] <key> <word>")
            return
        for cleared in self.session.place(args[0], args[1], force=force):
            self.write(f"Unplacing word {cleared.label}")

    def do_lookup(self, arg: str) -> None:
        """lookup <key> [<length>|<pattern>]: fetch candidates for a hint."""

        args = self._args(arg)
        if len(args) not in (1, 2):
            self.write("Usage: lookup <key> [<length>|<pattern>]")
            return
        constraint = None
        if len(args) == 2:
            constraint = int(args[1]) if args[1].isdigit() else args[1]
        self.write(" ".join(self.session.lookup(args[0], constraint)))

    def do_add(self, arg: str) -> None:
        """add <key> <word>: add a word to the dictionary."""

        args = self._expect(arg, 2, "add <key> <word>")
        if args is None:
            return
        if not self.session.add(args[0], args[1]):
            self.write("Word already known")

    def do_store(self, arg: str) -> None:
        """store board|dictionary [<filename>]: save to disk."""

        args = self._args(arg)
        if not args or args[0] not in ("board", "dictionary") or len(args) > 2:
            self.write("Usage: store board|dictionary [<filename>]")
            return
        target = args[1] if len(args) == 2 else None
        if args[0] == "board":
            path = self.session.store_board(target)
        else:
            path = self.session.store_dictionary(target)
        self.write(f"Saved {path}")

    def do_set(self, arg: str) -> None:
        """set colors on|off: toggle colour output."""

        args = self._args(arg)
        if len(args) != 2 or args[0] != "colors" or args[1] not in ("on", "off"):
            self.write("Usage: set colors on|off")
            return
        self.colors = args[1] == "on"

    def do_help(self, arg: str) -> None:
        """help: list commands."""

        if arg:
            super().do_help(arg)
            return
        self.write("\n".join(COMMAND_LIST))

    def do_quit(self, arg: str) -> bool:
        """quit: leave the shell."""

        return True

    do_exit = do_quit

    def do_EOF(self, arg: str) -> bool:
        self.write()
        return True

    # ------------------------------------------------------------------
    # Completion
    # ------------------------------------------------------------------
    def _complete_keys(self, text: str) -> List[str]:
        keys = {slot.key for slot in self.session.board if slot.key is not None}
        return sorted(key for key in keys if key.startswith(text))

    def complete_place(self, text: str, line: str, begidx: int, endidx: int) -> List[str]:
        args = line[:begidx].split()
        if len(args) >= 2 and args[-1] != "--force":
            try:
                return [c for c in self.session.candidates(args[-1]) if c.startswith(text.upper())]
            except KryssError:
                return []
        return self._complete_keys(text)

    def complete_key(self, text: str, line: str, begidx: int, endidx: int) -> List[str]:
        return self._complete_keys(text)

    complete_crossing = complete_key
    complete_candidates = complete_key
    complete_info = complete_key
    complete_lookup = complete_key
    complete_add = complete_key

    def complete_store(self, text: str, line: str, begidx: int, endidx: int) -> List[str]:
        return [option for option in ("board", "dictionary") if option.startswith(text)]

    def complete_set(self, text: str, line: str, begidx: int, endidx: int) -> List[str]:
        options = ("on", "off") if "colors" in line else ("colors",)
        return [option for option in options if option.startswith(text)]
