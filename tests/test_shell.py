import io
import tempfile
import unittest
from pathlib import Path

from kryss.data.dictionary import WordDictionary
from kryss.engine.session import Session, SessionConfig
from kryss.io.board_file import build_board, parse_board
from kryss.io.shell import KryssShell


BOARD = """\
R,0,0,4,capital of norway
D,0,0,3,number
D,3,0,3,number
"""


class FakeLookup:
    def lookup(self, hint, constraint=None):
        return ["OSLO", "BERGEN"]


class ShellTests(unittest.TestCase):
    def setUp(self) -> None:
        board = build_board(parse_board(BOARD))
        self.session = Session(board, WordDictionary(), FakeLookup())
        self.out = io.StringIO()
        self.shell = KryssShell(self.session, colors=False, stdin=io.StringIO(""), stdout=self.out)

    def run_command(self, line: str) -> str:
        self.out.seek(0)
        self.out.truncate()
        self.shell.onecmd(line)
        return self.out.getvalue()

    def test_place_accepts_quoted_keys(self) -> None:
        self.run_command('place "capital of norway" oslo')
        board = self.session.board
        self.assertEqual(board.word(board.slots[0]), "OSLO")
        self.assertEqual(self.run_command("board"), "OSLO\n.  .\n.  .\n\n")

    def test_conflict_is_reported_and_force_clears_crossing(self) -> None:
        self.run_command("place 1 ONE")
        output = self.run_command('place "capital of norway" BERN')
        self.assertIn("cannot set", output)

        output = self.run_command('place --force "capital of norway" BERN')
        self.assertIn("Unplacing word number", output)

    def test_place_usage(self) -> None:
        self.assertIn("Usage: place [--force] <key> <word>", self.run_command("place 1"))

    def test_ambiguous_key_lists_matches(self) -> None:
        output = self.run_command("candidates number")
        self.assertIn("matches several words", output)
        self.assertIn("[1] number = ... ?", output)
        self.assertIn("[2] number = ... ?", output)

    def test_unknown_key(self) -> None:
        self.assertIn("Word not found: river", self.run_command("info river"))

    def test_bad_command(self) -> None:
        self.assertEqual(self.run_command("frobnicate"), "Bad command: frobnicate\n")

    def test_lookup_prints_matching_words(self) -> None:
        self.assertEqual(self.run_command('lookup "capital of norway" 4'), "OSLO\n")
        self.assertEqual(self.run_command('lookup "capital of norway" B.....'), "BERGEN\n")

    def test_add_reports_known_words(self) -> None:
        self.assertEqual(self.run_command("add number ONE"), "")
        self.assertEqual(self.run_command("add number one"), "Word already known\n")

    def test_solve_prints_placements(self) -> None:
        self.session.add("capital of norway", "OSLO")
        self.session.add("number", "ONE")
        output = self.run_command("solve")
        self.assertIn("Placing word capital of norway = OSLO", output)
        self.assertIn("Placing word number = ONE", output)
        self.assertIn("Solved", output)

    def test_crossing_and_info(self) -> None:
        self.run_command('place "capital of norway" OSLO')
        output = self.run_command("crossing 1")
        self.assertIn("[1] number = O.. ?", output)
        self.assertIn("[0] capital of norway = OSLO", output)

        output = self.run_command("info 2")
        self.assertIn("Orientation: D, X: 3, Y: 0, Length: 3", output)
        self.assertIn("Key: number", output)
        self.assertIn("No candidates", output)

    def test_set_colors(self) -> None:
        self.run_command("set colors on")
        self.assertTrue(self.shell.colors)
        self.assertIn("Usage", self.run_command("set colours on"))

    def test_help_lists_commands(self) -> None:
        output = self.run_command("help")
        self.assertIn("place [--force] <key> <word>", output)
        self.assertIn("store dictionary [<filename>]", output)

    def test_quit_stops_loop(self) -> None:
        self.assertTrue(self.shell.onecmd("quit"))
        self.assertTrue(self.shell.onecmd("exit"))


class ShellLoopTests(unittest.TestCase):
    def test_loop_offers_to_save_changes(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            board_path = Path(tmpdir) / "board.txt"
            board_path.write_text(BOARD, encoding="utf-8")
            dictionary_path = Path(tmpdir) / "dict.json"
            session = Session.open(SessionConfig(board_path, dictionary_path))

            stdin = io.StringIO('place "capital of norway" OSLO\nquit\ny\nn\n')
            out = io.StringIO()
            KryssShell(session, colors=False, stdin=stdin, stdout=out).cmdloop()

            self.assertIn("capital of norway=OSLO", board_path.read_text(encoding="utf-8"))
            self.assertFalse(dictionary_path.exists())
            self.assertIn("Save dictionary to", out.getvalue())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
