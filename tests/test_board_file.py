import tempfile
import unittest
from pathlib import Path

from kryss.core.constants import Orientation
from kryss.core.exceptions import BoardFormatError, GridStructureError
from kryss.io.board_file import build_board, format_board, parse_board, read_board, write_board


SAMPLE = """\
# capital crossing a number
R,0,0,4,capital of norway=OSLO
D,0,0,3,number
D,3,0,3,
  ocean
S,R,0,2,3,
  U,2,2,2=SE
"""


class BoardFileTests(unittest.TestCase):
    def test_parse_reads_keys_words_and_solution(self) -> None:
        records = parse_board(SAMPLE)
        self.assertEqual(len(records), 5)

        capital = records[0]
        self.assertEqual(capital.slot.orientation, Orientation.RIGHT)
        self.assertEqual(capital.slot.key, "capital of norway")
        self.assertEqual(capital.word, "OSLO")

        self.assertEqual(records[2].slot.key, "ocean")
        self.assertEqual(records[2].slot.length, 3)
        self.assertIsNone(records[2].word)

        self.assertIsNone(records[3].slot.key)
        self.assertEqual((records[3].slot.x, records[3].slot.y), (0, 2))
        self.assertEqual(records[4].slot.orientation, Orientation.UP)
        self.assertEqual(records[4].word, "SE")

    def test_build_places_known_words(self) -> None:
        board = build_board(parse_board(SAMPLE))
        self.assertEqual(board.word(board.slots[0]), "OSLO")
        self.assertEqual(board.pattern(board.slots[1]), "O..")
        self.assertEqual(board.pattern(board.slots[2]), "O..")
        self.assertEqual(board.pattern(board.slots[4]), "SE")
        self.assertFalse(board.changed)

    def test_format_writes_what_was_read(self) -> None:
        board = build_board(parse_board(SAMPLE))
        text = format_board(board)
        self.assertEqual(
            text,
            "R,0,0,4,capital of norway=OSLO\n"
            "D,0,0,3,number\n"
            "D,3,0,3,ocean\n"
            "S,R,0,2,3,U,2,2,2=SE\n",
        )
        again = build_board(parse_board(text))
        self.assertEqual(again.snapshot(), board.snapshot())

    def test_file_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "board.txt"
            path.write_text(SAMPLE, encoding="utf-8")
            board = read_board(path)
            board.place_word(board.slots[1], "ONE")
            self.assertTrue(board.changed)

            write_board(board)
            self.assertFalse(board.changed)
            reloaded = read_board(path)
            self.assertEqual(reloaded.word(reloaded.slots[1]), "ONE")

    def test_invalid_records_report_line(self) -> None:
        bad_inputs = [
            "X,0,0,4,hint\n",
            "R,zero,0,4,hint\n",
            "R,0,0\n",
            "S,R,0,0\n",
        ]
        for text in bad_inputs:
            with self.subTest(text=text):
                with self.assertRaises(BoardFormatError) as ctx:
                    parse_board("# header\n" + text)
                self.assertIn("Line 2", str(ctx.exception))

    def test_conflicting_known_words_are_rejected(self) -> None:
        text = "R,0,0,3,first=CAT\nD,0,0,3,second=DOG\n"
        with self.assertRaises(BoardFormatError):
            build_board(parse_board(text))

    def test_invalid_geometry_is_rejected(self) -> None:
        with self.assertRaises(GridStructureError):
            build_board(parse_board("R,0,0,-1,negative\n"))

    def test_missing_file_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(BoardFormatError):
                read_board(Path(tmpdir) / "absent.txt")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
