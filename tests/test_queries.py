import unittest

from kryss.core.constants import Orientation, WordFilter, WordStatus
from kryss.core.models import Slot
from kryss.data.dictionary import WordDictionary
from kryss.engine import queries
from kryss.engine.board import Board
from kryss.engine.solver import solve


def make_slot(orientation: str, x: int, y: int, length: int, key=None) -> Slot:
    return Slot(orientation=Orientation(orientation), x=x, y=y, length=length, key=key)


class QueryTests(unittest.TestCase):
    def setUp(self) -> None:
        # two downward hints whose bottom row spells the solution backwards
        self.answer = make_slot("L", 1, 1, 2)
        self.first = make_slot("D", 0, 0, 2, key="fine")
        self.second = make_slot("D", 1, 0, 2, key="negation")
        self.board = Board([self.answer, self.first, self.second])
        self.dictionary = WordDictionary({"fine": ["OK"], "negation": ["NO", "IS"]})

    def test_solution_uses_placeholder_until_solved(self) -> None:
        self.assertEqual(queries.solution(self.board), "..")
        self.board.place_word(self.second, "NO")
        self.assertEqual(queries.solution(self.board), "O.")
        self.assertEqual(queries.solution(self.board, placeholder="_"), "O_")

    def test_solution_joins_words_with_space(self) -> None:
        board = Board([make_slot("R", 0, 0, 2), make_slot("R", 0, 2, 3)])
        board.place_word(board.slots[0], "ET")
        self.assertEqual(queries.solution(board), "ET ...")

    def test_board_view_marks_solution_cells(self) -> None:
        self.board.place_word(self.first, "OK")
        view = queries.board_view(self.board)
        self.assertEqual((view.width, view.height), (2, 2))
        self.assertEqual(view.cell(0, 0).letter, "O")
        self.assertFalse(view.cell(0, 0).in_solution)
        self.assertTrue(view.cell(0, 1).in_solution)
        self.assertEqual(view.cell(0, 1).letter, "K")
        self.assertFalse(view.cell(1, 0).known)

    def test_board_view_leaves_uncovered_cells_empty(self) -> None:
        board = Board([make_slot("R", 0, 0, 3, key="top"), make_slot("D", 2, 0, 3, key="side")])
        view = queries.board_view(board)
        self.assertIsNone(view.cell(0, 1))
        self.assertIsNotNone(view.cell(2, 2))

    def test_word_filters(self) -> None:
        self.board.place_word(self.first, "OK")
        self.assertEqual(queries.words(self.board, self.dictionary), ["0", "fine", "negation"])
        self.assertEqual(queries.words(self.board, self.dictionary, WordFilter.PLACED), ["fine"])
        self.assertEqual(
            queries.words(self.board, self.dictionary, WordFilter.UNPLACED), ["0", "negation"]
        )
        self.assertEqual(queries.words(self.board, self.dictionary, WordFilter.MISSING), ["0"])
        self.assertEqual(
            queries.words(self.board, self.dictionary, WordFilter.AMBIGUOUS), ["negation"]
        )

    def test_crossing_lists_neighbors_with_offsets(self) -> None:
        crossings = queries.crossing(self.board, self.answer)
        self.assertEqual(
            [(c.label, c.offset, c.neighbor_offset) for c in crossings],
            [("negation", 0, 1), ("fine", 1, 1)],
        )

    def test_candidates_follow_board_letters(self) -> None:
        self.assertEqual(
            queries.candidates(self.board, self.dictionary, self.second), ["NO", "IS"]
        )
        self.board.place_word(self.answer, "OK")
        self.assertEqual(queries.candidates(self.board, self.dictionary, self.second), ["NO"])

    def test_info_summarizes_slot(self) -> None:
        self.board.place_word(self.answer, "OK")
        details = queries.info(self.board, self.dictionary, self.second)
        self.assertEqual(details.label, "negation")
        self.assertEqual(details.index, 2)
        self.assertEqual(details.origin, (1, 0))
        self.assertEqual(details.pattern, ".O")
        self.assertEqual(details.status, WordStatus.SOLVABLE)
        self.assertEqual(details.candidates, ["NO"])
        self.assertEqual([c.label for c in details.crossings], ["0"])

    def test_solve_fills_solution(self) -> None:
        solve(self.board, WordDictionary({"fine": ["OK"], "negation": ["NO"]}))
        self.assertEqual(queries.solution(self.board), "OK")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
