import unittest

from kryss.data.normalization import clean_word
from kryss.data.pattern import format_pattern, matches, parse_pattern


class PatternMatcherTests(unittest.TestCase):
    def test_known_positions_must_agree(self) -> None:
        self.assertTrue(matches("OSLO", ["O", None, "L", None]))
        self.assertFalse(matches("OSLO", ["O", None, "X", None]))

    def test_unknown_positions_match_anything(self) -> None:
        self.assertTrue(matches("ONE", [None, None, None]))
        self.assertTrue(matches("ONE", parse_pattern("...")))

    def test_length_mismatch_is_false_not_error(self) -> None:
        self.assertFalse(matches("OSLO", ["O", None, None]))
        self.assertFalse(matches("", ["A"]))
        self.assertFalse(matches("AB", []))

    def test_padded_or_expanding_candidates_do_not_fit(self) -> None:
        self.assertFalse(matches(" OSL", ["O", None, None]))
        self.assertFalse(matches("OSL ", [None, None, None]))
        self.assertFalse(matches("GRUß", [None, None, None, None, None]))
        self.assertFalse(matches("GRUß", [None, None, None, "S"]))

    def test_comparison_is_case_insensitive(self) -> None:
        self.assertTrue(matches("oslo", ["O", "S", None, None]))
        self.assertTrue(matches("OSLO", ["o", None, None, None]))

    def test_norwegian_letters_are_not_folded(self) -> None:
        self.assertTrue(matches("BÅT", [None, "Å", None]))
        self.assertFalse(matches("BAT", [None, "Å", None]))
        self.assertFalse(matches("SØL", [None, "O", None]))
        self.assertFalse(matches("ÆRE", ["A", None, None]))
        self.assertTrue(matches("øre", ["Ø", None, None]))

    def test_decomposed_letters_are_composed(self) -> None:
        decomposed = "BA\u030aT"
        self.assertEqual(clean_word(decomposed), "B\u00c5T")
        self.assertTrue(matches(decomposed, [None, "Å", None]))

    def test_parse_and_format_pattern(self) -> None:
        pattern = parse_pattern("o.l.")
        self.assertEqual(pattern, ["O", None, "L", None])
        self.assertEqual(format_pattern(pattern), "O.L.")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
