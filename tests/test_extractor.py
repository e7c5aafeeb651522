"""Unit tests for extractor module."""

import unittest

from inlinemath_pkg.extractor import (
    extract,
    extract_numeric_expression_and_unit,
    find_unit,
    numeric_expression,
    scan,
)
from inlinemath_pkg.types import (
    NUMBER,
    OPERATOR,
    PERCENT,
    WHITESPACE,
    WORD,
    Extraction,
    ValidationError,
)


class TestScan(unittest.TestCase):
    """Test lexical scanning of raw text."""

    def test_token_kinds_in_order(self):
        kinds = [tok.kind for tok in scan("a 1")]
        self.assertEqual(kinds, [WORD, WHITESPACE, NUMBER])

    def test_number_values(self):
        tokens = scan("12.5")
        self.assertEqual(len(tokens), 1)
        self.assertEqual(tokens[0].value, 12.5)

    def test_percent_number(self):
        (tok,) = scan("25%")
        self.assertEqual(tok.kind, PERCENT)
        self.assertAlmostEqual(tok.value, 0.25)
        self.assertEqual(tok.text, "25%")

    def test_multiply_glyph_is_operator(self):
        tokens = scan("3X4")
        self.assertEqual([tok.kind for tok in tokens], [NUMBER, OPERATOR, NUMBER])

    def test_glyph_split_out_of_word(self):
        tokens = scan("Xbox")
        self.assertEqual([tok.kind for tok in tokens], [OPERATOR, WORD])
        self.assertEqual(tokens[1].text, "box")

    def test_glyph_touching_unit(self):
        tokens = scan("kgX3")
        self.assertEqual([tok.kind for tok in tokens], [WORD, OPERATOR, NUMBER])

    def test_other_characters_discarded(self):
        texts = [tok.text for tok in scan("$5=!")]
        self.assertEqual(texts, ["5"])

    def test_scan_is_immutable_tuple(self):
        self.assertIsInstance(scan("1 + 2"), tuple)

    def test_input_length_limit(self):
        from inlinemath_pkg.config import MAX_INPUT_LENGTH

        with self.assertRaises(ValidationError) as ctx:
            scan("1" * (MAX_INPUT_LENGTH + 1))
        self.assertEqual(ctx.exception.code, "TOO_LONG")


class TestExtract(unittest.TestCase):
    """Test numeric expression and unit extraction."""

    def test_unit_capture(self):
        self.assertEqual(extract("5 km + 2 km"), Extraction("5 + 2", "km"))

    def test_no_number(self):
        result = extract("hello world")
        self.assertEqual(result.expression, "")
        self.assertIsNone(result.unit)
        self.assertTrue(result.is_empty)

    def test_operators_without_numbers_are_empty(self):
        self.assertEqual(extract_numeric_expression_and_unit("( + )"), ("", None))

    def test_multiply_glyph_rewritten(self):
        self.assertEqual(extract("3X4"), Extraction("3 * 4", None))

    def test_glyph_attached_to_unit_still_multiplies(self):
        self.assertEqual(extract("2 kgX3"), Extraction("2 * 3", "kg"))

    def test_stray_words_and_punctuation_dropped(self):
        self.assertEqual(
            extract("total: 12.5 USD + 3 USD"), Extraction("12.5 + 3", "USD")
        )

    def test_unit_without_space(self):
        self.assertEqual(extract("5km").unit, "km")

    def test_operator_before_word_means_no_unit(self):
        self.assertEqual(extract("5 + 2 km"), Extraction("5 + 2", None))

    def test_unit_after_leading_words(self):
        self.assertEqual(extract("price 20 eur X 3"), Extraction("20 * 3", "eur"))

    def test_only_first_word_is_unit(self):
        self.assertEqual(extract("5 km miles").unit, "km")

    def test_parenthesis_before_word(self):
        result = extract("(2 + 3) kg")
        self.assertEqual(result.expression, "( 2 + 3 )")
        self.assertIsNone(result.unit)

    def test_percent_kept_in_expression(self):
        self.assertEqual(extract("100 + 10% tip").expression, "100 + 10%")

    def test_numeric_expression_never_has_letters(self):
        expr = extract("a1b2cX3 dog (4)").expression
        self.assertFalse(any(ch.isalpha() for ch in expr))

    def test_helpers_on_scan(self):
        tokens = scan("7 m / 2")
        self.assertEqual(find_unit(tokens), "m")
        self.assertEqual(numeric_expression(tokens), "7 / 2")


if __name__ == "__main__":
    unittest.main()
