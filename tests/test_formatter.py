"""Unit tests for formatter module."""

import math
import unittest

from inlinemath_pkg.formatter import format_result, format_value
from inlinemath_pkg.types import NonFiniteResultError


class TestFormatValue(unittest.TestCase):
    """Test fixed-decimal formatting."""

    def test_integers_have_no_decimal_point(self):
        self.assertEqual(format_value(2.0), "2")
        self.assertEqual(format_value(100.0), "100")
        self.assertEqual(format_value(-2.0), "-2")

    def test_trailing_zeros_trimmed(self):
        self.assertEqual(format_value(2.5), "2.5")
        self.assertEqual(format_value(1234567.125), "1234567.125")

    def test_rounded_to_eight_decimals(self):
        self.assertEqual(format_value(1 / 3), "0.33333333")
        self.assertEqual(format_value(2 / 3), "0.66666667")
        self.assertEqual(format_value(0.1 + 0.2), "0.3")

    def test_ties_round_away_from_zero(self):
        # 1/512 = 0.001953125 exactly in binary
        self.assertEqual(format_value(1 / 512), "0.00195313")
        self.assertEqual(format_value(-1 / 512), "-0.00195313")
        self.assertEqual(format_value(0.125, 2), "0.13")
        self.assertEqual(format_value(-0.125, 2), "-0.13")

    def test_huge_finite_value(self):
        self.assertEqual(format_value(float(2**70)), str(2**70))

    def test_tiny_values_round_to_zero(self):
        self.assertEqual(format_value(1e-9), "0")
        self.assertEqual(format_value(-1e-9), "0")
        self.assertEqual(format_value(-0.0), "0")

    def test_custom_decimals(self):
        self.assertEqual(format_value(1 / 3, 2), "0.33")
        self.assertEqual(format_value(2.5, 0), "3")

    def test_never_ends_in_point_or_zero_fraction(self):
        for value in (0.5, 10.0, 99.90000001, 7.123, -3.25, 1e6):
            text = format_value(value)
            self.assertFalse(text.endswith("."), text)
            if "." in text:
                self.assertFalse(text.endswith("0"), text)
                self.assertLessEqual(len(text.split(".")[1]), 8)

    def test_reformatting_is_stable(self):
        for value in (2.0, 2.5, 1 / 3, 2 / 3, 0.1 + 0.2, -12.125, 110.00000001):
            text = format_value(value)
            self.assertEqual(format_value(float(text)), text)

    def test_non_finite(self):
        for value in (math.nan, math.inf, -math.inf):
            with self.assertRaises(NonFiniteResultError):
                format_value(value)


class TestFormatResult(unittest.TestCase):
    def test_unit_appended(self):
        self.assertEqual(format_result(7.0, "km"), "7 km")

    def test_no_unit(self):
        self.assertEqual(format_result(7.0), "7")
        self.assertEqual(format_result(7.0, None), "7")

    def test_non_finite_with_unit(self):
        with self.assertRaises(NonFiniteResultError):
            format_result(math.nan, "km")


if __name__ == "__main__":
    unittest.main()
