import unittest
from decimal import Decimal
from fractions import Fraction

from fluentcheck.checks import numeric
from fluentcheck.checks.numeric import NumericKind


class TestNumericKinds(unittest.TestCase):

    def test_classify(self):
        self.assertIs(numeric.classify(5), NumericKind.INTEGER)
        self.assertIs(numeric.classify(2 ** 80), NumericKind.INTEGER)
        self.assertIs(numeric.classify(1.5), NumericKind.FLOAT)
        self.assertIs(numeric.classify(Decimal("1.5")), NumericKind.DECIMAL)
        self.assertIs(numeric.classify(Fraction(1, 3)), NumericKind.RATIONAL)
        for value in (True, False, 1j, "1", None, [1]):
            with self.subTest(value=value):
                self.assertIsNone(numeric.classify(value))

    def test_numeric_check(self):
        for value in (0, -7, 1.25, Decimal("123456789.0123456789"), Fraction(2, 3)):
            with self.subTest(value=value):
                self.assertIsNone(numeric.numeric(lambda value=value: value, "Value")())
        for value in ("not a number", True, None, 2 + 3j):
            with self.subTest(value=value):
                self.assertEqual(numeric.numeric(lambda value=value: value, "Value")(), "Value must be numeric")

    def test_large_integers_compare_exactly(self):
        """2**63 + 1 would round down to 2**63 as a float."""
        self.assertEqual(numeric.compare(2 ** 63 + 1, float(2 ** 63)), 1)
        self.assertEqual(numeric.compare(2 ** 63, float(2 ** 63)), 0)

    def test_decimals_compare_exactly(self):
        self.assertEqual(numeric.compare(Decimal("100.0000000000000000001"), 100.0), 1)
        self.assertEqual(numeric.compare(Decimal("0.1"), 0.1), 0)
        self.assertEqual(numeric.compare(Decimal("-0"), 0.0), 0)

    def test_fractions_compare_exactly(self):
        self.assertEqual(numeric.compare(Fraction(1, 3), 1 / 3), 1)
        self.assertEqual(numeric.compare(Fraction(1, 2), 0.5), 0)

    def test_nan_and_unknown_values_are_not_compared(self):
        self.assertIsNone(numeric.compare(float("nan"), 0.0))
        self.assertIsNone(numeric.compare(Decimal("NaN"), 0.0))
        self.assertIsNone(numeric.compare("10", 0.0))
        self.assertIsNone(numeric.compare(5, float("nan")))


class TestRangeAndSignChecks(unittest.TestCase):

    def _range(self, value, low=0, high=100):
        return numeric.in_range(lambda: value, low, high, "Age")()

    def test_range_is_inclusive(self):
        for value in (0, 100, 0.0, 100.0, Decimal("0"), Decimal("100.00"), 50, Fraction(1, 2)):
            with self.subTest(value=value):
                self.assertIsNone(self._range(value))

    def test_range_rejects_values_just_outside(self):
        for value in (-1, 101, -1e-9, 100.000001, Decimal("-0.0001"), Decimal("100.0001"), 200):
            with self.subTest(value=value):
                self.assertEqual(self._range(value), "Age must be between 0.0 and 100.0")

    def test_range_message_renders_float_bounds(self):
        self.assertEqual(
            numeric.in_range(lambda: 5, -2.5, 1, "Delta")(),
            "Delta must be between -2.5 and 1.0",
        )

    def test_range_ignores_non_numeric_values(self):
        for value in (None, "abc", float("nan"), True):
            with self.subTest(value=value):
                self.assertIsNone(self._range(value))

    def test_positive_or_zero(self):
        check = lambda value: numeric.positive_or_zero(lambda: value, "Value")()
        for value in (-5, -15.5, Decimal("-50.0"), Fraction(-1, 7)):
            with self.subTest(value=value):
                self.assertEqual(check(value), "Value must be positive or zero")
        for value in (0, -0.0, 10, Decimal("0.000"), None, "x"):
            with self.subTest(value=value):
                self.assertIsNone(check(value))

    def test_negative_or_zero(self):
        check = lambda value: numeric.negative_or_zero(lambda: value, "Value")()
        for value in (10, 15.5, Decimal("50.0"), Fraction(1, 7)):
            with self.subTest(value=value):
                self.assertEqual(check(value), "Value must be negative or zero")
        for value in (0, -0.0, -10, Decimal("-0.5"), None, "x"):
            with self.subTest(value=value):
                self.assertIsNone(check(value))


if __name__ == '__main__':
    unittest.main()
