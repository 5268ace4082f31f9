import unittest
from array import array
from collections import OrderedDict, deque

from fluentcheck.checks import presence


class TestPresenceChecks(unittest.TestCase):

    def test_not_null(self):
        self.assertEqual(presence.not_null(lambda: None, "Value")(), "Value must not be null")
        for value in (0, "", [], False):
            self.assertIsNone(presence.not_null(lambda value=value: value, "Value")())

    def test_empty_values_of_every_kind(self):
        """Each recognised kind reports emptiness through len()."""
        empty_values = ["", b"", bytearray(), memoryview(b""), [], (), range(0), {}, OrderedDict(),
                        set(), frozenset(), deque(), array("i"), {}.keys()]
        for value in empty_values:
            with self.subTest(kind=type(value).__name__):
                self.assertTrue(presence.is_empty(value))
                self.assertEqual(presence.not_empty(lambda value=value: value, "Value")(), "Value must not be empty")

    def test_non_empty_values(self):
        for value in ["a", b"a", [0], (None,), {"k": 1}, {1}, deque([1]), array("i", [1])]:
            with self.subTest(kind=type(value).__name__):
                self.assertFalse(presence.is_empty(value))
                self.assertIsNone(presence.not_empty(lambda value=value: value, "Value")())

    def test_unrecognised_kinds_are_not_checked(self):
        """None and values without a length never fail the emptiness check."""
        for value in (None, 0, 3.5, object(), True):
            with self.subTest(value=value):
                self.assertIsNone(presence.is_empty(value))
                self.assertIsNone(presence.not_empty(lambda value=value: value, "Value")())

    def test_not_blank(self):
        check = lambda value: presence.not_blank(lambda: value, "Name")()
        self.assertEqual(check(None), "Name must not be blank")
        self.assertEqual(check(""), "Name must not be blank")
        self.assertEqual(check(" \t\n "), "Name must not be blank")
        self.assertIsNone(check("  x  "))
        self.assertIsNone(check(123))

    def test_not_blank_bytes(self):
        """Bytes-like values are stripped as bytes, not as their repr."""
        check = lambda value: presence.not_blank(lambda: value, "Name")()
        for value in (b"", b"   ", bytearray(b" \t\n"), memoryview(b"  ")):
            with self.subTest(value=value):
                self.assertEqual(check(value), "Name must not be blank")
        self.assertIsNone(check(b" x "))
        self.assertIsNone(check(bytearray(b"x")))


if __name__ == '__main__':
    unittest.main()
