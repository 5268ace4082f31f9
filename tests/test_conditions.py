import unittest

from fluentcheck.checks import conditions


class TestConditionChecks(unittest.TestCase):

    def test_is_true(self):
        self.assertIsNone(conditions.is_true(lambda: True, "Condition")())
        self.assertEqual(conditions.is_true(lambda: False, "Condition")(), "Condition must be true")

    def test_is_false(self):
        self.assertIsNone(conditions.is_false(lambda: False, "Condition")())
        self.assertEqual(conditions.is_false(lambda: True, "Condition")(), "Condition must be false")

    def test_satisfies(self):
        check = conditions.satisfies(lambda: 5, lambda v: v > 10, "Value", "Value must be greater than 10")
        self.assertEqual(check(), "Value must be greater than 10")
        check = conditions.satisfies(lambda: 15, lambda v: v > 10, "Value", "Value must be greater than 10")
        self.assertIsNone(check())

    def test_predicate_is_not_called_for_none(self):
        calls = []
        check = conditions.satisfies(lambda: None, calls.append, "Value", "unused")
        self.assertIsNone(check())
        self.assertEqual(calls, [])

    def test_predicate_errors_become_failures(self):
        """A predicate that raises fails the check instead of escaping."""
        check = conditions.satisfies(lambda: "text", lambda v: v > 10, "Value", "Value must be greater than 10")
        with self.assertLogs("fluentcheck.checks.conditions", level="WARNING") as logs:
            self.assertEqual(check(), "Value must be greater than 10")
        self.assertIn("TypeError", logs.output[0])


if __name__ == '__main__':
    unittest.main()
