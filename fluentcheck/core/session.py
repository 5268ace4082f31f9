"""The fluent validation session.

A `ValidationSession` collects deferred checks through chained `require_*`
calls and evaluates them only when one of its terminal methods is called:

1.  `validate()` raises a `ValidationError` carrying the failure messages.
2.  `validate_or_raise()` raises an error built by a caller-supplied factory.
3.  `validate_and_return_errors()` returns the failure messages instead.

Accessors are never called at registration time. Each evaluation calls them
again, so a session can be evaluated repeatedly and accessors with side
effects run once per evaluation.

Example:
    ValidationSession.collect_all() \\
        .require_not_blank(lambda: user.name, "Username") \\
        .require_in_range(lambda: user.age, 0, 130, "Age") \\
        .require_valid_email(lambda: user.email, "Email") \\
        .validate()
"""
import enum
import logging
from typing import Any, Callable, List, Optional, Union

from ..checks import Accessor, Check, conditions, numeric, presence, text
from .exceptions import ValidationError

logger = logging.getLogger(__name__)

SUMMARY_PREFIX = "Validation failed: "


class Strategy(str, enum.Enum):
    """How a session reacts to failing checks."""

    COLLECT_ALL = "collect_all"  # Run every check and report all failures.
    FAIL_FAST = "fail_fast"  # Stop at the first failing check.


class ValidationSession:
    """A fluent builder of deferred checks with a fixed evaluation strategy.

    Checks are kept in registration order and are only ever appended. Methods
    that depend on another check (e.g. a range check needs a non-null numeric
    value) register that prerequisite first, so when both fail the
    prerequisite's message comes first.

    A session is not thread-safe; confine it to one thread.
    """

    def __init__(self, strategy: Union[Strategy, str] = Strategy.COLLECT_ALL) -> None:
        """Initializes an empty session.

        Args:
            strategy (Union[Strategy, str]): The evaluation strategy, either a
                `Strategy` member or its value ("collect_all" or "fail_fast").

        Raises:
            ValueError: If `strategy` is not a known strategy.
        """
        self._strategy = Strategy(strategy)
        self._checks: List[Check] = []

    @classmethod
    def collect_all(cls) -> "ValidationSession":
        """Creates a session that reports every failing check."""
        return cls(Strategy.COLLECT_ALL)

    @classmethod
    def fail_fast(cls) -> "ValidationSession":
        """Creates a session that stops at the first failing check."""
        return cls(Strategy.FAIL_FAST)

    @property
    def strategy(self) -> Strategy:
        return self._strategy

    def __len__(self) -> int:
        return len(self._checks)

    def __repr__(self) -> str:
        return f"ValidationSession(strategy={self._strategy.value!r}, checks={len(self._checks)})"

    def _add(self, *checks: Check) -> "ValidationSession":
        self._checks.extend(checks)
        return self

    # Registration

    def require_not_null(self, accessor: Accessor, name: str) -> "ValidationSession":
        """Requires the value to not be None."""
        return self._add(presence.not_null(accessor, name))

    def require_not_empty(self, accessor: Accessor, name: str) -> "ValidationSession":
        """Requires a non-null value that is not an empty string or container.

        Strings, bytes, sequences, sets, mappings and other sized collections
        are checked for emptiness; other non-null values pass.
        """
        return self._add(presence.not_null(accessor, name), presence.not_empty(accessor, name))

    def require_not_blank(self, accessor: Accessor, name: str) -> "ValidationSession":
        """Requires a non-null value that is not only whitespace."""
        return self._add(presence.not_null(accessor, name), presence.not_blank(accessor, name))

    def require_numeric(self, accessor: Accessor, name: str) -> "ValidationSession":
        """Requires an int, float, Fraction or Decimal value (not a bool)."""
        return self._add(presence.not_null(accessor, name), numeric.numeric(accessor, name))

    def require_in_range(
        self,
        accessor: Accessor,
        min_value: float,
        max_value: float,
        name: str,
    ) -> "ValidationSession":
        """Requires a numeric value within `[min_value, max_value]`, inclusive.

        Args:
            accessor (Accessor): Returns the value to check.
            min_value (float): The lowest accepted value.
            max_value (float): The highest accepted value.
            name (str): The display name used in failure messages.

        Returns:
            ValidationSession: This session, for chaining.
        """
        return self._add(
            presence.not_null(accessor, name),
            numeric.numeric(accessor, name),
            numeric.in_range(accessor, min_value, max_value, name),
        )

    def require_positive_or_zero(self, accessor: Accessor, name: str) -> "ValidationSession":
        """Requires a numeric value greater than or equal to zero."""
        return self._add(
            presence.not_null(accessor, name),
            numeric.numeric(accessor, name),
            numeric.positive_or_zero(accessor, name),
        )

    def require_negative_or_zero(self, accessor: Accessor, name: str) -> "ValidationSession":
        """Requires a numeric value less than or equal to zero."""
        return self._add(
            presence.not_null(accessor, name),
            numeric.numeric(accessor, name),
            numeric.negative_or_zero(accessor, name),
        )

    def require_matches(self, accessor: Accessor, pattern: Any, name: str) -> "ValidationSession":
        """Requires the trimmed text to match `pattern` in full.

        Args:
            accessor (Accessor): Returns the text to check.
            pattern (Any): A regular expression string or compiled pattern.
            name (str): The display name used in failure messages.

        Returns:
            ValidationSession: This session, for chaining.

        Raises:
            re.error: If `pattern` is not a valid regular expression.
            TypeError: If `pattern` is a bytes pattern or not a pattern at all.
        """
        return self._add(
            presence.not_null(accessor, name),
            presence.not_blank(accessor, name),
            text.matches(accessor, pattern, name),
        )

    def require_valid_email(self, accessor: Accessor, name: str) -> "ValidationSession":
        """Requires a plausible email address of at most 254 characters."""
        return self._add(
            presence.not_null(accessor, name),
            presence.not_blank(accessor, name),
            text.valid_email(accessor, name),
        )

    def require_true(self, condition: Callable[[], Any], name: str) -> "ValidationSession":
        """Requires `condition()` to be truthy."""
        return self._add(conditions.is_true(condition, name))

    def require_false(self, condition: Callable[[], Any], name: str) -> "ValidationSession":
        """Requires `condition()` to be falsy."""
        return self._add(conditions.is_false(condition, name))

    def require_that(
        self,
        accessor: Accessor,
        condition: Callable[[Any], Any],
        name: str,
        message: str,
    ) -> "ValidationSession":
        """Requires a non-null value for which `condition(value)` holds.

        Args:
            accessor (Accessor): Returns the value to check.
            condition (Callable[[Any], Any]): The predicate to apply. It is
                not called for None.
            name (str): The display name used in the not-null message.
            message (str): The failure message, reported verbatim.

        Returns:
            ValidationSession: This session, for chaining.
        """
        return self._add(
            presence.not_null(accessor, name),
            conditions.satisfies(accessor, condition, name, message),
        )

    # Evaluation

    def _collect(self, stop_at_first: bool) -> List[str]:
        """Runs the checks in registration order and gathers their messages."""
        logger.debug(f"Evaluating {len(self._checks)} checks (stop at first failure: {stop_at_first}).")
        errors: List[str] = []
        for position, check in enumerate(self._checks, start=1):
            error = check()
            if error is None:
                continue
            errors.append(error)
            if stop_at_first:
                logger.debug(f"Stopped after check {position} of {len(self._checks)}.")
                break
        return errors

    def _failures(self) -> List[str]:
        return self._collect(stop_at_first=self._strategy is Strategy.FAIL_FAST)

    def validate(self) -> None:
        """Evaluates the session and raises if any check fails.

        Raises:
            ValidationError: With every failure message (collect-all) or only
                the first one (fail-fast). The summary message is the
                messages joined with ", " after "Validation failed: ".
        """
        errors = self._failures()
        if errors:
            raise ValidationError(SUMMARY_PREFIX + ", ".join(errors), errors)

    def validate_or_raise(self, error_factory: Callable[[], BaseException]) -> None:
        """Evaluates the session and raises a caller-built error on failure.

        The failure messages are discarded. `error_factory` is called once,
        with no arguments, and only if a check fails.

        Args:
            error_factory (Callable[[], BaseException]): Builds the error to
                raise. An exception class works as well.
        """
        if self._failures():
            raise error_factory()

    def validate_and_return_errors(self) -> List[str]:
        """Runs every check, whatever the strategy, and returns the messages.

        Returns:
            List[str]: The failure messages in registration order; empty if
            every check passed.
        """
        return self._collect(stop_at_first=False)


def collect_all() -> ValidationSession:
    """Shortcut for `ValidationSession.collect_all()`."""
    return ValidationSession.collect_all()


def fail_fast() -> ValidationSession:
    """Shortcut for `ValidationSession.fail_fast()`."""
    return ValidationSession.fail_fast()
