"""Numeric checks with per-kind comparison.

Each numeric kind is compared against a bound in its own domain, so large
integers, fractions and high-precision decimals are never squeezed through a
lossy float before comparing:

-   Integers compare exactly against the float bound (Python compares int and
    float without rounding).
-   Rationals such as `fractions.Fraction` compare exactly as fractions.
-   Decimals compare against the bound converted with `Decimal(repr(bound))`,
    i.e. its shortest decimal rendering.
-   Other reals (float, numpy floats) use float comparison.

Booleans and complex numbers are not numeric. Values of any other kind, and
NaN, produce no violation from the range and sign checks; the is-numeric
check registered ahead of them reports the more specific problem.
"""
import enum
import logging
import math
import numbers
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Dict, Optional

from . import Accessor, Check

logger = logging.getLogger(__name__)


class NumericKind(enum.Enum):
    """The numeric representations recognised by the range and sign checks."""

    INTEGER = "integer"
    RATIONAL = "rational"
    FLOAT = "float"
    DECIMAL = "decimal"


def classify(value: Any) -> Optional[NumericKind]:
    """Returns the numeric kind of a value, or None if it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return NumericKind.DECIMAL
    if isinstance(value, numbers.Integral):
        return NumericKind.INTEGER
    if isinstance(value, numbers.Rational):
        return NumericKind.RATIONAL
    if isinstance(value, numbers.Real):
        return NumericKind.FLOAT
    return None


def _sign(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def _compare_integer(value: Any, bound: float) -> Optional[int]:
    return _sign(int(value), bound)


def _compare_rational(value: Any, bound: float) -> Optional[int]:
    return _sign(Fraction(value.numerator, value.denominator), bound)


def _compare_float(value: Any, bound: float) -> Optional[int]:
    number = float(value)
    if math.isnan(number):
        return None
    return _sign(number, bound)


def _compare_decimal(value: Decimal, bound: float) -> Optional[int]:
    if value.is_nan():
        return None
    return _sign(value, Decimal(repr(bound)))


_COMPARATORS: Dict[NumericKind, Callable[[Any, float], Optional[int]]] = {
    NumericKind.INTEGER: _compare_integer,
    NumericKind.RATIONAL: _compare_rational,
    NumericKind.FLOAT: _compare_float,
    NumericKind.DECIMAL: _compare_decimal,
}


def compare(value: Any, bound: float) -> Optional[int]:
    """Compares a numeric value with a bound in the value's native domain.

    Args:
        value (Any): The value to compare.
        bound (float): The bound to compare against.

    Returns:
        Optional[int]: -1, 0 or 1 as the value is below, equal to or above the
        bound. None when the value is not numeric, or when either side is NaN.
    """
    kind = classify(value)
    if kind is None:
        logger.debug(f"No numeric comparison for {type(value).__name__}.")
        return None
    if math.isnan(bound):
        return None
    return _COMPARATORS[kind](value, bound)


def numeric(accessor: Accessor, name: str) -> Check:
    """Fails when the value is not of a recognised numeric kind."""
    message = f"{name} must be numeric"

    def check() -> Optional[str]:
        return message if classify(accessor()) is None else None

    return check


def in_range(accessor: Accessor, min_value: float, max_value: float, name: str) -> Check:
    """Fails when the value lies outside `[min_value, max_value]`.

    Both ends are inclusive. The bounds are stored as floats, which is also
    how they are rendered in the message.
    """
    lower = float(min_value)
    upper = float(max_value)
    message = f"{name} must be between {lower} and {upper}"

    def check() -> Optional[str]:
        value = accessor()
        below = compare(value, lower)
        above = compare(value, upper)
        if below is None or above is None:
            return None
        return message if below < 0 or above > 0 else None

    return check


def positive_or_zero(accessor: Accessor, name: str) -> Check:
    """Fails when the value is below zero."""
    message = f"{name} must be positive or zero"

    def check() -> Optional[str]:
        result = compare(accessor(), 0.0)
        return message if result is not None and result < 0 else None

    return check


def negative_or_zero(accessor: Accessor, name: str) -> Check:
    """Fails when the value is above zero."""
    message = f"{name} must be negative or zero"

    def check() -> Optional[str]:
        result = compare(accessor(), 0.0)
        return message if result is not None and result > 0 else None

    return check
