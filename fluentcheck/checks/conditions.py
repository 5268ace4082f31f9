"""Boolean and caller-supplied predicate checks."""
import logging
from typing import Any, Callable, Optional

from . import Accessor, Check

logger = logging.getLogger(__name__)


def is_true(condition: Callable[[], Any], name: str) -> Check:
    """Fails when `condition()` is falsy."""
    message = f"{name} must be true"

    def check() -> Optional[str]:
        return None if condition() else message

    return check


def is_false(condition: Callable[[], Any], name: str) -> Check:
    """Fails when `condition()` is truthy."""
    message = f"{name} must be false"

    def check() -> Optional[str]:
        return message if condition() else None

    return check


def satisfies(accessor: Accessor, condition: Callable[[Any], Any], name: str, message: str) -> Check:
    """Fails with `message` when `condition(value)` is falsy.

    The predicate is not called for None. If it raises, the exception is
    logged and the check fails with `message`.
    """

    def check() -> Optional[str]:
        value = accessor()
        if value is None:
            return None
        try:
            passed = condition(value)
        except Exception as e:
            logger.warning(f"Predicate for {name} raised {type(e).__name__}: {e}")
            return message
        return None if passed else message

    return check
