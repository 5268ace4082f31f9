"""Checks for absent, empty and blank values."""
import logging
from collections.abc import Collection, Mapping, Sequence, Set
from typing import Any, Optional

from . import Accessor, Check

logger = logging.getLogger(__name__)

# Kinds whose emptiness is checked with len(). Anything else is left alone.
EMPTIABLE_KINDS = (str, bytes, bytearray, memoryview, Mapping, Sequence, Set, Collection)


def not_null(accessor: Accessor, name: str) -> Check:
    """Fails when the accessor returns None."""
    message = f"{name} must not be null"

    def check() -> Optional[str]:
        return message if accessor() is None else None

    return check


def is_empty(value: Any) -> Optional[bool]:
    """Reports whether a value of a recognised kind is empty.

    Args:
        value (Any): The value to inspect.

    Returns:
        Optional[bool]: True or False for recognised kinds, None when the
        value is None or its emptiness cannot be determined.
    """
    if value is None:
        return None
    if not isinstance(value, EMPTIABLE_KINDS):
        logger.debug(f"Emptiness of {type(value).__name__} is not checked.")
        return None
    try:
        return len(value) == 0
    except TypeError:
        # e.g. zero-dimensional arrays claim to be collections but have no length.
        logger.debug(f"Could not determine the length of {type(value).__name__}.")
        return None


def not_empty(accessor: Accessor, name: str) -> Check:
    """Fails when the value is an empty string, sequence, set, mapping or collection."""
    message = f"{name} must not be empty"

    def check() -> Optional[str]:
        return message if is_empty(accessor()) else None

    return check


def not_blank(accessor: Accessor, name: str) -> Check:
    """Fails when the value is None or only whitespace.

    Bytes-like values are stripped as bytes. Other values that are not
    strings are rendered with `str()` first.
    """
    message = f"{name} must not be blank"

    def check() -> Optional[str]:
        value = accessor()
        if value is None:
            return message
        if isinstance(value, str):
            text = value
        elif isinstance(value, (bytes, bytearray, memoryview)):
            text = bytes(value)
        else:
            text = str(value)
        return message if not text.strip() else None

    return check
