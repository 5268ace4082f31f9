"""Pattern and email checks for textual values."""
import functools
import re
from typing import Optional, Union

from . import Accessor, Check

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9_.-]+@[A-Za-z0-9-]+\.[A-Za-z]{2,}")
MAX_EMAIL_LENGTH = 254


@functools.lru_cache(maxsize=128)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compiles a regular expression, reusing earlier compilations.

    Raises:
        re.error: If the pattern is not a valid regular expression.
    """
    return re.compile(pattern)


def matches(accessor: Accessor, pattern: Union[str, re.Pattern[str]], name: str) -> Check:
    """Fails when the trimmed value does not match `pattern` in full.

    The pattern is compiled here, so an invalid expression raises `re.error`
    when the check is registered rather than when it runs.

    Raises:
        re.error: If `pattern` is not a valid regular expression.
        TypeError: If `pattern` is not a string or a compiled string pattern.
    """
    if isinstance(pattern, re.Pattern):
        compiled = pattern
    elif isinstance(pattern, str):
        compiled = compile_pattern(pattern)
    else:
        raise TypeError(f"pattern must be a str or a compiled str pattern, not {type(pattern).__name__}")
    if not isinstance(compiled.pattern, str):
        raise TypeError("pattern must be a str pattern, not a bytes pattern")
    message = f"{name} must match pattern: {compiled.pattern}"

    def check() -> Optional[str]:
        value = accessor()
        if value is None:
            return None
        text = value if isinstance(value, str) else str(value)
        return message if compiled.fullmatch(text.strip()) is None else None

    return check


def is_valid_email(email: str) -> bool:
    """Checks an address against a conservative `local@domain.tld` shape.

    Subdomains and quoted local parts are rejected, as are addresses longer
    than 254 characters.
    """
    return len(email) <= MAX_EMAIL_LENGTH and EMAIL_PATTERN.fullmatch(email) is not None


def valid_email(accessor: Accessor, name: str) -> Check:
    """Fails when the value is not a valid email address. The value is not trimmed."""
    message = f"{name} must be a valid email address"

    def check() -> Optional[str]:
        value = accessor()
        if value is None:
            return None
        email = value if isinstance(value, str) else str(value)
        return None if is_valid_email(email) else message

    return check
