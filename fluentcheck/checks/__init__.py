"""Deferred check factories used by `ValidationSession`.

Every factory in this package takes a deferred accessor (a zero-argument
callable returning the value to test), a display name and any check-specific
parameters, and returns a zero-argument check. Invoking a check calls the
accessor and returns either None (pass) or a failure message.

A check never raises because a value is absent or of the wrong kind. Those
cases pass silently and are left to the prerequisite checks the session
registers ahead of it.
"""
from typing import Any, Callable, Optional

Accessor = Callable[[], Any]
Check = Callable[[], Optional[str]]

__all__ = ["Accessor", "Check"]
