"""fluentcheck: A fluent, lazily evaluated validation builder.

Checks are registered against deferred value accessors through chained calls
and only run when the session is evaluated, either collecting every failure
or stopping at the first one.
"""

from .core.exceptions import ValidationError
from .core.session import Strategy, ValidationSession, collect_all, fail_fast

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "ValidationError",
    "ValidationSession",
    "Strategy",
    "collect_all",
    "fail_fast",
    "__version__",
    "__license__",
]
