"""Error type raised when a validation session fails."""

from typing import Any, Dict, List, Sequence


class ValidationError(Exception):
    """Raised by `ValidationSession.validate()` when at least one check fails.

    Attributes:
        message (str): A human-readable summary of the failure.
        errors (List[str]): The individual failure messages, in the order the
            checks were registered.
    """

    def __init__(self, message: str, errors: Sequence[str]) -> None:
        super().__init__(message)
        self.message = message
        self.errors: List[str] = list(errors)

    def to_dict(self) -> Dict[str, Any]:
        """Returns the failure as a JSON-serialisable dictionary."""
        return {"message": self.message, "errors": list(self.errors)}
