"""Error hierarchy for the class tracker service.

Each error maps to one HTTP outcome in ``class_tracker.main``:
ValidationError -> 400, StoreError -> 500. ConfigurationError never reaches a
request; it stops the process at startup.
"""

from typing import Optional


class ClassTrackerError(Exception):
    """Base exception for all class tracker errors."""

    pass


class ValidationError(ClassTrackerError):
    """A required request field is missing."""

    pass


class StoreError(ClassTrackerError):
    """The persistence layer failed (connectivity, constraint violation, ...).

    ``message`` describes the operation that failed; the underlying exception
    is kept in ``__cause__``.
    """

    def __init__(self, message: str, original: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.original = original

    @property
    def error(self) -> str:
        return str(self.original) if self.original is not None else self.message


class ConfigurationError(ClassTrackerError):
    """Required configuration is absent. Fatal at startup."""

    pass
