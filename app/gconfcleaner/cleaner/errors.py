"""Exceptions raised by the Cleaner.

Store query failures surface as ScanError or EntryFetchError. Misuse of a
Cleaner (wrong state, exhausted cursor, closed session) raises a
CleanerStateError subclass; those indicate a bug in the caller.
"""


class CleanerError(Exception):
    """Base exception for cleaner errors."""


class ScanError(CleanerError):
    """Raised when the directory scan fails part way.

    Attributes:
        path: Directory whose listing failed.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to get the directories in `{path}': {reason}")


class EntryFetchError(CleanerError):
    """Raised when the entries of a directory cannot be read.

    Attributes:
        path: Directory whose entries could not be listed.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to get the entries in `{path}': {reason}")


class CleanerStateError(CleanerError, RuntimeError):
    """Raised when a Cleaner is used in a state that does not allow the call."""


class CleanerNotInitializedError(CleanerStateError):
    """Raised when the cursor is used before a successful scan."""


class CursorExhaustedError(CleanerStateError):
    """Raised when reading past the last scanned directory."""


class CleanerClosedError(CleanerStateError):
    """Raised when a closed Cleaner is used or closed again."""
