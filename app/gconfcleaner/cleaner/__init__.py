"""Directory scanning and entry classification.

This module provides the Cleaner session, its directory cursor, the
blacklist of skipped subtrees, result models and errors.
"""

from gconfcleaner.cleaner.blacklist import BLACKLISTED_DIR_NAMES, is_blacklisted
from gconfcleaner.cleaner.cleaner import Cleaner
from gconfcleaner.cleaner.cursor import DirectoryCursor
from gconfcleaner.cleaner.errors import (
    CleanerClosedError,
    CleanerError,
    CleanerNotInitializedError,
    CleanerStateError,
    CursorExhaustedError,
    EntryFetchError,
    ScanError,
)
from gconfcleaner.cleaner.models import CleanerActionResult, ScanStats, UnknownPair

__all__ = [
    "BLACKLISTED_DIR_NAMES",
    "Cleaner",
    "CleanerActionResult",
    "CleanerClosedError",
    "CleanerError",
    "CleanerNotInitializedError",
    "CleanerStateError",
    "CursorExhaustedError",
    "DirectoryCursor",
    "EntryFetchError",
    "ScanError",
    "ScanStats",
    "UnknownPair",
    "is_blacklisted",
]
