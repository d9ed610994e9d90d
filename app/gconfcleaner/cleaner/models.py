"""Result models returned by the Cleaner."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class UnknownPair:
    """A key/value entry with no resolvable schema.

    Attributes:
        key: Full key path.
        value: Value the store reported for the key (never None).
    """

    key: str
    value: Any

    def __iter__(self) -> Iterator[Any]:
        yield self.key
        yield self.value


@dataclass(frozen=True, slots=True)
class CleanerActionResult:
    """Result of a single store mutation (unset or sync).

    Attributes:
        target: Key that was unset, or "sync" for a sync request.
        success: Whether the store accepted the change.
        error: Error message if the operation failed, None otherwise.
        dry_run: Whether the operation was only simulated.
    """

    target: str
    success: bool
    error: str | None = None
    dry_run: bool = False

    @property
    def failed(self) -> bool:
        """Check if the operation failed."""
        return not self.success


@dataclass(frozen=True, slots=True)
class ScanStats:
    """Counters accumulated since the last scan.

    Attributes:
        n_dirs: Directories found by the scan.
        n_pairs: Entries examined so far.
        n_unknown_pairs: Entries classified as unknown so far.
    """

    n_dirs: int = 0
    n_pairs: int = 0
    n_unknown_pairs: int = 0

    def to_dict(self) -> dict[str, int]:
        """Convert to a dictionary for JSON output."""
        return {
            "dirs": self.n_dirs,
            "pairs": self.n_pairs,
            "unknown_pairs": self.n_unknown_pairs,
        }
