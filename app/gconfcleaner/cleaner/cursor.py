"""Forward-only cursor over scanned directories."""

from collections.abc import Iterator, Sequence

from gconfcleaner.cleaner.errors import CursorExhaustedError


class DirectoryCursor:
    """Position within the ordered list of scanned directories.

    The cursor only moves forward. Once exhausted it stays exhausted;
    a new scan creates a new cursor.

    Example:
        >>> cursor = DirectoryCursor(["/apps", "/apps/foo"])
        >>> cursor.advance()
        '/apps'
        >>> cursor.current
        '/apps/foo'
    """

    def __init__(self, dirs: Sequence[str] = ()) -> None:
        self._dirs: tuple[str, ...] = tuple(dirs)
        self._index = 0

    @property
    def dirs(self) -> tuple[str, ...]:
        """All directories covered by this cursor, in order."""
        return self._dirs

    @property
    def position(self) -> int:
        """Index of the next directory to hand out."""
        return self._index

    @property
    def exhausted(self) -> bool:
        """True once every directory has been handed out."""
        return self._index >= len(self._dirs)

    @property
    def remaining(self) -> int:
        """Number of directories not yet handed out."""
        return len(self._dirs) - self._index

    @property
    def current(self) -> str:
        """The next directory, without advancing.

        Raises:
            CursorExhaustedError: If no directory is left.
        """
        if self.exhausted:
            msg = "No directories left; run a new scan"
            raise CursorExhaustedError(msg)
        return self._dirs[self._index]

    def advance(self) -> str:
        """Return the next directory and move past it.

        Raises:
            CursorExhaustedError: If no directory is left.
        """
        path = self.current
        self._index += 1
        return path

    def __iter__(self) -> Iterator[str]:
        while not self.exhausted:
            yield self.advance()

    def __len__(self) -> int:
        return len(self._dirs)

    def __repr__(self) -> str:
        return f"DirectoryCursor(position={self._index}, total={len(self._dirs)})"
