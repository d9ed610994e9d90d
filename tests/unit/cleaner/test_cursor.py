"""Tests for DirectoryCursor."""

import pytest
from gconfcleaner.cleaner.cursor import DirectoryCursor
from gconfcleaner.cleaner.errors import CursorExhaustedError


class TestDirectoryCursor:
    """Tests for the forward-only directory cursor."""

    def test_advance_moves_forward(self) -> None:
        """advance() returns directories in order."""
        cursor = DirectoryCursor(["/a", "/a/b"])

        assert cursor.advance() == "/a"
        assert cursor.current == "/a/b"
        assert cursor.position == 1
        assert cursor.remaining == 1

    def test_exhaustion_is_terminal(self) -> None:
        """Once exhausted the cursor raises on every access."""
        cursor = DirectoryCursor(["/a"])
        cursor.advance()

        assert cursor.exhausted
        with pytest.raises(CursorExhaustedError):
            cursor.advance()
        with pytest.raises(CursorExhaustedError):
            _ = cursor.current
        assert cursor.exhausted

    def test_empty_cursor_is_exhausted(self) -> None:
        """A cursor over no directories starts exhausted."""
        cursor = DirectoryCursor()

        assert cursor.exhausted
        assert len(cursor) == 0

    def test_iteration_consumes(self) -> None:
        """Iterating drains the cursor; a second pass yields nothing."""
        cursor = DirectoryCursor(["/a", "/b"])

        assert list(cursor) == ["/a", "/b"]
        assert list(cursor) == []

    def test_dirs_are_copied(self) -> None:
        """Mutating the source list does not affect the cursor."""
        source = ["/a"]
        cursor = DirectoryCursor(source)
        source.append("/b")

        assert cursor.dirs == ("/a",)
