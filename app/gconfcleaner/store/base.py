"""Abstract base class for configuration stores.

This module defines the ConfigStore interface that the Cleaner talks to.
A store exposes a hierarchical namespace of ``/``-delimited directories,
each holding key/value entries that may be bound to a schema.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


class StoreError(Exception):
    """Raised when a query or mutation against the store fails."""


class StoreUnavailableError(StoreError):
    """Raised when the configuration store cannot be reached at all."""


@dataclass(frozen=True, slots=True)
class StoreEntry:
    """A single key/value entry read from a store directory.

    Attributes:
        key: Full key path (e.g. ``/apps/foo/bar``).
        value: Stored value, or None when the key has no value set.
        schema_name: Name of the schema applied to the key, if any.
    """

    key: str
    value: Any
    schema_name: str | None = None

    @property
    def has_value(self) -> bool:
        """Check if the entry carries an actual value."""
        return self.value is not None


class ConfigStore(ABC):
    """Abstract base class for all configuration stores.

    Implementations raise StoreError from every query when the
    underlying engine reports a failure. They never retry.

    Example:
        >>> store = MemoryStore()
        >>> store.set("/apps/foo/bar", "baz")
        >>> store.list_child_dirs("/apps")
        ['/apps/foo']
    """

    @abstractmethod
    def list_child_dirs(self, path: str) -> list[str]:
        """Return the immediate child directories of ``path``.

        Args:
            path: Directory path to list.

        Returns:
            Full child directory paths, in store order.

        Raises:
            StoreError: If the directory listing fails.
        """

    @abstractmethod
    def list_entries(self, directory: str) -> list[StoreEntry]:
        """Return all entries stored directly in ``directory``.

        Args:
            directory: Directory path to read.

        Returns:
            Entries in store order.

        Raises:
            StoreError: If the entry listing fails.
        """

    @abstractmethod
    def resolve_schema(self, schema_name: str) -> bool:
        """Check whether a schema with the given name exists.

        Args:
            schema_name: Full schema key (e.g. ``/schemas/apps/foo/bar``).

        Returns:
            True if the schema is present, False otherwise.

        Raises:
            StoreError: If the lookup itself fails.
        """

    @abstractmethod
    def unset(self, key: str) -> None:
        """Remove ``key`` from the store.

        Raises:
            StoreError: If the store refuses the change.
        """

    @abstractmethod
    def suggest_sync(self) -> None:
        """Ask the store to persist pending changes.

        Raises:
            StoreError: If the flush fails.
        """

    def close(self) -> None:  # noqa: B027
        """Release any resources held by the store."""


def join_path(directory: str, name: str) -> str:
    """Join a directory path and a child name with a single ``/``."""
    if directory.endswith("/"):
        return f"{directory}{name}"
    return f"{directory}/{name}"


def parent_path(path: str) -> str:
    """Return the parent directory of ``path`` (``/`` for top level)."""
    head = path.rstrip("/").rsplit("/", 1)[0]
    return head or "/"
