"""In-memory configuration store.

Keeps directories, entries and schemas in plain dictionaries. Used by the
TOML dump store and by tests, which can inject failures for specific
operations and paths.
"""

import logging
from typing import Any, Literal

from gconfcleaner.store.base import ConfigStore, StoreEntry, StoreError, parent_path

logger = logging.getLogger(__name__)

StoreOperation = Literal["list_child_dirs", "list_entries", "resolve_schema", "unset", "sync"]


class MemoryStore(ConfigStore):
    """Dictionary backed ConfigStore.

    Directories are created implicitly when a key is set below them.
    Child directories and entries are reported in insertion order.

    Attributes:
        dirty: True when unsets happened since the last sync.
    """

    def __init__(self) -> None:
        self._children: dict[str, list[str]] = {"/": []}
        self._entries: dict[str, dict[str, tuple[Any, str | None]]] = {"/": {}}
        self._schemas: set[str] = set()
        self._failures: dict[tuple[str, str], str] = {}
        self.dirty = False
        self.sync_count = 0

    # -------------------------------------------------------------------------
    # Population
    # -------------------------------------------------------------------------

    def add_dir(self, path: str) -> None:
        """Create ``path`` and any missing parent directories."""
        if path in self._children:
            return
        parent = parent_path(path)
        self.add_dir(parent)
        self._children[parent].append(path)
        self._children[path] = []
        self._entries[path] = {}

    def set(self, key: str, value: Any, schema_name: str | None = None) -> None:
        """Store ``value`` under ``key``, creating its directory.

        Args:
            key: Full key path.
            value: Value to store; None leaves the key without a value.
            schema_name: Optional schema bound to the key.
        """
        directory = parent_path(key)
        self.add_dir(directory)
        self._entries[directory][key] = (value, schema_name)

    def add_schema(self, schema_name: str) -> None:
        """Register a schema so that ``resolve_schema`` finds it."""
        self._schemas.add(schema_name)

    def fail_on(self, operation: StoreOperation, path: str = "*", message: str = "") -> None:
        """Make ``operation`` raise StoreError for ``path`` (``*`` for any path).

        Args:
            operation: Store operation to break.
            path: Path or key the failure applies to.
            message: Error text carried by the StoreError.
        """
        self._failures[(operation, path)] = message or f"{operation} failed"

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    @property
    def directories(self) -> list[str]:
        """All known directories except the root."""
        return [path for path in self._children if path != "/"]

    @property
    def schemas(self) -> list[str]:
        """All registered schema names, sorted."""
        return sorted(self._schemas)

    def get(self, key: str) -> Any:
        """Return the value stored under ``key`` or None."""
        value, _schema = self._entries.get(parent_path(key), {}).get(key, (None, None))
        return value

    def iter_raw_entries(self) -> list[tuple[str, str, Any, str | None]]:
        """Return ``(directory, key, value, schema_name)`` for every entry."""
        return [
            (directory, key, value, schema_name)
            for directory, entries in self._entries.items()
            for key, (value, schema_name) in entries.items()
        ]

    # -------------------------------------------------------------------------
    # ConfigStore interface
    # -------------------------------------------------------------------------

    def _check_failure(self, operation: str, path: str) -> None:
        message = self._failures.get((operation, path)) or self._failures.get((operation, "*"))
        if message is not None:
            raise StoreError(message)

    def list_child_dirs(self, path: str) -> list[str]:
        self._check_failure("list_child_dirs", path)
        return list(self._children.get(path, []))

    def list_entries(self, directory: str) -> list[StoreEntry]:
        self._check_failure("list_entries", directory)
        return [
            StoreEntry(key=key, value=value, schema_name=schema_name)
            for key, (value, schema_name) in self._entries.get(directory, {}).items()
        ]

    def resolve_schema(self, schema_name: str) -> bool:
        self._check_failure("resolve_schema", schema_name)
        return schema_name in self._schemas

    def unset(self, key: str) -> None:
        self._check_failure("unset", key)
        entries = self._entries.get(parent_path(key), {})
        if entries.pop(key, None) is not None:
            logger.debug("Unset %s", key)
            self.dirty = True

    def suggest_sync(self) -> None:
        self._check_failure("sync", "*")
        self.sync_count += 1
        self.dirty = False

    def __repr__(self) -> str:
        return f"MemoryStore(dirs={len(self._children) - 1}, schemas={len(self._schemas)})"


def build_store(
    entries: dict[str, Any] | None = None,
    *,
    schemas: dict[str, str] | None = None,
    dirs: list[str] | None = None,
) -> MemoryStore:
    """Create a MemoryStore from plain mappings.

    Args:
        entries: Mapping of full key path to value.
        schemas: Mapping of full key path to the schema name bound to it.
            Every schema name listed here is also registered as present.
        dirs: Extra (possibly empty) directories to create.

    Returns:
        A populated MemoryStore.
    """
    store = MemoryStore()
    for path in dirs or []:
        store.add_dir(path)
    schemas = schemas or {}
    for key, value in (entries or {}).items():
        store.set(key, value, schemas.get(key))
    for schema_name in schemas.values():
        store.add_schema(schema_name)
    return store
