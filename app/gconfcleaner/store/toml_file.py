"""Configuration store backed by a TOML dump file.

The dump describes directories as tables under ``dirs``. Entry values are
either plain TOML values or inline tables carrying ``value`` and ``schema``::

    schemas = ["/schemas/apps/foo/enabled"]

    [dirs."/apps/foo"]
    bar = "baz"
    enabled = { value = true, schema = "/schemas/apps/foo/enabled" }
    pending = { schema = "/schemas/apps/foo/pending" }

Unsets are applied in memory and written back on ``suggest_sync()``.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any, cast

import tomli_w

from gconfcleaner.store.base import StoreError, StoreUnavailableError, join_path
from gconfcleaner.store.memory import MemoryStore

logger = logging.getLogger(__name__)

_ENTRY_TABLE_KEYS = frozenset({"value", "schema"})


class TomlFileStore(MemoryStore):
    """MemoryStore loaded from and synced back to a TOML dump file.

    Attributes:
        path: Location of the dump file.
    """

    def __init__(self, path: Path) -> None:
        """Load the dump file at ``path``.

        Args:
            path: TOML dump file to read.

        Raises:
            StoreUnavailableError: If the file is missing, unreadable or malformed.
        """
        super().__init__()
        self.path = path
        self._load()

    def _load(self) -> None:
        try:
            with open(self.path, "rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError as e:
            raise StoreUnavailableError(f"Dump file not found: {self.path}") from e
        except tomllib.TOMLDecodeError as e:
            raise StoreUnavailableError(f"Invalid TOML in {self.path}: {e}") from e
        except OSError as e:
            raise StoreUnavailableError(f"Failed to read {self.path}: {e}") from e

        schemas_raw: object = data.get("schemas", [])
        if not isinstance(schemas_raw, list):
            raise StoreUnavailableError(f"'schemas' must be a list in {self.path}")
        for schema_name in cast(list[object], schemas_raw):
            self.add_schema(str(schema_name))

        dirs_raw: object = data.get("dirs", {})
        if not isinstance(dirs_raw, dict):
            raise StoreUnavailableError(f"'dirs' must be a table in {self.path}")

        for directory, entries in cast(dict[str, object], dirs_raw).items():
            if not directory.startswith("/"):
                raise StoreUnavailableError(f"Directory must be absolute: {directory!r}")
            if not isinstance(entries, dict):
                raise StoreUnavailableError(f"Directory {directory} must be a table")
            self.add_dir(directory.rstrip("/") or "/")
            for name, raw in cast(dict[str, object], entries).items():
                value, schema_name = _parse_entry(directory, name, raw)
                self.set(join_path(directory, name), value, schema_name)

        logger.debug("Loaded %d directories from %s", len(self.directories), self.path)

    def suggest_sync(self) -> None:
        """Write pending unsets back to the dump file atomically.

        Raises:
            StoreError: If the file cannot be written.
        """
        if not self.dirty:
            logger.debug("Nothing to sync for %s", self.path)
            return

        tmp_path: Path | None = None
        try:
            with NamedTemporaryFile(
                mode="wb",
                dir=self.path.parent,
                delete=False,
                suffix=".tmp",
            ) as f:
                tmp_path = Path(f.name)
                tomli_w.dump(self.to_dict(), f)
            os.replace(str(tmp_path), str(self.path))
        except OSError as e:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise StoreError(f"Failed to write {self.path}: {e}") from e

        super().suggest_sync()
        logger.info("Synced changes to %s", self.path)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the current store contents to the dump layout."""
        dirs: dict[str, dict[str, Any]] = {path: {} for path in self.directories}
        for directory, key, value, schema_name in self.iter_raw_entries():
            name = key.rsplit("/", 1)[-1]
            if schema_name is None and value is not None:
                entry: Any = value
            else:
                entry = {"schema": schema_name} if schema_name else {}
                if value is not None:
                    entry["value"] = value
            dirs.setdefault(directory, {})[name] = entry

        result: dict[str, Any] = {}
        if self.schemas:
            result["schemas"] = self.schemas
        result["dirs"] = dirs
        return result

    def __repr__(self) -> str:
        return f"TomlFileStore(path={str(self.path)!r})"


def _parse_entry(directory: str, name: str, raw: object) -> tuple[Any, str | None]:
    """Split a dump entry into ``(value, schema_name)``.

    Raises:
        StoreUnavailableError: If a table carries anything besides value and schema.
    """
    if isinstance(raw, dict):
        table = cast(dict[str, object], raw)
        unexpected = sorted(set(table) - _ENTRY_TABLE_KEYS)
        if unexpected:
            msg = (
                f"Entry {name!r} in directory {directory} has unexpected keys "
                f"{unexpected}; nested directories need their own dirs table"
            )
            raise StoreUnavailableError(msg)
        schema = table.get("schema")
        return table.get("value"), str(schema) if schema is not None else None
    return raw, None
