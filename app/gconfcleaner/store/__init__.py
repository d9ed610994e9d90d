"""Configuration store adapters.

This module provides the ConfigStore interface the Cleaner depends on and
the concrete stores: the live GConf engine (through ``gconftool-2``), an
in-memory store, and a TOML dump file store.
"""

from gconfcleaner.store.base import ConfigStore, StoreEntry, StoreError, StoreUnavailableError
from gconfcleaner.store.factory import open_store
from gconfcleaner.store.gconftool import GConfToolStore
from gconfcleaner.store.memory import MemoryStore, build_store
from gconfcleaner.store.toml_file import TomlFileStore

__all__ = [
    "ConfigStore",
    "GConfToolStore",
    "MemoryStore",
    "StoreEntry",
    "StoreError",
    "StoreUnavailableError",
    "TomlFileStore",
    "build_store",
    "open_store",
]
