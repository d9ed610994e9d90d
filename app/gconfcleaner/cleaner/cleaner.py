"""Cleaner session over a configuration store.

Discovers every directory below ``/`` (skipping blacklisted subtrees),
then walks them one at a time and reports the entries that carry a value
but no resolvable schema. The Cleaner only discovers and classifies;
deciding what to remove is up to the caller.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from types import TracebackType

from gconfcleaner.cleaner.blacklist import is_blacklisted
from gconfcleaner.cleaner.cursor import DirectoryCursor
from gconfcleaner.cleaner.errors import (
    CleanerClosedError,
    CleanerNotInitializedError,
    EntryFetchError,
    ScanError,
)
from gconfcleaner.cleaner.models import CleanerActionResult, ScanStats, UnknownPair
from gconfcleaner.store.base import ConfigStore, StoreEntry, StoreError

logger = logging.getLogger(__name__)

ROOT_DIR = "/"
SYNC_TARGET = "sync"


class Cleaner:
    """Stateful scan and classification session.

    The Cleaner owns the store handed to it and closes it in ``close()``.
    Call ``update()`` once before using the cursor, then call
    ``next_directory_entries()`` until ``remaining_dirs`` is zero.

    Not thread safe; callers sharing a Cleaner must serialize access.

    Example:
        >>> with Cleaner(store) as cleaner:
        ...     cleaner.update()
        ...     while cleaner.remaining_dirs:
        ...         for pair in cleaner.next_directory_entries():
        ...             print(pair.key, pair.value)
    """

    def __init__(self, store: ConfigStore) -> None:
        """Initialize the Cleaner.

        Args:
            store: Configuration store to audit. Ownership passes to the Cleaner.
        """
        self._store: ConfigStore | None = store
        self._cursor = DirectoryCursor()
        self._initialized = False
        self._n_dirs = 0
        self._n_pairs = 0
        self._n_unknown_pairs = 0

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    @property
    def store(self) -> ConfigStore:
        """The store this Cleaner audits.

        Raises:
            CleanerClosedError: If the Cleaner has been closed.
        """
        if self._store is None:
            msg = "Cleaner is closed"
            raise CleanerClosedError(msg)
        return self._store

    @property
    def closed(self) -> bool:
        """True once ``close()`` has been called."""
        return self._store is None

    def close(self) -> None:
        """Release the store and the scanned directory list.

        Raises:
            CleanerClosedError: If the Cleaner was already closed.
        """
        store = self.store
        self._store = None
        self._cursor = DirectoryCursor()
        self._initialized = False
        store.close()

    def __enter__(self) -> "Cleaner":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self.closed:
            self.close()

    @property
    def is_initialized(self) -> bool:
        """True only after a successful ``update()``."""
        return self._initialized

    # -------------------------------------------------------------------------
    # Counters
    # -------------------------------------------------------------------------

    @property
    def n_dirs(self) -> int:
        """Directories found by the last scan."""
        return self._n_dirs

    @property
    def n_pairs(self) -> int:
        """Entries examined since the last scan."""
        return self._n_pairs

    @property
    def n_unknown_pairs(self) -> int:
        """Unknown entries found since the last scan."""
        return self._n_unknown_pairs

    @property
    def stats(self) -> ScanStats:
        """Snapshot of all counters."""
        return ScanStats(
            n_dirs=self._n_dirs,
            n_pairs=self._n_pairs,
            n_unknown_pairs=self._n_unknown_pairs,
        )

    # -------------------------------------------------------------------------
    # Scanning
    # -------------------------------------------------------------------------

    def update(self) -> None:
        """Rescan the whole store from ``/`` and reset cursor and counters.

        On failure the directory list is left empty and the Cleaner is
        not initialized; the directory counter keeps whatever was counted
        before the failing listing.

        Raises:
            ScanError: If any directory listing fails.
            CleanerClosedError: If the Cleaner has been closed.
        """
        store = self.store
        self._n_dirs = self._n_pairs = self._n_unknown_pairs = 0
        self._cursor = DirectoryCursor()
        self._initialized = False

        dirs = self._all_dirs_recursively(store, ROOT_DIR)

        self._cursor = DirectoryCursor(dirs or [])
        self._initialized = True
        logger.info("Scanned %d directories", self._n_dirs)

    def _all_dirs_recursively(self, store: ConfigStore, path: str) -> list[str] | None:
        """Collect the directories below ``path`` in pre-order.

        ``path`` itself is not part of the result; the caller counts and
        records it.

        Args:
            store: Store to query.
            path: Directory to descend into.

        Returns:
            Descendant directory paths, or None when ``path`` is blacklisted.

        Raises:
            ScanError: If listing ``path`` or any descendant fails.
        """
        if is_blacklisted(path):
            logger.debug("Skipping blacklisted subtree %s", path)
            return None

        try:
            subdirs = store.list_child_dirs(path)
        except StoreError as e:
            raise ScanError(path, str(e)) from e

        result: list[str] = []
        for subdir in subdirs:
            descendants = self._all_dirs_recursively(store, subdir)
            if descendants is None:
                continue
            self._n_dirs += 1
            result.append(subdir)
            result.extend(descendants)

        return result

    @property
    def dirs(self) -> tuple[str, ...]:
        """Directories found by the last successful scan."""
        return self._cursor.dirs

    # -------------------------------------------------------------------------
    # Cursor
    # -------------------------------------------------------------------------

    def _require_cursor(self) -> DirectoryCursor:
        if self.closed:
            msg = "Cleaner is closed"
            raise CleanerClosedError(msg)
        if not self._initialized:
            msg = "Cleaner has not been scanned yet; call update() first"
            raise CleanerNotInitializedError(msg)
        return self._cursor

    @property
    def current_dir(self) -> str:
        """The directory the next ``next_directory_entries()`` call reads.

        Raises:
            CleanerNotInitializedError: If no scan has succeeded.
            CursorExhaustedError: If every directory has been visited.
        """
        return self._require_cursor().current

    @property
    def remaining_dirs(self) -> int:
        """Number of directories not yet visited."""
        return self._require_cursor().remaining

    def next_directory_entries(self) -> list[UnknownPair]:
        """Advance to the next directory and return its unknown pairs.

        The cursor moves past the directory before its entries are read,
        so a failed read is not retried by the next call.

        Returns:
            Unknown pairs in store order; the caller owns the list.

        Raises:
            CleanerNotInitializedError: If no scan has succeeded.
            CursorExhaustedError: If every directory has been visited.
            EntryFetchError: If the entries of the directory cannot be read.
        """
        path = self._require_cursor().advance()
        store = self.store

        try:
            entries = store.list_entries(path)
        except StoreError as e:
            raise EntryFetchError(path, str(e)) from e

        unknown: list[UnknownPair] = []
        for entry in entries:
            self._n_pairs += 1
            if self._has_schema(store, entry):
                continue
            if not entry.has_value:
                logger.warning("No value for a key `%s'", entry.key)
                continue
            self._n_unknown_pairs += 1
            unknown.append(UnknownPair(key=entry.key, value=entry.value))

        return unknown

    def _has_schema(self, store: ConfigStore, entry: StoreEntry) -> bool:
        """Check whether the schema named by ``entry`` resolves.

        A failed lookup counts as no schema.
        """
        if not entry.schema_name:
            return False
        try:
            return store.resolve_schema(entry.schema_name)
        except StoreError as e:
            logger.debug("Schema lookup for %s failed: %s", entry.key, e)
            return False

    def iter_unknown_pairs(
        self,
        on_error: Callable[[EntryFetchError], None] | None = None,
    ) -> Iterator[tuple[str, list[UnknownPair]]]:
        """Walk the remaining directories and yield their unknown pairs.

        Directories without unknown pairs are skipped.

        Args:
            on_error: Called with each EntryFetchError; the walk then goes on.
                When None the error propagates and ends the walk.

        Yields:
            ``(directory, pairs)`` tuples.
        """
        cursor = self._require_cursor()
        while not cursor.exhausted:
            path = cursor.current
            try:
                pairs = self.next_directory_entries()
            except EntryFetchError as e:
                if on_error is None:
                    raise
                on_error(e)
                continue
            if pairs:
                yield path, pairs

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def unset_key(self, key: str) -> CleanerActionResult:
        """Ask the store to remove ``key``.

        Args:
            key: Full key path.

        Returns:
            CleanerActionResult; store failures are reported, not raised.

        Raises:
            ValueError: If ``key`` is empty.
        """
        if not key:
            msg = "Key cannot be empty"
            raise ValueError(msg)
        store = self.store

        try:
            store.unset(key)
        except StoreError as e:
            logger.warning("Failed to unset %s: %s", key, e)
            return CleanerActionResult(target=key, success=False, error=str(e))

        logger.info("Unset %s", key)
        return CleanerActionResult(target=key, success=True)

    def unset_keys(
        self,
        keys: Iterable[str],
        *,
        dry_run: bool = False,
    ) -> list[CleanerActionResult]:
        """Unset several keys, reporting one result per key.

        Args:
            keys: Full key paths.
            dry_run: If True, report what would be unset without touching the store.

        Returns:
            One CleanerActionResult per key, in order.
        """
        results: list[CleanerActionResult] = []
        for key in keys:
            if dry_run:
                logger.info("Dry-run: would unset %s", key)
                results.append(CleanerActionResult(target=key, success=True, dry_run=True))
                continue
            results.append(self.unset_key(key))
        return results

    def sync(self) -> CleanerActionResult:
        """Ask the store to persist pending changes.

        Returns:
            CleanerActionResult; store failures are reported, not raised.
        """
        store = self.store
        try:
            store.suggest_sync()
        except StoreError as e:
            logger.warning("Sync failed: %s", e)
            return CleanerActionResult(target=SYNC_TARGET, success=False, error=str(e))
        return CleanerActionResult(target=SYNC_TARGET, success=True)

    def __repr__(self) -> str:
        state = "closed" if self.closed else ("ready" if self._initialized else "uninitialized")
        return f"Cleaner(state={state}, dirs={self._n_dirs}, cursor={self._cursor!r})"
