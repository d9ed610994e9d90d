"""Configuration store that drives the ``gconftool-2`` command line tool.

Every query spawns one ``gconftool-2`` process. The daemon commits writes
when each client process exits, so there is nothing left to flush on sync.
"""

import logging
import subprocess

from gconfcleaner.store.base import (
    ConfigStore,
    StoreEntry,
    StoreError,
    StoreUnavailableError,
    join_path,
)
from gconfcleaner.utils.shell import CommandResult, command_exists, run_command

logger = logging.getLogger(__name__)

# gconftool-2 prints this in place of a value for keys that only carry a schema.
_NO_VALUE_MARKER = "(no value set)"
_NO_VALUE_PREFIX = "No value set for"
_NO_SCHEMA_PREFIX = "No schema known for"

DEFAULT_GCONFTOOL = "gconftool-2"


class GConfToolStore(ConfigStore):
    """ConfigStore backed by the default GConf engine via ``gconftool-2``.

    Attributes:
        executable: Name or path of the gconftool binary.
        timeout: Per-command timeout in seconds.
    """

    def __init__(self, executable: str = DEFAULT_GCONFTOOL, *, timeout: float = 30.0) -> None:
        """Initialize the store.

        Args:
            executable: gconftool binary to run.
            timeout: Maximum time in seconds for each command.

        Raises:
            StoreUnavailableError: If the executable is not on PATH.
        """
        if not command_exists(executable):
            raise StoreUnavailableError(f"{executable} not found; is GConf installed?")
        self.executable = executable
        self.timeout = timeout

    def _run(self, *args: str) -> CommandResult:
        """Run gconftool with ``args``, converting process failures to StoreError."""
        try:
            return run_command([self.executable, *args], timeout=self.timeout)
        except subprocess.TimeoutExpired as e:
            msg = f"{self.executable} {' '.join(args)} timed out after {self.timeout}s"
            raise StoreError(msg) from e
        except OSError as e:
            raise StoreError(f"Cannot run {self.executable}: {e}") from e

    def _run_checked(self, *args: str) -> CommandResult:
        result = self._run(*args)
        if not result.success:
            message = result.stderr.strip() or f"exit code {result.returncode}"
            raise StoreError(message)
        return result

    def list_child_dirs(self, path: str) -> list[str]:
        result = self._run_checked("--all-dirs", path)
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def list_entries(self, directory: str) -> list[StoreEntry]:
        result = self._run_checked("--all-entries", directory)
        entries: list[StoreEntry] = []

        for line in result.stdout.splitlines():
            if " = " not in line:
                continue
            name, raw_value = line.split(" = ", 1)
            key = join_path(directory, name.strip())
            value = None if raw_value == _NO_VALUE_MARKER else raw_value
            entries.append(
                StoreEntry(key=key, value=value, schema_name=self._get_schema_name(key))
            )

        return entries

    def _get_schema_name(self, key: str) -> str | None:
        """Look up the schema applied to ``key``; None when there is none."""
        result = self._run("--get-schema-name", key)
        if not result.success:
            if not result.stderr.strip().startswith(_NO_SCHEMA_PREFIX):
                logger.debug("Schema name lookup for %s failed: %s", key, result.stderr.strip())
            return None
        return result.stdout.strip() or None

    def resolve_schema(self, schema_name: str) -> bool:
        result = self._run("--get", schema_name)
        output = (result.stdout + result.stderr).strip()
        if output.startswith(_NO_VALUE_PREFIX):
            return False
        if not result.success:
            raise StoreError(result.stderr.strip() or f"exit code {result.returncode}")
        return bool(output)

    def unset(self, key: str) -> None:
        self._run_checked("--unset", key)
        logger.debug("Unset %s", key)

    def suggest_sync(self) -> None:
        logger.debug("%s commits on exit; sync is a no-op", self.executable)

    def __repr__(self) -> str:
        return f"GConfToolStore(executable={self.executable!r})"
