"""Build the configured store."""

import logging

from gconfcleaner.core.settings import CleanerSettings
from gconfcleaner.store.base import ConfigStore, StoreUnavailableError
from gconfcleaner.store.gconftool import GConfToolStore
from gconfcleaner.store.toml_file import TomlFileStore

logger = logging.getLogger(__name__)


def open_store(settings: CleanerSettings) -> ConfigStore:
    """Open the store selected by ``settings``.

    Args:
        settings: Effective settings.

    Returns:
        A ready ConfigStore.

    Raises:
        StoreUnavailableError: If the store cannot be reached.
    """
    if settings.backend == "file":
        if settings.dump_path is None:
            msg = "No dump file configured for the file backend"
            raise StoreUnavailableError(msg)
        logger.debug("Opening dump file %s", settings.dump_path)
        return TomlFileStore(settings.dump_path.expanduser())

    logger.debug("Using %s", settings.gconftool_path)
    return GConfToolStore(settings.gconftool_path, timeout=settings.command_timeout)
