"""Settings persistence collaborator.

Presentation settings are persisted as a JSON object, the same shape the host
application stores plugin data in. Loading merges stored values over the
defaults.
"""

import json
from typing import Protocol, runtime_checkable

import structlog
from pydantic import ValidationError

from fontinjector.config import PresentationConfig
from fontinjector.exceptions import CacheWriteError, ConfigError
from fontinjector.host.storage import Storage

logger = structlog.get_logger("fontinjector.settings")


@runtime_checkable
class SettingsStore(Protocol):
    """Key-value persistence for PresentationConfig."""

    def load(self) -> PresentationConfig: ...

    def save(self, config: PresentationConfig) -> None: ...


class JsonSettingsStore:
    """Persist PresentationConfig as JSON through a Storage.

    Example:
        store = JsonSettingsStore(storage, ".obsidian/plugins/custom-font/data.json")
        config = store.load()
    """

    def __init__(self, storage: Storage, path: str) -> None:
        self._storage = storage
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    def load(self) -> PresentationConfig:
        """Load settings merged over the defaults.

        A missing file yields the defaults.

        Raises:
            ConfigError: If the file cannot be read or decoded, or the stored
                data is not a valid settings object
        """
        if not self._storage.exists(self._path):
            return PresentationConfig()

        try:
            raw = self._storage.read(self._path)
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Settings file '{self._path}' could not be read: {e}") from e

        if not raw.strip():
            return PresentationConfig()

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Settings file '{self._path}' is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Settings file '{self._path}' must contain a JSON object")

        try:
            config = PresentationConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid settings in '{self._path}': {e}") from e

        logger.debug("Settings loaded", path=self._path, font=config.font)
        return config

    def save(self, config: PresentationConfig) -> None:
        """Write settings, creating the parent directory if needed.

        Raises:
            CacheWriteError: If the file cannot be written
        """
        parent = self._path.rpartition("/")[0]
        try:
            if parent:
                self._storage.mkdir(parent)
            self._storage.write(self._path, config.model_dump_json(indent=2))
        except OSError as e:
            raise CacheWriteError(self._path, str(e)) from e
        logger.debug("Settings saved", path=self._path, font=config.font)
