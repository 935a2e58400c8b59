"""Shared fixtures: an in-memory storage and recording collaborators."""

import pytest

from fontinjector.config import PathsConfig, PresentationConfig
from fontinjector.core import FontInjectionEngine


class MemoryStorage:
    """In-memory Storage with optional failure injection.

    ``failures`` maps a method name to an exception raised when that method
    is called; ``calls`` records every call as (method, path).
    """

    def __init__(self, files: dict[str, bytes | str] | None = None) -> None:
        self.files: dict[str, bytes | str] = dict(files or {})
        self.dirs: set[str] = set()
        self.failures: dict[str, Exception] = {}
        self.calls: list[tuple[str, str]] = []
        self.hooks: dict[str, object] = {}

    def _record(self, method: str, path: str) -> None:
        self.calls.append((method, path))
        hook = self.hooks.get(method)
        if callable(hook):
            hook(path)
        if method in self.failures:
            raise self.failures[method]

    def exists(self, path: str) -> bool:
        self._record("exists", path)
        return path in self.files or path in self.dirs

    def read(self, path: str) -> str:
        self._record("read", path)
        if path not in self.files:
            raise FileNotFoundError(path)
        data = self.files[path]
        return data.decode("utf-8") if isinstance(data, bytes) else data

    def read_binary(self, path: str) -> bytes:
        self._record("read_binary", path)
        if path not in self.files:
            raise FileNotFoundError(path)
        data = self.files[path]
        return data.encode("utf-8") if isinstance(data, str) else data

    def write(self, path: str, data: str) -> None:
        self._record("write", path)
        self.files[path] = data

    def list_dir(self, directory: str) -> list[str]:
        self._record("list_dir", directory)
        prefix = directory.rstrip("/") + "/"
        entries = [p for p in self.files if p.startswith(prefix) and "/" not in p[len(prefix):]]
        if not entries and directory not in self.dirs:
            raise FileNotFoundError(directory)
        return entries

    def mkdir(self, path: str) -> None:
        self._record("mkdir", path)
        self.dirs.add(path)

    def remove(self, path: str) -> None:
        self._record("remove", path)
        self.files.pop(path, None)

    def count(self, method: str) -> int:
        return sum(1 for name, _ in self.calls if name == method)


class RecordingNotifier:
    """Notifier collecting messages."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


class MemorySettingsStore:
    """SettingsStore keeping the last saved config in memory."""

    def __init__(self, config: PresentationConfig | None = None) -> None:
        self.config = config or PresentationConfig()
        self.saved: list[PresentationConfig] = []

    def load(self) -> PresentationConfig:
        return self.config

    def save(self, config: PresentationConfig) -> None:
        self.config = config
        self.saved.append(config)


@pytest.fixture
def paths() -> PathsConfig:
    return PathsConfig()


@pytest.fixture
def storage(paths: PathsConfig) -> MemoryStorage:
    return MemoryStorage(
        {
            f"{paths.fonts_dir}/MyFont.woff2": bytes([0x00, 0x01, 0x02]),
        }
    )


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def settings_store() -> MemorySettingsStore:
    return MemorySettingsStore()


@pytest.fixture
def engine(
    storage: MemoryStorage,
    notifier: RecordingNotifier,
    settings_store: MemorySettingsStore,
    paths: PathsConfig,
) -> FontInjectionEngine:
    return FontInjectionEngine(
        storage=storage,
        notifier=notifier,
        settings_store=settings_store,
        paths=paths,
    )
