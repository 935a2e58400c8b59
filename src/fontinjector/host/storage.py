"""Storage collaborator for the engine.

The engine reads fonts and writes cached fragments through a small storage
contract modelled on the vault adapter of the host application. Paths are
vault-relative POSIX strings.

Key classes:
- Storage: Protocol the engine depends on
- LocalStorage: Implementation over a directory on the local filesystem
"""

from pathlib import Path, PurePosixPath
from typing import Protocol, runtime_checkable


@runtime_checkable
class Storage(Protocol):
    """File access contract provided by the host."""

    def exists(self, path: str) -> bool: ...

    def read(self, path: str) -> str: ...

    def read_binary(self, path: str) -> bytes: ...

    def write(self, path: str, data: str) -> None: ...

    def list_dir(self, directory: str) -> list[str]: ...

    def mkdir(self, path: str) -> None: ...

    def remove(self, path: str) -> None: ...


class LocalStorage:
    """Storage rooted at a vault directory on the local filesystem.

    Errors from the filesystem (``FileNotFoundError``, ``PermissionError``,
    other ``OSError``) propagate unchanged; callers translate them.

    Example:
        storage = LocalStorage(Path("~/Notes").expanduser())
        storage.list_dir(".obsidian/fonts")
    """

    def __init__(self, root: Path) -> None:
        """Initialize storage.

        Args:
            root: Vault root directory all paths are resolved against
        """
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def full_path(self, path: str) -> Path:
        """Resolve a vault-relative path to a filesystem path."""
        return self._root.joinpath(*PurePosixPath(path).parts)

    def exists(self, path: str) -> bool:
        return self.full_path(path).exists()

    def read(self, path: str) -> str:
        return self.full_path(path).read_text(encoding="utf-8")

    def read_binary(self, path: str) -> bytes:
        return self.full_path(path).read_bytes()

    def write(self, path: str, data: str) -> None:
        """Create or overwrite a text file (no atomic rename)."""
        self.full_path(path).write_text(data, encoding="utf-8")

    def list_dir(self, directory: str) -> list[str]:
        """List entry paths of a directory in filesystem order."""
        base = PurePosixPath(directory)
        return [str(base / entry.name) for entry in self.full_path(directory).iterdir()]

    def mkdir(self, path: str) -> None:
        self.full_path(path).mkdir(parents=True, exist_ok=True)

    def remove(self, path: str) -> None:
        self.full_path(path).unlink(missing_ok=True)
