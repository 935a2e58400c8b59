"""Host adapters for fontinjector.

The engine depends on three collaborators owned by the host environment:
storage, notifications and settings persistence. This module defines their
contracts and local implementations used by the CLI.

Key classes:
- Storage / LocalStorage: Vault file access
- Notifier / ConsoleNotifier: User-visible messages
- SettingsStore / JsonSettingsStore: Presentation settings persistence
"""

from fontinjector.host.notifier import ConsoleNotifier, Notifier
from fontinjector.host.settings_store import JsonSettingsStore, SettingsStore
from fontinjector.host.storage import LocalStorage, Storage

__all__ = [
    "ConsoleNotifier",
    "JsonSettingsStore",
    "LocalStorage",
    "Notifier",
    "SettingsStore",
    "Storage",
]
