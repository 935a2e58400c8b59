"""Configuration management for fontinjector.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- PresentationConfig: Persisted font selection and styling mode
- PathsConfig: Vault-relative font, cache and stylesheet locations
- LoggingConfig: Logging settings
- InjectorSettings: Main application settings
"""

from fontinjector.config.settings import (
    FONT_ALL,
    FONT_NONE,
    InjectorSettings,
    LoggingConfig,
    PathsConfig,
    PresentationConfig,
    StyleTemplate,
    get_default_settings,
)

__all__ = [
    "FONT_ALL",
    "FONT_NONE",
    "InjectorSettings",
    "LoggingConfig",
    "PathsConfig",
    "PresentationConfig",
    "StyleTemplate",
    "get_default_settings",
]
