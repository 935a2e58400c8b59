"""Configuration settings for Fontinjector."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# Sentinel values stored in PresentationConfig.font
FONT_NONE = "None"
FONT_ALL = "All"


class StyleTemplate(str, Enum):
    """Styling template emitted by the standalone converter."""

    ROOT = "root"
    CUSTOM = "custom"
    FORCE = "force"


class PresentationConfig(BaseModel):
    """User-chosen presentation settings.

    Stored values are merged over the defaults; keys this version does not
    know about are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    font: str = Field(
        default=FONT_NONE,
        description="Selected font file name, 'None' or 'All'",
    )
    force_mode: bool = Field(
        default=False,
        description="Force the family onto every element with !important",
    )
    custom_css_enabled: bool = Field(
        default=False,
        description="Use custom_css instead of the theme variable rule",
    )
    custom_css: str = Field(
        default="",
        description="Free-text CSS installed verbatim in custom mode",
    )


class PathsConfig(BaseModel):
    """Vault-relative locations used by the engine."""

    fonts_dir: str = Field(
        default=".obsidian/fonts",
        description="Directory scanned for font files",
    )
    cache_dir: str = Field(
        default=".obsidian/plugins/custom-font",
        description="Directory holding cached @font-face fragments",
    )
    settings_file: str = Field(
        default=".obsidian/plugins/custom-font/data.json",
        description="JSON file persisting the presentation settings",
    )
    stylesheet_file: str = Field(
        default=".obsidian/snippets/custom-font.css",
        description="Generated stylesheet the style slots are rendered into",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class InjectorSettings(BaseModel):
    """Main application settings."""

    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> InjectorSettings:
    """Get default application settings."""
    return InjectorSettings()
