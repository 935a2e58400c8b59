"""Exception hierarchy for Fontinjector."""


class FontInjectorError(Exception):
    """Base exception for all Fontinjector errors."""

    pass


class FontError(FontInjectorError):
    """Errors related to locating or reading font files."""

    pass


class FontNotFoundError(FontError):
    """Font file missing from the configured font directory."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Font file not found: '{path}'")


class FontReadError(FontError):
    """Error reading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read font '{path}': {reason}")


class UnsupportedFontError(FontError):
    """Font file could not be parsed for inspection."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid font format '{path}': {details}")


class NoValidFontsError(FontError):
    """None of the given files has a supported font extension."""

    def __init__(self, names: list[str], message: str | None = None) -> None:
        self.names = names
        super().__init__(
            message or "Please select valid font files (.woff, .ttf, .woff2, .otf)"
        )


class StorageError(FontInjectorError):
    """Errors raised by the storage layer."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Storage operation failed for '{path}': {reason}")


class CacheWriteError(StorageError):
    """Error writing a cached fragment or the generated stylesheet."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        FontInjectorError.__init__(self, f"Failed to write '{path}': {reason}")


class ConfigError(FontInjectorError):
    """Invalid presentation settings."""

    pass


class MissingCustomCSSError(ConfigError):
    """Custom mode is enabled but no CSS (or selector) was supplied."""

    def __init__(self, message: str = "Please enter custom CSS") -> None:
        super().__init__(message)
