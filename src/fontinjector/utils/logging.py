"""Logging utilities for Fontinjector."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class PassStats:
    """Statistics from one conversion pass."""

    generation: int = 0
    converted_count: int = 0
    cache_hits: int = 0
    skipped_count: int = 0
    error_count: int = 0
    superseded: bool = False
    families: list[str] = field(default_factory=list)
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate pass duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def fonts_applied(self) -> int:
        """Number of fonts whose fragments were installed."""
        return len(self.families)


_installed_handlers: list[logging.Handler] = []


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Replace handlers from an earlier call in the same process
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("fontinjector")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class PassLogger:
    """Logger for tracking one conversion pass and its statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger, generation: int) -> None:
        self._logger = logger.bind(generation=generation)
        self._stats = PassStats(generation=generation, start_time=time.time())
        self._current_font: str | None = None

    def log_font_start(self, file_name: str) -> None:
        """Log start of font processing."""
        self._current_font = file_name
        self._logger.debug("Processing font", font=file_name)

    def log_font_converted(self, file_name: str, family: str, size_bytes: int) -> None:
        """Log a font that had to be encoded."""
        self._logger.info("Font converted", font=file_name, family=family, bytes=size_bytes)
        self._stats.converted_count += 1

    def log_cache_hit(self, file_name: str, cache_path: str) -> None:
        """Log a fragment served from the cache."""
        self._logger.info("Fragment loaded from cache", font=file_name, path=cache_path)
        self._stats.cache_hits += 1

    def log_font_applied(self, family: str) -> None:
        self._current_font = None
        self._stats.families.append(family)

    def log_font_skipped(self, file_name: str, reason: str) -> None:
        """Log a directory entry that was not processed."""
        self._logger.debug("Font skipped", font=file_name, reason=reason)
        self._stats.skipped_count += 1

    def log_error(self, error: Exception, file_name: str | None = None) -> None:
        """Log a failure that aborted the pass."""
        self._logger.error(
            "Conversion pass failed",
            font=file_name,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((file_name or "", str(error)))

    def log_superseded(self, current_generation: int) -> None:
        """Log that a newer pass took over the slots."""
        self._logger.info("Pass superseded", current_generation=current_generation)
        self._stats.superseded = True

    def finish(self) -> PassStats:
        """Stamp the end time and return the statistics."""
        self._stats.end_time = time.time()
        self._logger.debug(
            "Pass finished",
            fonts=self._stats.fonts_applied,
            converted=self._stats.converted_count,
            cache_hits=self._stats.cache_hits,
            errors=self._stats.error_count,
        )
        return self._stats

    @property
    def current_font(self) -> str | None:
        """Font being processed, None between fonts."""
        return self._current_font

    @property
    def stats(self) -> PassStats:
        """Get current pass statistics."""
        return self._stats
