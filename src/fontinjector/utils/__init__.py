"""Utility functions for fontinjector.

This module provides utility functions including:

- Logging setup and configuration
- Per-pass statistics tracking
"""

from fontinjector.utils.logging import (
    PassLogger,
    PassStats,
    configure_logging,
)

__all__ = [
    "PassLogger",
    "PassStats",
    "configure_logging",
]
