"""Command-line interface for fontinjector.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Standalone conversion of font files to a base64 CSS stylesheet
- Font selection and re-application for a vault
- Font metadata inspection
- Detailed error reporting
"""

from fontinjector.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
