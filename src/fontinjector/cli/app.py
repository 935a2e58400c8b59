"""CLI application entry point for fontinjector.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from fontinjector import __version__
from fontinjector.cli.output import (
    console,
    print_conversion_summary,
    print_error,
    print_font_info,
    print_font_table,
    print_header,
    print_pass_summary,
    print_step,
)
from fontinjector.config import (
    FONT_NONE,
    InjectorSettings,
    LoggingConfig,
    PathsConfig,
    StyleTemplate,
)
from fontinjector.core import FontInjectionEngine, convert_files, default_output_name
from fontinjector.exceptions import (
    FontInjectorError,
    FontReadError,
    NoValidFontsError,
    UnsupportedFontError,
)
from fontinjector.host import ConsoleNotifier, JsonSettingsStore, LocalStorage
from fontinjector.io import FontReader
from fontinjector.utils import PassStats, configure_logging

# Create the Typer app
app = typer.Typer(
    name="fontinjector",
    help="Embed local font files as base64 CSS and apply them to a vault.",
    add_completion=False,
    no_args_is_help=True,
)

VaultOption = Annotated[
    Path,
    typer.Option(
        "--vault",
        "-d",
        help="Vault root directory",
        file_okay=False,
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Minimal console output",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Fontinjector[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Embed local font files as base64 CSS and apply them to a vault."""


def _build_settings(log_file: Path | None, log_level: str, quiet: bool) -> InjectorSettings:
    return InjectorSettings(
        paths=PathsConfig(),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )


def _build_engine(vault: Path, settings: InjectorSettings) -> FontInjectionEngine:
    """Wire the engine to a vault on the local filesystem.

    Args:
        vault: Vault root directory
        settings: Application settings

    Returns:
        Engine with settings loaded from the vault
    """
    if not vault.is_dir():
        print_error(
            f"Vault not found: {vault}",
            details="Pass the vault root directory with --vault.",
        )
        raise typer.Exit(code=1)

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )
    storage = LocalStorage(vault)
    engine = FontInjectionEngine(
        storage=storage,
        notifier=ConsoleNotifier(console),
        settings_store=JsonSettingsStore(storage, settings.paths.settings_file),
        paths=settings.paths,
        logger=logger,
    )
    try:
        engine.config = engine.settings_store.load()
    except FontInjectorError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    return engine


def _finish_pass(engine: FontInjectionEngine, stats: PassStats, quiet: bool) -> None:
    if stats.error_count:
        raise typer.Exit(code=1)
    if not quiet:
        print_pass_summary(stats, engine.paths.stylesheet_file, engine.config.font)


@app.command()
def convert(
    font_files: Annotated[
        list[Path],
        typer.Argument(
            help="Font files to convert (.woff, .ttf, .woff2, .otf)",
            show_default=False,
        ),
    ],
    template: Annotated[
        StyleTemplate,
        typer.Option(
            "--template",
            "-t",
            help="Styling template appended after the @font-face rules",
            case_sensitive=False,
        ),
    ] = StyleTemplate.ROOT,
    selector: Annotated[
        str | None,
        typer.Option(
            "--selector",
            "-s",
            help="CSS selector for the custom template (e.g. .my-note)",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-font.css or custom-fonts.css)",
        ),
    ] = None,
    stdout: Annotated[
        bool,
        typer.Option(
            "--stdout",
            help="Print the CSS instead of writing a file",
        ),
    ] = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Convert font files into a standalone base64 CSS stylesheet.

    Example:
        fontinjector convert Vazirmatn.woff2 --template force
    """
    settings = _build_settings(log_file, log_level, quiet)
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )

    missing = [p for p in font_files if not p.is_file()]
    if missing:
        print_error(
            f"Input file not found: {missing[0]}",
            details=f"The file '{missing[0]}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    try:
        result = convert_files(font_files, template=template, selector=selector)
    except NoValidFontsError as e:
        print_error(str(e), details=f"Got: {', '.join(e.names)}")
        raise typer.Exit(code=1)
    except FontReadError as e:
        print_error(f"Could not read font: {e.reason}")
        raise typer.Exit(code=1)
    except FontInjectorError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if stdout:
        typer.echo(result.css, nl=False)
        return

    output_path = output or Path(default_output_name(font_files))
    try:
        output_path.write_text(result.css, encoding="utf-8")
    except OSError as e:
        print_error(f"Could not write stylesheet: {e}")
        raise typer.Exit(code=1)

    if not quiet:
        print_conversion_summary(result, str(output_path))


@app.command("list")
def list_fonts(
    vault: VaultOption = Path("."),
) -> None:
    """List the fonts in the vault's font directory."""
    settings = _build_settings(None, "WARNING", quiet=True)
    engine = _build_engine(vault, settings)

    try:
        names = engine.discover_fonts()
    except FontInjectorError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    storage = engine.storage
    sizes: dict[str, int] = {}
    if isinstance(storage, LocalStorage):
        for name in names:
            sizes[name] = storage.full_path(f"{engine.paths.fonts_dir}/{name}").stat().st_size

    print_font_table(names, engine.config.font, sizes)


@app.command()
def select(
    font: Annotated[
        str,
        typer.Argument(
            help="Font file name in the font directory, 'all' or 'none'",
            show_default=False,
        ),
    ],
    vault: VaultOption = Path("."),
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Select the font to apply and regenerate the stylesheet.

    Example:
        fontinjector select Vazirmatn.woff2 --vault ~/Notes
    """
    settings = _build_settings(log_file, log_level, quiet)
    engine = _build_engine(vault, settings)

    if not quiet:
        print_header(__version__)
        print_step(f"Selecting {font}")

    stats = engine.select_font(font)
    _finish_pass(engine, stats, quiet)


@app.command()
def apply(
    vault: VaultOption = Path("."),
    force: Annotated[
        bool | None,
        typer.Option(
            "--force/--no-force",
            help="Force the font onto every element with !important",
        ),
    ] = None,
    custom_css: Annotated[
        str | None,
        typer.Option(
            "--custom-css",
            help="Custom CSS installed instead of the theme variables",
        ),
    ] = None,
    custom_css_file: Annotated[
        Path | None,
        typer.Option(
            "--custom-css-file",
            help="Read custom CSS from a file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    no_custom: Annotated[
        bool,
        typer.Option(
            "--no-custom",
            help="Switch back from custom CSS to the theme variables",
        ),
    ] = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Re-apply the saved selection, optionally changing the styling mode.

    Without options this behaves like activating the plugin: the saved
    selection is loaded and applied, reusing cached fragments.
    """
    if no_custom and (custom_css is not None or custom_css_file is not None):
        print_error("Cannot combine --no-custom with --custom-css or --custom-css-file")
        raise typer.Exit(code=1)

    settings = _build_settings(log_file, log_level, quiet)
    engine = _build_engine(vault, settings)

    changes: dict[str, object] = {}
    if force is not None:
        changes["force_mode"] = force
    if custom_css_file is not None:
        custom_css = custom_css_file.read_text(encoding="utf-8")
    if custom_css is not None:
        changes["custom_css_enabled"] = True
        changes["custom_css"] = custom_css
    if no_custom:
        changes["custom_css_enabled"] = False

    if not quiet:
        print_header(__version__)
        print_step(f"Applying {engine.config.font}")

    try:
        stats = engine.update_config(**changes) if changes else engine.activate()
    except FontInjectorError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    _finish_pass(engine, stats, quiet)


@app.command()
def clear(
    vault: VaultOption = Path("."),
    quiet: QuietOption = False,
) -> None:
    """Remove the applied font (select 'none')."""
    settings = _build_settings(None, "WARNING", quiet)
    engine = _build_engine(vault, settings)
    stats = engine.select_font(FONT_NONE)
    _finish_pass(engine, stats, quiet)


@app.command()
def inspect(
    font_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a font file",
            show_default=False,
        ),
    ],
) -> None:
    """Show a font's format, family name and glyph count."""
    try:
        with FontReader(font_file) as reader:
            info = reader.info()
    except FileNotFoundError:
        print_error(
            f"Input file not found: {font_file}",
            details=f"The file '{font_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)
    except UnsupportedFontError as e:
        print_error(f"Could not read font: {e.details}")
        raise typer.Exit(code=1)

    print_font_info(info)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
