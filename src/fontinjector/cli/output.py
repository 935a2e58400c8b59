"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from fontinjector.core import ConversionResult
from fontinjector.domain import FontAsset
from fontinjector.io import FontInfo
from fontinjector.utils import PassStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Fontinjector[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def _format_size(size_bytes: int) -> str:
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_font_table(names: list[str], selected: str, sizes: dict[str, int] | None = None) -> None:
    """Print the fonts available in the font directory.

    Args:
        names: Font file names
        selected: Current selection setting value
        sizes: Optional file sizes by name
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column(" ")
    table.add_column("File")
    table.add_column("Family")
    table.add_column("Size", justify="right")

    for name in names:
        marker = SYM_OK if name == selected or selected.lower() == "all" else ""
        size = _format_size(sizes[name]) if sizes and name in sizes else ""
        table.add_row(f"[green]{marker}[/green]", name, FontAsset(name).family_name, size)

    console.print(table)
    console.print(f"\n  {len(names)} fonts {SYM_DOT} selected: [bold]{selected}[/bold]")


def print_pass_summary(stats: PassStats, stylesheet_path: str, selected: str) -> None:
    """Print the result of a conversion pass.

    Args:
        stats: Statistics of the pass
        stylesheet_path: Path of the generated stylesheet
        selected: Current selection setting value
    """
    if stats.fonts_applied == 0:
        console.print(f"\n[bold green]{SYM_OK} Cleared[/bold green] {SYM_DOT} font: {selected}")
    else:
        console.print(
            f"\n[bold green]{SYM_OK} Applied[/bold green] in {_format_time(stats.duration_seconds)}"
        )
        console.print(f"  {', '.join(stats.families)}")
        console.print(
            f"  {stats.converted_count} converted {SYM_DOT} {stats.cache_hits} from cache"
        )

    line = Text("  ")
    line.append(stylesheet_path, style="bold")
    console.print(line)


def print_conversion_summary(result: ConversionResult, output_path: str) -> None:
    """Print the result of a standalone conversion.

    Args:
        result: Converter output
        output_path: Path the stylesheet was written to
    """
    console.print(f"\n[bold green]{SYM_OK} Fonts converted successfully![/bold green]")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({_format_size(len(result.css.encode('utf-8')))})")
    console.print(line)

    console.print(f"  {len(result.fragments)} fonts {SYM_DOT} {', '.join(result.families)}")
    if result.skipped:
        console.print(f"  [yellow]skipped[/yellow] {', '.join(result.skipped)}")


def print_font_info(info: FontInfo) -> None:
    """Print font metadata.

    Args:
        info: Metadata read from the font
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(str(info.path))
    line1.append(f" ({info.format})")
    console.print(line1)
    console.print(f"  family: {info.family or 'unknown'} {SYM_DOT} css family: {info.css_family}")
    console.print(f"  {info.glyph_count:,} glyphs {SYM_DOT} {info.units_per_em:,} UPM")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
