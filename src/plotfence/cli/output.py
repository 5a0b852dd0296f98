"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from plotfence.core import FencingQuote

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for region measurement.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Plotfence[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_grid_info(grid_path: str, rows: int, cols: int, label_count: int) -> None:
    """Print grid information.

    Args:
        grid_path: Path to the grid file
        rows: Number of rows
        cols: Number of columns
        label_count: Number of distinct labels
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(grid_path)
    console.print(line)
    console.print(f"  {rows}x{cols} cells {SYM_DOT} {label_count} labels")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_quote(
    quote: FencingQuote,
    total_time_s: float,
    show_perimeter: bool = True,
    show_sides: bool = True,
) -> None:
    """Print the fence prices with a short summary.

    Args:
        quote: Computed prices
        total_time_s: Total processing time in seconds
        show_perimeter: Whether to print the perimeter price
        show_sides: Whether to print the sides price
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Priced[/bold green] in {time_str}")
    console.print(f"  {len(quote.regions)} regions {SYM_DOT} {quote.total_area} cells")

    if show_perimeter:
        console.print(f"  Price by perimeter    [bold]{quote.price_by_perimeter}[/bold]")
    if show_sides:
        console.print(f"  Price by sides        [bold]{quote.price_by_sides}[/bold]")


def print_prices_plain(
    quote: FencingQuote,
    show_perimeter: bool = True,
    show_sides: bool = True,
) -> None:
    """Print bare prices, one integer per line."""
    if show_perimeter:
        console.print(str(quote.price_by_perimeter), highlight=False)
    if show_sides:
        console.print(str(quote.price_by_sides), highlight=False)


def print_region_table(quote: FencingQuote) -> None:
    """Print a table of per-region measurements.

    Args:
        quote: Computed prices with region metrics
    """
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Label")
    table.add_column("Anchor", justify="right")
    table.add_column("Area", justify="right")
    table.add_column("Perimeter", justify="right")
    table.add_column("Sides", justify="right")

    for metrics in quote.regions:
        table.add_row(
            metrics.label,
            f"{metrics.anchor.row},{metrics.anchor.col}",
            str(metrics.area),
            str(metrics.perimeter),
            str(metrics.sides),
        )

    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
