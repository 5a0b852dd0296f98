"""CLI application entry point for plotfence.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from plotfence import __version__
from plotfence.cli.output import (
    SYM_DOT,
    console,
    create_progress,
    print_error,
    print_grid_info,
    print_header,
    print_prices_plain,
    print_quote,
    print_region_table,
    print_step,
)
from plotfence.config import (
    LoggingConfig,
    PlotfenceSettings,
    PricingConfig,
    PricingMethod,
    SegmentationConfig,
    TraversalOrder,
)
from plotfence.core import GardenProcessor, PricingResult
from plotfence.exceptions import GridLoadError, MalformedGridError, PlotfenceError

# Create the Typer app
app = typer.Typer(
    name="plotfence",
    help="Price the fencing of garden plots by perimeter and by straight sides.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Plotfence[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def price(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Path to grid text file (one row per line)",
            show_default=False,
        ),
    ],
    method: Annotated[
        str,
        typer.Option(
            "--method",
            "-m",
            help="Which price to report (both|perimeter|sides)",
        ),
    ] = "both",
    traversal: Annotated[
        str,
        typer.Option(
            "--traversal",
            "-t",
            help="Region flood fill order (breadth_first|depth_first)",
        ),
    ] = "breadth_first",
    list_regions: Annotated[
        bool,
        typer.Option(
            "--list-regions",
            help="List every region with its measurements",
        ),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the quote as JSON",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Print only the price values",
        ),
    ] = False,
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
    """Price the fence around every garden plot in a grid.

    A plot is a maximal group of cells with the same label connected up, down,
    left or right. Each plot costs its area times its perimeter, or its area
    times its number of straight sides.

    Example:
        plotfence garden.txt
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate input file exists
    if not input_file.exists():
        print_error(
            f"Input file not found: {input_file}",
            details=f"The file '{input_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_file.is_file():
        print_error(
            f"Input path is not a file: {input_file}",
            details="Please provide a path to a grid text file.",
        )
        raise typer.Exit(code=1)

    # Validate enum arguments
    try:
        method_pref = PricingMethod(method.lower())
    except ValueError:
        print_error(
            f"Invalid method: {method}",
            details="Valid values: both, perimeter, sides",
        )
        raise typer.Exit(code=1)

    try:
        traversal_order = TraversalOrder(traversal.lower())
    except ValueError:
        print_error(
            f"Invalid traversal: {traversal}",
            details="Valid values: breadth_first, depth_first",
        )
        raise typer.Exit(code=1)

    # Create settings from CLI arguments
    try:
        settings = PlotfenceSettings(
            segmentation=SegmentationConfig(traversal=traversal_order),
            pricing=PricingConfig(method=method_pref),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level,
                quiet=quiet,
            ),
        )
    except ValidationError as e:
        print_error("Invalid options", details=str(e.errors()[0]["msg"]))
        raise typer.Exit(code=1)

    chatty = not quiet and not as_json

    if chatty:
        print_header(__version__)
        print_step("Pricing grid")

    try:
        processor = GardenProcessor(settings)
        if chatty:
            with create_progress() as progress:
                task_id = progress.add_task("Measuring regions", total=None)

                def update_progress(completed: int, total: int) -> None:
                    progress.update(task_id, completed=completed, total=total)

                result = processor.process_file(input_file, progress_callback=update_progress)
        else:
            result = processor.process_file(input_file)

        _report(result, settings.pricing, str(input_file), chatty, list_regions, as_json, verbose)

    except GridLoadError as e:
        print_error(f"Could not load grid: {e.reason}")
        raise typer.Exit(code=1)
    except MalformedGridError as e:
        print_error(f"Malformed grid: {e}")
        raise typer.Exit(code=1)
    except PlotfenceError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _report(
    result: PricingResult,
    pricing: PricingConfig,
    grid_path: str,
    chatty: bool,
    list_regions: bool,
    as_json: bool,
    verbose: bool,
) -> None:
    """Print the outcome of a run in the requested form.

    Args:
        result: Pricing result
        pricing: Which prices were requested
        grid_path: Input path for display
        chatty: Print headers and summaries
        list_regions: Print the region table
        as_json: Print JSON instead of text
        verbose: Print run statistics
    """
    quote = result.quote

    if as_json:
        data = quote.to_dict()
        if not pricing.wants_perimeter:
            del data["price_by_perimeter"]
        if not pricing.wants_sides:
            del data["price_by_sides"]
        if not list_regions:
            del data["regions"]
        console.print_json(data=data)
        return

    if not chatty:
        print_prices_plain(quote, pricing.wants_perimeter, pricing.wants_sides)
        return

    print_grid_info(
        grid_path=grid_path,
        rows=result.stats.rows,
        cols=result.stats.cols,
        label_count=result.stats.label_count,
    )

    if list_regions:
        print_step("Regions")
        print_region_table(quote)

    print_quote(
        quote,
        total_time_s=result.stats.duration_seconds,
        show_perimeter=pricing.wants_perimeter,
        show_sides=pricing.wants_sides,
    )

    if verbose:
        stats = result.stats
        console.print(
            f"  {stats.cell_count} cells {SYM_DOT} {stats.label_count} labels "
            f"{SYM_DOT} {stats.region_count} regions"
        )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
