"""CLI application entry point for quadpath.

This module provides the main CLI interface using Typer.
"""

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from quadpath import __version__
from quadpath.cli.output import (
    console,
    print_error,
    print_header,
    print_settings,
    print_step,
    print_success,
)
from quadpath.config import (
    MAX_APPROXIMATION_ITERATIONS,
    ApproximationConfig,
    ArcEmissionOrder,
    LoggingConfig,
    QuadpathSettings,
)
from quadpath.core import PathProcessor
from quadpath.exceptions import PathParseError, QuadpathError
from quadpath.io import events_to_json, events_to_svg
from quadpath.utils import configure_logging


class OutputFormat(str, Enum):
    """Format of the converted path printed to stdout."""

    SVG = "svg"
    JSON = "json"


# Create the Typer app
app = typer.Typer(
    name="quadpath",
    help="Approximate cubic and arc path segments with quadratic Béziers.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Quadpath[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def convert(
    path_data: Annotated[
        str | None,
        typer.Argument(
            help="SVG path data to convert (e.g. 'M0 0 C0 1 1 1 1 0')",
            show_default=False,
        ),
    ] = None,
    input_file: Annotated[
        Path | None,
        typer.Option(
            "--input",
            "-i",
            help="Read SVG path data from a file instead of the argument",
        ),
    ] = None,
    error_bound: Annotated[
        float,
        typer.Option(
            "--error-bound",
            "-e",
            help="Maximum deviation between a cubic piece and its quadratic (> 0)",
        ),
    ] = 0.1,
    max_iterations: Annotated[
        int,
        typer.Option(
            "--max-iterations",
            help="Subdivision checks allowed per cubic (1-64)",
            min=1,
            max=64,
        ),
    ] = MAX_APPROXIMATION_ITERATIONS,
    arc_order: Annotated[
        ArcEmissionOrder,
        typer.Option(
            "--arc-order",
            help="Emission order of arc decompositions",
            case_sensitive=False,
        ),
    ] = ArcEmissionOrder.REVERSED,
    reset_on_close: Annotated[
        bool,
        typer.Option(
            "--reset-on-close",
            help="Move the current point back to the subpath start on close",
        ),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format",
            case_sensitive=False,
        ),
    ] = OutputFormat.SVG,
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
            help="Only print the converted path",
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
    """Convert SVG path data to an equivalent path made of lines and quadratics.

    Every cubic curve (and every arc, which is expanded to cubics while parsing)
    is replaced by quadratic curves that stay within the error bound.

    Example:
        quadpath "M0 0 C0 1 1 1 1 0" -e 0.01
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if (path_data is None) == (input_file is None):
        print_error(
            "Provide path data either as an argument or with --input",
            details="Exactly one of PATH_DATA and --input is required.",
        )
        raise typer.Exit(code=1)

    if input_file is not None:
        if not input_file.is_file():
            print_error(
                f"Input file not found: {input_file}",
                details=f"The file '{input_file}' does not exist or is not a file.",
            )
            raise typer.Exit(code=1)
        path_data = input_file.read_text(encoding="utf-8")

    # Create settings from CLI arguments
    try:
        settings = QuadpathSettings(
            approximation=ApproximationConfig(
                error_bound=error_bound,
                max_iterations=max_iterations,
                arc_order=arc_order,
                reset_on_close=reset_on_close,
            ),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level.upper() if not quiet else "ERROR",
            ),
        )
    except ValidationError as e:
        print_error("Invalid settings", details=str(e.errors()[0]["msg"]))
        raise typer.Exit(code=1)

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)
        print_step("Converting")
        print_settings(error_bound, max_iterations, arc_order.value)

    try:
        processor = PathProcessor(settings, logger=logger)
        result = processor.process_svg(path_data or "")

        if output_format is OutputFormat.JSON:
            rendered = events_to_json(result.events)
        else:
            rendered = events_to_svg(result.events)

    except PathParseError as e:
        print_error(f"Could not parse path data: {e.reason}")
        raise typer.Exit(code=1)
    except QuadpathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    typer.echo(rendered)

    if not quiet:
        print_success(result.stats, result.duration_ms, verbose=verbose)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
