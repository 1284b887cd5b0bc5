"""Rich console output helpers for the CLI.

Converted path data goes to stdout; everything printed here goes to stderr so
the result can be piped.
"""

from rich.console import Console
from rich.text import Text

from quadpath.core.transformer import TransformStats

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_WARN = "!"  # Warning
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Quadpath[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_settings(error_bound: float, max_iterations: int, arc_order: str) -> None:
    """Print the approximation settings in use."""
    console.print(
        f"  error bound {error_bound:g} {SYM_DOT} cap {max_iterations} iterations "
        f"{SYM_DOT} arcs {arc_order}"
    )


def _format_time(milliseconds: float) -> str:
    """Format milliseconds into human-readable time string."""
    if milliseconds < 1000:
        return f"{milliseconds:.1f}ms"
    return f"{milliseconds / 1000:.1f}s"


def print_success(stats: TransformStats, duration_ms: float, verbose: bool = False) -> None:
    """Print success message with conversion summary.

    Args:
        stats: Statistics of the conversion
        duration_ms: Conversion time in milliseconds
        verbose: Whether to show event counts
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(duration_ms)}")
    console.print(
        f"  {stats.cubics_converted} cubics {SYM_DOT} {stats.arcs_converted} arcs "
        f"{SYM_DOT} {stats.quadratics_emitted} quadratics"
    )
    if verbose:
        console.print(f"  {stats.events_read} events in {SYM_DOT} {stats.events_emitted} events out")

    if stats.cap_exhausted_count:
        line = Text(f"  {SYM_WARN} ", style="yellow")
        line.append(
            f"{stats.cap_exhausted_count} cubics hit the iteration cap; "
            "their approximation may exceed the error bound"
        )
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
