"""Rich console output helpers for the CLI.

Everything here prints to stderr: stdout carries only the transformed text.
"""

from rich.console import Console
from rich.text import Text

from porcus.utils import ProcessingStats

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


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


def print_summary(stats: ProcessingStats, output_name: str) -> None:
    """Print processing summary.

    Args:
        stats: Statistics of the finished run
        output_name: Display name of the output
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(stats.duration_seconds)}")

    line = Text("  ")
    line.append(", ".join(stats.sources) or "-", style="bold")
    line.append(" → ")
    line.append(output_name, style="bold")
    console.print(line)

    console.print(
        f"  {stats.lines_processed} lines {SYM_DOT} "
        f"{stats.words_transformed} words {SYM_DOT} "
        f"{stats.words_skipped} passed through"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"[bold red]{SYM_ERR} Error:[/bold red] ", end="")
    console.print(Text(message), soft_wrap=True)
    if details:
        console.print(Text(f"  {details}"), soft_wrap=True)


def print_cancelled() -> None:
    """Print cancellation acknowledgment."""
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
