"""CLI application entry point for porcus.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from porcus import __version__
from porcus.cli.output import print_cancelled, print_error, print_summary
from porcus.config import (
    DEFAULT_CONSONANT_SUFFIX,
    DEFAULT_VOWEL_SUFFIX,
    EncodingErrors,
    LoggingConfig,
    PorcusSettings,
    ProcessingConfig,
    SuffixConfig,
)
from porcus.core import TextProcessor
from porcus.exceptions import ConfigurationError, InputReadError, OutputWriteError, PorcusError
from porcus.io import TextWriter

# Create the Typer app
app = typer.Typer(
    name="porcus",
    help="Transforms standard input to pig latin.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"porcus {__version__}")
        raise typer.Exit()


@app.command()
def transform(
    files: Annotated[
        list[Path] | None,
        typer.Argument(
            help="Files to transform; '-' or nothing reads standard input",
            show_default=False,
        ),
    ] = None,
    consonant: Annotated[
        str,
        typer.Option(
            "--consonant",
            "-c",
            help="Suffix for words starting with a consonant",
        ),
    ] = DEFAULT_CONSONANT_SUFFIX,
    vowel: Annotated[
        str,
        typer.Option(
            "--vowel",
            "-v",
            help="Suffix for words starting with a vowel",
        ),
    ] = DEFAULT_VOWEL_SUFFIX,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write to this file instead of standard output",
        ),
    ] = None,
    encoding: Annotated[
        str,
        typer.Option(
            "--encoding",
            help="Text encoding of input and output",
        ),
    ] = "utf-8",
    errors: Annotated[
        str,
        typer.Option(
            "--errors",
            help="Handling of undecodable input (strict|replace|ignore|surrogateescape)",
        ),
    ] = "strict",
    stats: Annotated[
        bool,
        typer.Option(
            "--stats",
            help="Print a summary to stderr when done",
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
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only report errors",
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
    """Transform text to pig latin, line by line.

    Every Latin-script word is rewritten and keeps its case; whitespace,
    punctuation, digits and other scripts pass through unchanged.

    Example:
        echo "Hello, world!" | porcus

    This prints "Ellohay, orldway!".
    """
    try:
        settings = _build_settings(
            consonant=consonant,
            vowel=vowel,
            encoding=encoding,
            errors=errors,
            log_file=log_file,
            log_level=log_level,
            quiet=quiet,
        )

        processor = TextProcessor(settings)
        with TextWriter(
            output,
            encoding=settings.processing.encoding,
            errors=settings.processing.output_errors,
            line_buffered=settings.processing.line_buffered,
        ) as writer:
            run_stats = processor.process(files or [], writer)

        if stats and not quiet:
            print_summary(run_stats, writer.name)

    except KeyboardInterrupt:
        if not quiet:
            print_cancelled()
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code
    except ConfigurationError as e:
        print_error(f"Invalid option {e.option}", details=e.reason)
        raise typer.Exit(code=1)
    except InputReadError as e:
        print_error(f"Could not read {e.source}: {e.reason}")
        raise typer.Exit(code=1)
    except OutputWriteError as e:
        print_error(f"Could not write {e.target}: {e.reason}")
        raise typer.Exit(code=1)
    except PorcusError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _build_settings(
    consonant: str,
    vowel: str,
    encoding: str,
    errors: str,
    log_file: Path | None,
    log_level: str,
    quiet: bool = False,
) -> PorcusSettings:
    """Create settings from CLI arguments.

    Raises:
        ConfigurationError: If an option value is invalid
    """
    try:
        encoding_errors = EncodingErrors(errors.lower())
    except ValueError:
        raise ConfigurationError(
            "--errors",
            "valid values: " + ", ".join(e.value for e in EncodingErrors),
        ) from None

    try:
        processing = ProcessingConfig(encoding=encoding, encoding_errors=encoding_errors)
    except ValidationError as e:
        raise ConfigurationError("--encoding", f"unknown encoding '{encoding}'") from e

    try:
        logging_config = LoggingConfig(log_file=log_file, log_level=log_level, quiet=quiet)
    except ValidationError as e:
        raise ConfigurationError("--log-level", f"unknown log level '{log_level}'") from e

    return PorcusSettings(
        suffixes=SuffixConfig(consonant_suffix=consonant, vowel_suffix=vowel),
        processing=processing,
        logging=logging_config,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
