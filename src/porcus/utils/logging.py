"""Logging utilities for porcus."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from porcus.exceptions import ConfigurationError

# Marks handlers installed by configure_logging so repeated calls replace them.
_HANDLER_MARK = "_porcus_handler"


@dataclass
class ProcessingStats:
    """Statistics from processing run."""

    lines_processed: int = 0
    words_transformed: int = 0
    words_skipped: int = 0
    sources: list[str] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Console logs go to stderr so they never mix with transformed text on
    stdout. The file handler is only installed when a log file is given.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger

    Raises:
        ConfigurationError: If the log file cannot be opened
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root_logger.removeHandler(handler)
            handler.close()

    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            raise ConfigurationError("--log-file", e.strerror or str(e)) from e
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_MARK, True)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, _HANDLER_MARK, True)
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("porcus")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level if log_file else console_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking processing progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_source_start(self, source: str) -> None:
        """Log start of reading an input."""
        self._logger.info("Reading input", source=source)
        self._stats.sources.append(source)

    def log_line(
        self,
        source: str,
        line_number: int,
        words_transformed: int,
        words_skipped: int,
    ) -> None:
        """Log one transformed line."""
        self._logger.debug(
            "Line transformed",
            source=source,
            line=line_number,
            words=words_transformed,
            skipped=words_skipped,
        )
        self._stats.lines_processed += 1
        self._stats.words_transformed += words_transformed
        self._stats.words_skipped += words_skipped

    def log_source_complete(self, source: str, line_count: int) -> None:
        """Log end of an input."""
        self._logger.info("Input complete", source=source, lines=line_count)

    def log_source_error(self, source: str, error: Exception) -> None:
        """Log an input failure."""
        self._logger.error(
            "Processing failed",
            source=source,
            error=str(error),
            error_type=type(error).__name__,
        )

    def log_output_error(self, target: str, error: Exception) -> None:
        """Log an output failure."""
        self._logger.error(
            "Output failed",
            target=target,
            error=str(error),
            error_type=type(error).__name__,
        )

    def log_output_closed(self, target: str) -> None:
        """Log that the reading end of the output went away."""
        self._logger.info("Output closed by reader", target=target)

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
