"""Stream processing for the pig latin filter.

This module runs the transformer over line-oriented inputs and writes the
result, keeping track of what was transformed.

Key components:
- TextProcessor: Main orchestrator class for text processing
"""

import time
from collections.abc import Iterable, Sequence
from pathlib import Path

from porcus.config import PorcusSettings
from porcus.core.pig_latin import PigLatinTransformer
from porcus.exceptions import OutputWriteError, PorcusError
from porcus.io import TextReader, TextWriter
from porcus.utils import ProcessingLogger, ProcessingStats, configure_logging

# Source path meaning "read standard input".
STDIN_PATH = Path("-")


class TextProcessor:
    """Transforms text streams to pig latin line by line.

    Each line is transformed as a whole, so line terminators pass through
    untouched like any other non-Latin segment.

    Example:
        settings = PorcusSettings()
        processor = TextProcessor(settings)
        with TextWriter() as writer:
            stats = processor.process([Path("input.txt")], writer)
    """

    def __init__(self, config: PorcusSettings) -> None:
        """Initialize text processor with configuration.

        Args:
            config: Porcus settings containing suffix and processing config
        """
        self.config = config
        self.transformer = PigLatinTransformer.from_config(config.suffixes)
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=config.logging.quiet,
        )
        self.processing_logger = ProcessingLogger(self.logger)

    def process_lines(self, lines: Iterable[str], writer: TextWriter, source: str) -> int:
        """Transform lines and write them.

        Args:
            lines: Lines of text, terminators included
            writer: Opened output
            source: Input name for logging

        Returns:
            Number of lines processed
        """
        count = 0
        for count, line in enumerate(lines, start=1):
            transformed = 0
            skipped = 0
            parts: list[str] = []
            for unit in self.transformer.iter_units(line):
                parts.append(unit.pig_latin)
                if unit.skipped:
                    skipped += 1
                else:
                    transformed += 1
            writer.write("".join(parts))
            self.processing_logger.log_line(source, count, transformed, skipped)
        return count

    def process(
        self,
        sources: Sequence[Path | None],
        writer: TextWriter,
    ) -> ProcessingStats:
        """Transform every input in order and write to one output.

        Args:
            sources: Input files; None or ``-`` reads standard input.
                An empty sequence reads standard input.
            writer: Opened output

        Returns:
            ProcessingStats with line and word counts and timing

        Raises:
            InputReadError: If an input cannot be read
            OutputWriteError: If the output cannot be written
        """
        stats = self.processing_logger.stats
        stats.start_time = time.time()

        paths: list[Path | None] = [
            None if source is None or source == STDIN_PATH else source
            for source in sources
        ] or [None]

        self.logger.info(
            "Starting text processing",
            inputs=len(paths),
            output=writer.name,
            consonant_suffix=self.transformer.consonant_suffix,
            vowel_suffix=self.transformer.vowel_suffix,
        )

        try:
            for path in paths:
                reader = TextReader(
                    path,
                    encoding=self.config.processing.encoding,
                    errors=self.config.processing.encoding_errors.value,
                )
                try:
                    with reader:
                        self.processing_logger.log_source_start(reader.name)
                        line_count = self.process_lines(reader.iter_lines(), writer, reader.name)
                        self.processing_logger.log_source_complete(reader.name, line_count)
                except OutputWriteError as e:
                    self.processing_logger.log_output_error(writer.name, e)
                    raise
                except PorcusError as e:
                    self.processing_logger.log_source_error(reader.name, e)
                    raise
        except BrokenPipeError:
            self.processing_logger.log_output_closed(writer.name)
        finally:
            stats.end_time = time.time()

        self.logger.info(
            "Processing complete",
            lines=stats.lines_processed,
            words=stats.words_transformed,
            skipped=stats.words_skipped,
            duration_seconds=round(stats.duration_seconds, 3),
        )

        return stats
