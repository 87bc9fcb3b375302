"""Tests for stream processing orchestration."""

from pathlib import Path
from unittest.mock import patch

import pytest

from porcus.config import LoggingConfig, PorcusSettings, SuffixConfig
from porcus.core.processor import TextProcessor
from porcus.exceptions import InputReadError, OutputWriteError
from porcus.io import TextWriter


@pytest.fixture
def settings() -> PorcusSettings:
    """Create default test settings."""
    return PorcusSettings()


@pytest.fixture
def processor(settings: PorcusSettings) -> TextProcessor:
    """Create a processor with default settings."""
    return TextProcessor(settings)


@pytest.fixture
def input_file(tmp_path: Path) -> Path:
    """Create a small input file."""
    path = tmp_path / "input.txt"
    path.write_text("Hello, ADORABLE world!\nPig latin\n", encoding="utf-8")
    return path


class RecordingWriter(TextWriter):
    """Writer that keeps everything in memory."""

    def __init__(self) -> None:
        super().__init__()
        self.chunks: list[str] = []

    def write(self, text: str) -> None:
        self.chunks.append(text)


class BrokenPipeWriter(TextWriter):
    """Writer whose reader goes away after the first line."""

    def __init__(self) -> None:
        super().__init__()
        self.chunks: list[str] = []

    def write(self, text: str) -> None:
        if self.chunks:
            raise BrokenPipeError
        self.chunks.append(text)


class FailingWriter(TextWriter):
    """Writer whose output device fails."""

    def write(self, text: str) -> None:
        raise OutputWriteError(self.name, "No space left on device")


class TestTextProcessor:
    """Tests for TextProcessor class."""

    def test_init(self, processor: TextProcessor) -> None:
        assert processor.transformer.consonant_suffix == "ay"
        assert processor.transformer.vowel_suffix == "way"

    def test_custom_suffixes(self) -> None:
        settings = PorcusSettings(suffixes=SuffixConfig(consonant_suffix="yay", vowel_suffix="-hay"))
        processor = TextProcessor(settings)
        writer = RecordingWriter()
        processor.process_lines(["Hello, egg!\n"], writer, "test")
        assert writer.chunks == ["Ellohyay, egg-hay!\n"]

    def test_process_lines(self, processor: TextProcessor) -> None:
        writer = RecordingWriter()
        count = processor.process_lines(["hello world\n", "\n", "nix"], writer, "test")
        assert count == 3
        assert writer.chunks == ["ellohay orldway\n", "\n", "ixnay"]

    def test_process_lines_counts_words(self, processor: TextProcessor) -> None:
        writer = RecordingWriter()
        processor.process_lines(["Hello, world!\n"], writer, "test")
        stats = processor.processing_logger.stats
        assert stats.lines_processed == 1
        assert stats.words_transformed == 2
        assert stats.words_skipped >= 3

    def test_process_empty_input(self, processor: TextProcessor) -> None:
        writer = RecordingWriter()
        assert processor.process_lines([], writer, "test") == 0
        assert writer.chunks == []

    def test_process_file(self, processor: TextProcessor, input_file: Path) -> None:
        writer = RecordingWriter()
        stats = processor.process([input_file], writer)

        assert "".join(writer.chunks) == "Ellohay, ADORABLEWAY orldway!\nIgpay atinlay\n"
        assert stats.lines_processed == 2
        assert stats.words_transformed == 5
        assert stats.sources == [str(input_file)]
        assert stats.duration_seconds >= 0

    def test_process_multiple_files_in_order(
        self, processor: TextProcessor, input_file: Path, tmp_path: Path
    ) -> None:
        second = tmp_path / "second.txt"
        second.write_text("nix\n", encoding="utf-8")
        writer = RecordingWriter()
        stats = processor.process([second, input_file], writer)

        assert writer.chunks[0] == "ixnay\n"
        assert stats.lines_processed == 3
        assert stats.sources == [str(second), str(input_file)]

    def test_missing_file_raises(self, processor: TextProcessor, tmp_path: Path) -> None:
        writer = RecordingWriter()
        with pytest.raises(InputReadError) as exc_info:
            processor.process([tmp_path / "missing.txt"], writer)
        assert exc_info.value.reason == "file not found"

    def test_output_error_names_target(
        self, processor: TextProcessor, input_file: Path, tmp_path: Path
    ) -> None:
        writer = FailingWriter(tmp_path / "out.txt")
        with (
            patch.object(processor.processing_logger, "log_output_error") as log_output_error,
            patch.object(processor.processing_logger, "log_source_error") as log_source_error,
        ):
            with pytest.raises(OutputWriteError):
                processor.process([input_file], writer)

        log_output_error.assert_called_once()
        assert log_output_error.call_args.args[0] == str(tmp_path / "out.txt")
        log_source_error.assert_not_called()

    def test_input_error_names_source(self, processor: TextProcessor, tmp_path: Path) -> None:
        missing = tmp_path / "missing.txt"
        with patch.object(processor.processing_logger, "log_source_error") as log_source_error:
            with pytest.raises(InputReadError):
                processor.process([missing], RecordingWriter())

        assert log_source_error.call_args.args[0] == str(missing)

    def test_broken_pipe_stops_quietly(self, processor: TextProcessor, input_file: Path) -> None:
        writer = BrokenPipeWriter()
        stats = processor.process([input_file], writer)

        assert writer.chunks == ["Ellohay, ADORABLEWAY orldway!\n"]
        assert stats.lines_processed == 1
        assert stats.end_time is not None

    def test_log_file(self, tmp_path: Path, input_file: Path) -> None:
        log_file = tmp_path / "porcus.log"
        settings = PorcusSettings(logging=LoggingConfig(log_file=log_file))
        processor = TextProcessor(settings)
        processor.process([input_file], RecordingWriter())

        content = log_file.read_text(encoding="utf-8")
        assert "Processing complete" in content
        assert "Line transformed" in content
