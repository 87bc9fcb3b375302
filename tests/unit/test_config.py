"""Tests for configuration models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from porcus.config import (
    EncodingErrors,
    LoggingConfig,
    PorcusSettings,
    ProcessingConfig,
    SuffixConfig,
    get_default_settings,
)


class TestSuffixConfig:
    """Tests for SuffixConfig."""

    def test_defaults(self) -> None:
        config = SuffixConfig()
        assert config.consonant_suffix == "ay"
        assert config.vowel_suffix == "way"

    def test_empty_suffixes_allowed(self) -> None:
        config = SuffixConfig(consonant_suffix="", vowel_suffix="")
        assert config.consonant_suffix == ""

    def test_frozen(self) -> None:
        config = SuffixConfig()
        with pytest.raises(ValidationError):
            config.consonant_suffix = "yay"


class TestProcessingConfig:
    """Tests for ProcessingConfig."""

    def test_defaults(self) -> None:
        config = ProcessingConfig()
        assert config.encoding == "utf-8"
        assert config.encoding_errors == EncodingErrors.STRICT
        assert config.line_buffered

    def test_known_encoding(self) -> None:
        assert ProcessingConfig(encoding="latin-1").encoding == "latin-1"

    def test_unknown_encoding(self) -> None:
        with pytest.raises(ValidationError, match="unknown encoding"):
            ProcessingConfig(encoding="klingon-8")

    def test_error_handler_from_string(self) -> None:
        config = ProcessingConfig(encoding_errors="replace")
        assert config.encoding_errors == EncodingErrors.REPLACE

    @pytest.mark.parametrize(
        ("errors", "expected"),
        [("strict", "strict"), ("replace", "strict"), ("ignore", "strict"), ("surrogateescape", "surrogateescape")],
    )
    def test_output_errors(self, errors: str, expected: str) -> None:
        assert ProcessingConfig(encoding_errors=errors).output_errors == expected


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_defaults(self) -> None:
        config = LoggingConfig()
        assert config.log_file is None
        assert config.log_level == "WARNING"
        assert config.file_log_level == "DEBUG"

    def test_level_normalized(self) -> None:
        assert LoggingConfig(log_level="info").log_level == "INFO"

    def test_unknown_level(self) -> None:
        with pytest.raises(ValidationError, match="unknown log level"):
            LoggingConfig(log_level="LOUD")

    def test_log_file_path(self) -> None:
        assert LoggingConfig(log_file="porcus.log").log_file == Path("porcus.log")

    def test_quiet_default(self) -> None:
        assert LoggingConfig().quiet is False


class TestPorcusSettings:
    """Tests for PorcusSettings."""

    def test_default_settings(self) -> None:
        settings = get_default_settings()
        assert settings.suffixes == SuffixConfig()
        assert settings.processing.encoding == "utf-8"
        assert settings.logging.log_level == "WARNING"

    def test_nested_from_dict(self) -> None:
        settings = PorcusSettings.model_validate(
            {"suffixes": {"consonant_suffix": "yay", "vowel_suffix": "-hay"}}
        )
        assert settings.suffixes.vowel_suffix == "-hay"
        assert settings.processing == ProcessingConfig()
