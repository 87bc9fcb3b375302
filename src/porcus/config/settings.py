"""Configuration settings for porcus."""

import codecs
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Appended to words starting with a consonant, e.g. nix -> ixn + ay.
DEFAULT_CONSONANT_SUFFIX = "ay"

# Appended to words starting with a vowel, e.g. egg -> egg + way.
DEFAULT_VOWEL_SUFFIX = "way"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EncodingErrors(str, Enum):
    """How undecodable input bytes are handled."""

    STRICT = "strict"
    REPLACE = "replace"
    IGNORE = "ignore"
    SURROGATEESCAPE = "surrogateescape"


class SuffixConfig(BaseModel):
    """Suffixes appended to transformed words.

    Empty strings are allowed and simply produce no suffix.
    """

    model_config = ConfigDict(frozen=True)

    consonant_suffix: str = Field(
        default=DEFAULT_CONSONANT_SUFFIX,
        description="Suffix for words starting with a consonant",
    )
    vowel_suffix: str = Field(
        default=DEFAULT_VOWEL_SUFFIX,
        description="Suffix for words starting with a vowel",
    )


class ProcessingConfig(BaseModel):
    """Configuration for text stream processing."""

    encoding: str = Field(
        default="utf-8",
        description="Text encoding for input and output",
    )
    encoding_errors: EncodingErrors = Field(
        default=EncodingErrors.STRICT,
        description="Handling of undecodable input",
    )
    line_buffered: bool = Field(
        default=True,
        description="Flush output after every line",
    )

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e
        return value

    @property
    def output_errors(self) -> str:
        """Encoding error handler for the output.

        Bytes smuggled through as surrogates by ``surrogateescape`` are
        written back unchanged; every other mode encodes strictly.
        """
        if self.encoding_errors is EncodingErrors.SURROGATEESCAPE:
            return EncodingErrors.SURROGATEESCAPE.value
        return EncodingErrors.STRICT.value


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )
    quiet: bool = Field(
        default=False,
        description="Only report errors on the console",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return level


class PorcusSettings(BaseModel):
    """Main application settings."""

    suffixes: SuffixConfig = Field(default_factory=SuffixConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PorcusSettings:
    """Get default application settings."""
    return PorcusSettings()
