"""Configuration management for porcus.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SuffixConfig: Pig latin suffix settings
- ProcessingConfig: Text stream settings
- LoggingConfig: Logging settings
- PorcusSettings: Main application settings
"""

from porcus.config.settings import (
    DEFAULT_CONSONANT_SUFFIX,
    DEFAULT_VOWEL_SUFFIX,
    EncodingErrors,
    LoggingConfig,
    PorcusSettings,
    ProcessingConfig,
    SuffixConfig,
    get_default_settings,
)

__all__ = [
    "DEFAULT_CONSONANT_SUFFIX",
    "DEFAULT_VOWEL_SUFFIX",
    "EncodingErrors",
    "LoggingConfig",
    "PorcusSettings",
    "ProcessingConfig",
    "SuffixConfig",
    "get_default_settings",
]
