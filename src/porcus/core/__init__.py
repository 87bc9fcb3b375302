"""Core processing algorithms for porcus.

This module contains the core algorithms for:

- Unicode primitives (grapheme clusters, word boundaries, script lookup)
- Character classification (vowel, consonant, ambiguous, non-Latin)
- Case detection and restoration
- Pig latin rewriting of text
- Line-oriented stream processing

The classifier, case helpers and transformer are:
- Stateless (safe to share between threads)
- Pure (no side effects)

Key functions:
- get_char_type_at: Classify a grapheme within a word
- has_consonant_at: Resolve ambiguous letters with one grapheme of lookahead
- detect_case: Detect the case pattern of a word
- to_case: Apply a case pattern to a word
- to_pig_latin: Transform text with the default suffixes

Key classes:
- PigLatinTransformer: Transforms text with configurable suffixes
- TextProcessor: Transforms line streams and collects statistics
"""

from porcus.core.casing import apply_case, detect_case, to_case
from porcus.core.classifier import (
    classify,
    consonant_prefix_length,
    get_char_type_at,
    has_consonant_at,
)
from porcus.core.pig_latin import PigLatinTransformer, should_skip_word, to_pig_latin
from porcus.core.processor import TextProcessor
from porcus.core.unicode import first_nfd_char, graphemes, is_latin, script_of, split_word_bounds

__all__ = [
    # Transformer classes
    "PigLatinTransformer",
    # Processor classes
    "TextProcessor",
    # Casing functions
    "apply_case",
    "detect_case",
    "to_case",
    # Classifier functions
    "classify",
    "consonant_prefix_length",
    "get_char_type_at",
    "has_consonant_at",
    # Transformer functions
    "should_skip_word",
    "to_pig_latin",
    # Unicode functions
    "first_nfd_char",
    "graphemes",
    "is_latin",
    "script_of",
    "split_word_bounds",
]
