"""Domain models for porcus.

This module contains the value types shared by the classifier, the case
helpers and the rewrite engine. All models are immutable:

- CharType: vowel/consonant role of a grapheme
- Case: letter case pattern of a word
- WordUnit: one word-boundary segment and its rewritten form

The ``latin`` submodule holds the constant codepoint tables used for
classification.
"""

from porcus.domain.case import Case
from porcus.domain.char_type import CharType
from porcus.domain.latin import AMBIGUOUS_VOWELS, CONSONANT_LIKE_PUNCTUATION, VOWELS
from porcus.domain.unit import WordUnit

__all__: list[str] = [
    # Enums
    "Case",
    "CharType",
    # Core types
    "WordUnit",
    # Codepoint tables
    "AMBIGUOUS_VOWELS",
    "CONSONANT_LIKE_PUNCTUATION",
    "VOWELS",
]
