"""Vowel-or-consonant classification of a grapheme."""

from enum import Enum


class CharType(Enum):
    """Vowel-or-consonant classification of a grapheme.

    - VOWEL: Latin vowel, e.g. ``A``, ``æ``, ``ő``, ``ɛ``
    - CONSONANT: Latin consonant, e.g. ``B``, ``ç``, ``ł``, ``ʁ``, and some
      punctuation which may appear inside words, e.g. ``'``
    - AMBIGUOUS: Latin letter which may be a vowel or a consonant, e.g. ``Y``
    - NON_LATIN: anything outside the Latin script, e.g. `` ``, ``.``, ``1``, ``的``
    - EMPTY: the empty string, or no grapheme at all
    """

    VOWEL = "vowel"
    CONSONANT = "consonant"
    AMBIGUOUS = "ambiguous"
    NON_LATIN = "non-latin"
    EMPTY = "empty"

    def __str__(self) -> str:
        return self.value
