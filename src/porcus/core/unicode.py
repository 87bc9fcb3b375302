"""Unicode text primitives.

Thin wrappers around the segmentation, normalization and script lookups
that the rewrite engine relies on:

- graphemes: extended grapheme clusters (``regex`` ``\\X``)
- split_word_bounds: UAX #29 word-boundary segmentation (``uniseg``)
- first_nfd_char: first codepoint of the canonical decomposition
- script_of / is_latin: ISO 15924 script lookup (``fontTools.unicodedata``)
"""

import unicodedata

import regex
from fontTools import unicodedata as ft_unicodedata
from uniseg.wordbreak import words

LATIN_SCRIPT = "Latn"

_GRAPHEME = regex.compile(r"\X")


def graphemes(text: str) -> list[str]:
    """Split text into extended grapheme clusters.

    Args:
        text: Any string

    Returns:
        List of user-perceived characters, in order
    """
    return _GRAPHEME.findall(text)


def split_word_bounds(text: str) -> list[str]:
    """Split text at Unicode default word boundaries.

    Words, runs of whitespace and individual punctuation marks come out
    as separate segments. Joining the result gives back the input.

    Args:
        text: Any string

    Returns:
        List of non-empty segments, in order
    """
    if not text:
        return []
    return list(words(text))


def first_nfd_char(grapheme: str) -> str | None:
    """Return the first codepoint of the NFD form of a grapheme.

    Combining marks following the base character are ignored, so ``ç`` and
    ``c\\u0327`` both yield ``c``.
    """
    if not grapheme:
        return None
    return unicodedata.normalize("NFD", grapheme)[0]


def script_of(char: str) -> str:
    """Return the ISO 15924 script code of a character, e.g. ``Latn``."""
    return ft_unicodedata.script(char)


def is_latin(char: str) -> bool:
    """Check whether a character belongs to the Latin script."""
    return script_of(char) == LATIN_SCRIPT
