"""Classifies graphemes as vowels or consonants.

``Y`` and its variants are classified as ambiguous. Characters outside the
Latin script are non-Latin, except for a few punctuation marks which are
considered consonants because they appear inside words (``L'eau``,
``z״l``). The empty string gets its own classification.

Only the first codepoint of the grapheme's NFD decomposition is inspected,
so precomposed and decomposed forms are treated identically.

Classification choices are relative to English orthography and wrong for
some other languages, e.g. the Welsh vowel ``w`` is a consonant here.
"""

from collections.abc import Sequence

from porcus.core.unicode import first_nfd_char, is_latin
from porcus.domain import AMBIGUOUS_VOWELS, CONSONANT_LIKE_PUNCTUATION, VOWELS, CharType


def get_char_type_at(graphemes: Sequence[str], index: int) -> CharType:
    """Classify the grapheme at the specified index.

    Args:
        graphemes: Grapheme clusters of one word
        index: Position to classify

    Returns:
        CharType of the grapheme, or CharType.EMPTY if the index is out of
        range or the grapheme is empty

    Example:
        >>> get_char_type_at(["B", "a", "y", "."], 1)
        <CharType.VOWEL: 'vowel'>
    """
    if not 0 <= index < len(graphemes):
        return CharType.EMPTY

    first_char = first_nfd_char(graphemes[index])
    if first_char is None:
        return CharType.EMPTY

    if first_char in VOWELS:
        return CharType.VOWEL
    if first_char in AMBIGUOUS_VOWELS:
        return CharType.AMBIGUOUS
    if first_char in CONSONANT_LIKE_PUNCTUATION:
        return CharType.CONSONANT
    if is_latin(first_char):
        return CharType.CONSONANT
    return CharType.NON_LATIN


def has_consonant_at(graphemes: Sequence[str], index: int) -> bool:
    """Check whether the grapheme at index acts as a consonant.

    An ambiguous letter is a consonant only when a vowel follows it
    (``yoga``); otherwise it acts as a vowel (``Ypres``, ``yy``).
    """
    char_type = get_char_type_at(graphemes, index)
    if char_type is CharType.CONSONANT:
        return True
    if char_type is CharType.AMBIGUOUS:
        return get_char_type_at(graphemes, index + 1) is CharType.VOWEL
    return False


def consonant_prefix_length(graphemes: Sequence[str]) -> int:
    """Count the leading graphemes that act as consonants."""
    length = 0
    while has_consonant_at(graphemes, length):
        length += 1
    return length


classify = get_char_type_at
