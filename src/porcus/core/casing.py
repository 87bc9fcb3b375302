"""Case detection and mapping.

Example:
    >>> detect_case("HELLO")
    <Case.UPPER: 'UPPERCASE'>
    >>> to_case("HELLO", Case.SENTENCE)
    'Hello'
"""

from porcus.core.unicode import graphemes
from porcus.domain import Case

# (first_is_lower, first_is_upper, rest_is_lower, rest_is_upper) -> Case.
# ``None`` matches anything; the first matching row wins.
_CASE_TABLE: tuple[tuple[tuple[bool | None, bool | None, bool | None, bool | None], Case], ...] = (
    ((True, None, True, None), Case.LOWER),
    ((None, True, True, None), Case.SENTENCE),
    ((None, True, None, True), Case.UPPER),
)


def detect_case(word: str) -> Case:
    """Detect the case of a word.

    Uncased characters (digits, symbols, most non-Latin scripts) count as
    both lowercase and uppercase, so they never force a mixed result. A
    single uppercase letter is sentence case, not uppercase. The empty
    string is lowercase.

    Args:
        word: Word to inspect

    Returns:
        Detected Case, Case.MIXED if no pattern applies
    """
    if not word:
        return Case.LOWER

    first, rest = word[0], word[1:]
    predicates = (
        not first.isupper(),
        not first.islower(),
        all(not char.isupper() for char in rest),
        all(not char.islower() for char in rest),
    )

    for pattern, case in _CASE_TABLE:
        if all(expected is None or expected == actual for expected, actual in zip(pattern, predicates)):
            return case
    return Case.default()


def to_case(word: str, case: Case) -> str:
    """Return the word converted to the specified case.

    Conversion to mixed case leaves the word unchanged.

    Args:
        word: Word to convert
        case: Target case

    Returns:
        Converted word
    """
    if case is Case.LOWER:
        return word.lower()
    if case is Case.UPPER:
        return word.upper()
    if case is Case.SENTENCE:
        return _to_sentence_case(word)
    return word


def _to_sentence_case(word: str) -> str:
    """Uppercase the first grapheme cluster and lowercase the rest."""
    clusters = graphemes(word)
    if not clusters:
        return ""
    first = clusters[0]
    return first.upper() + word[len(first):].lower()


apply_case = to_case
