"""Unit tests for grapheme classification."""

import pytest

from porcus.core.classifier import (
    classify,
    consonant_prefix_length,
    get_char_type_at,
    has_consonant_at,
)
from porcus.core.unicode import graphemes
from porcus.domain import CharType


def assert_all_classified(items: list[str], expected: CharType) -> None:
    """Assert every grapheme of a list gets the same classification."""
    for index in range(len(items)):
        assert get_char_type_at(items, index) == expected, items[index]


class TestGetCharTypeAt:
    """Tests for get_char_type_at."""

    def test_basic_usage(self) -> None:
        word = ["B", "a", "y", "."]
        assert get_char_type_at(word, 0) == CharType.CONSONANT
        assert get_char_type_at(word, 1) == CharType.VOWEL
        assert get_char_type_at(word, 2) == CharType.AMBIGUOUS
        assert get_char_type_at(word, 3) == CharType.NON_LATIN

    def test_empty(self) -> None:
        assert get_char_type_at([], 0) == CharType.EMPTY
        assert get_char_type_at([""], 0) == CharType.EMPTY
        assert get_char_type_at(["a"], 42) == CharType.EMPTY
        assert get_char_type_at(["a"], -1) == CharType.EMPTY

    def test_first_grapheme_of_longer_string(self) -> None:
        """Only the first character of an entry is inspected."""
        assert get_char_type_at(["", "abc"], 1) == CharType.VOWEL

    def test_vowels(self) -> None:
        assert_all_classified(
            ["a", "e", "i", "o", "u", "A", "å", "ã", "é", "Î", "ö", "ø", "œ", "ə"],
            CharType.VOWEL,
        )

    def test_consonants(self) -> None:
        assert_all_classified(
            ["b", "B", "ç", "Đ", "þ", "ñ", "ß", "ʔ", "Ⅰ"],
            CharType.CONSONANT,
        )

    def test_ambiguous(self) -> None:
        assert_all_classified(
            ["y", "Y", "Ÿ", "ȳ", "ỿ", "Ｙ"],
            CharType.AMBIGUOUS,
        )

    def test_non_latin(self) -> None:
        assert_all_classified(
            [" ", '"', ",", ".", "π", "α", "ב", "的", "1"],
            CharType.NON_LATIN,
        )

    def test_special_punctuation_is_consonant(self) -> None:
        assert_all_classified(["'", "’", "·", "״"], CharType.CONSONANT)

    def test_modifiers_are_consonants(self) -> None:
        assert_all_classified(["ʰ", "ᵃ", "ʸ"], CharType.CONSONANT)

    def test_nfc_and_nfd_classify_identically(self) -> None:
        assert get_char_type_at(["\u00e7", "c\u0327"], 0) == CharType.CONSONANT
        assert get_char_type_at(["\u00e7", "c\u0327"], 1) == CharType.CONSONANT
        assert get_char_type_at(["\u00e9", "e\u0301"], 0) == CharType.VOWEL
        assert get_char_type_at(["\u00e9", "e\u0301"], 1) == CharType.VOWEL

    def test_welsh_w_is_consonant(self) -> None:
        """Classification follows English orthography."""
        assert get_char_type_at(["w"], 0) == CharType.CONSONANT

    def test_repeated_calls_agree(self) -> None:
        word = graphemes("yoga")
        results = {get_char_type_at(word, 0) for _ in range(5)}
        assert results == {CharType.AMBIGUOUS}

    def test_classify_alias(self) -> None:
        assert classify(["B", "a", "y", "."], 1) == CharType.VOWEL


class TestHasConsonantAt:
    """Tests for the ambiguous-letter lookahead."""

    def test_consonant(self) -> None:
        assert has_consonant_at(["n", "i", "x"], 0)

    def test_vowel(self) -> None:
        assert not has_consonant_at(["n", "i", "x"], 1)

    def test_y_before_vowel_is_consonant(self) -> None:
        assert has_consonant_at(graphemes("yoga"), 0)

    def test_y_before_consonant_is_vowel(self) -> None:
        assert not has_consonant_at(graphemes("Ypres"), 0)

    def test_y_at_end_is_vowel(self) -> None:
        assert not has_consonant_at(graphemes("my"), 1)

    def test_y_before_y_is_vowel(self) -> None:
        assert not has_consonant_at(graphemes("yy"), 0)

    def test_out_of_range(self) -> None:
        assert not has_consonant_at(["a"], 3)

    def test_non_latin(self) -> None:
        assert not has_consonant_at(graphemes("TV9"), 2)


class TestConsonantPrefixLength:
    """Tests for consonant_prefix_length."""

    @pytest.mark.parametrize(
        ("word", "expected"),
        [
            ("nix", 1),
            ("string", 3),
            ("aid", 0),
            ("hmm", 3),
            ("yoga", 1),
            ("ytterbium", 0),
            ("yy", 0),
            ("L'eau", 2),
            ("TV9मराठी", 2),
            ("", 0),
        ],
    )
    def test_prefix(self, word: str, expected: int) -> None:
        assert consonant_prefix_length(graphemes(word)) == expected
