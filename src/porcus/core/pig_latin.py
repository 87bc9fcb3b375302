"""Pig latin for the whole Latin script.

Example:
    >>> transformer = PigLatinTransformer()
    >>> transformer.to_pig_latin("Pig latin")
    'Igpay atinlay'
    >>> transformer.to_pig_latin("à l’œuf")
    'àway œufl’ay'

Custom suffixes:
    >>> PigLatinTransformer("eɪ", "weɪ").to_pig_latin("ə stɹɪŋ")
    'əweɪ ɪŋstɹeɪ'
"""

from collections.abc import Iterator
from dataclasses import dataclass

from porcus.config import DEFAULT_CONSONANT_SUFFIX, DEFAULT_VOWEL_SUFFIX, SuffixConfig
from porcus.core.casing import detect_case, to_case
from porcus.core.classifier import consonant_prefix_length
from porcus.core.unicode import graphemes, is_latin, split_word_bounds
from porcus.domain import WordUnit


def should_skip_word(word: str) -> bool:
    """Check whether a segment passes through unchanged.

    Empty segments and segments whose first character is not Latin
    (whitespace, punctuation, digits, other scripts) are skipped.
    """
    return not word or not is_latin(word[0])


@dataclass(frozen=True, slots=True)
class PigLatinTransformer:
    """Rewrites Latin-script words as pig latin.

    Words starting with a consonant cluster have the cluster moved to the end
    followed by ``consonant_suffix``; words starting with a vowel get
    ``vowel_suffix`` appended. The case pattern of each word is restored on
    the result. Everything else in the text is left as is.

    Attributes:
        consonant_suffix: Suffix for consonant-initial words
        vowel_suffix: Suffix for vowel-initial words
    """

    consonant_suffix: str = DEFAULT_CONSONANT_SUFFIX
    vowel_suffix: str = DEFAULT_VOWEL_SUFFIX

    @classmethod
    def from_config(cls, config: SuffixConfig) -> "PigLatinTransformer":
        """Create a transformer from suffix settings."""
        return cls(
            consonant_suffix=config.consonant_suffix,
            vowel_suffix=config.vowel_suffix,
        )

    def to_pig_latin(self, text: str) -> str:
        """Transform text to pig latin.

        Args:
            text: Any string, including the empty string

        Returns:
            Text with every Latin-script word rewritten
        """
        return "".join(unit.pig_latin for unit in self.iter_units(text))

    transform = to_pig_latin

    def iter_units(self, text: str) -> Iterator[WordUnit]:
        """Segment text at word boundaries and transform each segment.

        Segments are independent of each other and yielded in input order.

        Args:
            text: Any string

        Yields:
            WordUnit for each segment
        """
        for segment in split_word_bounds(text):
            if should_skip_word(segment):
                yield WordUnit(text=segment, pig_latin=segment, skipped=True)
            else:
                yield WordUnit(text=segment, pig_latin=self.word_to_pig_latin(segment))

    def word_to_pig_latin(self, word: str) -> str:
        """Transform a single word, matching the case of the input.

        Args:
            word: One word-boundary segment

        Returns:
            Case-matched pig latin, or the word itself if it is skipped
        """
        if should_skip_word(word):
            return word
        return to_case(self._to_uncased_pig_latin(word), detect_case(word))

    transform_word = word_to_pig_latin

    def _to_uncased_pig_latin(self, word: str) -> str:
        clusters = graphemes(word)
        prefix_length = consonant_prefix_length(clusters)

        if prefix_length == 0:
            return word + self.vowel_suffix

        prefix = "".join(clusters[:prefix_length])
        rest = "".join(clusters[prefix_length:])
        return rest + prefix + self.consonant_suffix


_DEFAULT_TRANSFORMER = PigLatinTransformer()


def to_pig_latin(text: str) -> str:
    """Transform text to pig latin with the default suffixes."""
    return _DEFAULT_TRANSFORMER.to_pig_latin(text)
