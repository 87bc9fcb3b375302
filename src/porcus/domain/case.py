"""Letter case of a word."""

from enum import Enum


class Case(Enum):
    """Case of a word.

    - LOWER: all characters are lowercase or uncased
    - UPPER: all characters are uppercase or uncased
    - SENTENCE: the first character is uppercase, all others lowercase or uncased
    - MIXED: no consistent case pattern
    """

    LOWER = "lowercase"
    UPPER = "UPPERCASE"
    SENTENCE = "Sentencecase"
    MIXED = "MixedCase"

    @classmethod
    def default(cls) -> "Case":
        """Return the fallback case used when no pattern applies."""
        return cls.MIXED

    def __str__(self) -> str:
        return self.value
