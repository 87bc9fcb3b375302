"""Word units produced by one transformation pass."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WordUnit:
    """A word-boundary segment of the input and its rewritten form.

    Attributes:
        text: The segment as it appeared in the input
        pig_latin: The output for this segment
        skipped: True if the segment was passed through unchanged
            (whitespace, punctuation, digits, non-Latin scripts)
    """

    text: str
    pig_latin: str
    skipped: bool = False
