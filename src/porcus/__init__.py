"""Porcus - Pig latin for the whole Latin script.

Porcus rewrites every Latin-script word of a text as pig latin, keeping the
case of each word and leaving punctuation, whitespace and other scripts
exactly as they were.

Example:
    >>> from porcus import PigLatinTransformer
    >>> PigLatinTransformer().to_pig_latin("Hello, ADORABLE world!")
    'Ellohay, ADORABLEWAY orldway!'

On the command line:
    $ echo "Pig latin" | porcus
    Igpay atinlay
"""

__version__ = "0.1.0"
__author__ = "Porcus contributors"

from porcus.config import DEFAULT_CONSONANT_SUFFIX, DEFAULT_VOWEL_SUFFIX
from porcus.core.pig_latin import PigLatinTransformer, to_pig_latin

__all__ = [
    "DEFAULT_CONSONANT_SUFFIX",
    "DEFAULT_VOWEL_SUFFIX",
    "PigLatinTransformer",
    "__author__",
    "__version__",
    "to_pig_latin",
]
