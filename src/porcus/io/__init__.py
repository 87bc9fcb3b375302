"""Text I/O layer for porcus.

This module handles reading and writing line-oriented text, from and to
files or the standard streams.

Key responsibilities:
- Read lines without newline translation
- Apply the configured encoding and decoding error handler
- Report I/O failures as porcus exceptions

Key classes:
- TextReader: Read lines from a file or standard input
- TextWriter: Write text to a file or standard output
"""

from porcus.io.reader import STDIN_NAME, TextReader
from porcus.io.writer import STDOUT_NAME, TextWriter

__all__ = [
    "STDIN_NAME",
    "STDOUT_NAME",
    "TextReader",
    "TextWriter",
]
