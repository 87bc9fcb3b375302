"""Text reader for line-oriented input.

This module provides the TextReader class for reading text from a file
or from standard input, one line at a time.
"""

import io
import sys
from collections.abc import Iterator
from pathlib import Path
from types import TracebackType
from typing import TextIO

from porcus.exceptions import InputReadError

STDIN_NAME = "<stdin>"


class TextReader:
    """Reads lines of text from a file or standard input.

    Lines are returned with their terminators and without newline
    translation, so ``\\r\\n`` input stays ``\\r\\n``.

    Example:
        with TextReader(Path("input.txt")) as reader:
            for line in reader.iter_lines():
                print(line, end="")
    """

    def __init__(
        self,
        path: Path | None = None,
        encoding: str = "utf-8",
        errors: str = "strict",
    ) -> None:
        """Initialize the text reader.

        Args:
            path: File to read, or None for standard input
            encoding: Text encoding of the input
            errors: Decoding error handler name
        """
        self._path = path
        self._encoding = encoding
        self._errors = errors
        self._stream: TextIO | None = None
        self._wrapped_stdin = False

    @property
    def name(self) -> str:
        """Display name of the input."""
        return STDIN_NAME if self._path is None else str(self._path)

    def open(self) -> None:
        """Open the input.

        Raises:
            InputReadError: If the file does not exist or cannot be opened
        """
        if self._path is None:
            buffer = getattr(sys.stdin, "buffer", None)
            if buffer is None:
                self._stream = sys.stdin
            else:
                self._stream = io.TextIOWrapper(
                    buffer,
                    encoding=self._encoding,
                    errors=self._errors,
                    newline="",
                )
                self._wrapped_stdin = True
            return

        if not self._path.exists():
            raise InputReadError(self.name, "file not found")
        if not self._path.is_file():
            raise InputReadError(self.name, "not a file")

        try:
            self._stream = open(  # noqa: SIM115
                self._path,
                encoding=self._encoding,
                errors=self._errors,
                newline="",
            )
        except OSError as e:
            raise InputReadError(self.name, e.strerror or str(e)) from e

    def iter_lines(self) -> Iterator[str]:
        """Iterate over input lines, terminators included.

        Yields:
            One line at a time

        Raises:
            RuntimeError: If the reader has not been opened
            InputReadError: If the input cannot be read or decoded
        """
        if self._stream is None:
            raise RuntimeError("Input not opened. Call open() first.")

        try:
            yield from self._stream
        except UnicodeDecodeError as e:
            raise InputReadError(self.name, f"invalid {e.encoding} data: {e.reason}") from e
        except OSError as e:
            raise InputReadError(self.name, e.strerror or str(e)) from e

    def close(self) -> None:
        """Close the input. Standard input itself is left open."""
        if self._stream is None:
            return
        if self._wrapped_stdin:
            self._stream.detach()  # type: ignore[attr-defined]
        elif self._path is not None:
            self._stream.close()
        self._stream = None
        self._wrapped_stdin = False

    def __enter__(self) -> "TextReader":
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
