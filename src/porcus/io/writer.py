"""Text writer for transformed output.

This module provides the TextWriter class for writing transformed lines
to a file or to standard output.
"""

import io
import os
import sys
from pathlib import Path
from types import TracebackType
from typing import TextIO

from porcus.exceptions import OutputWriteError

STDOUT_NAME = "<stdout>"


class TextWriter:
    """Writes text to a file or standard output.

    ``BrokenPipeError`` is not wrapped: a closed downstream pipe is a
    normal way for a filter to stop and is left to the caller.

    Example:
        with TextWriter(Path("output.txt")) as writer:
            writer.write("Ellohay orldway\\n")
    """

    def __init__(
        self,
        path: Path | None = None,
        encoding: str = "utf-8",
        errors: str = "strict",
        line_buffered: bool = True,
    ) -> None:
        """Initialize the text writer.

        Args:
            path: File to write, or None for standard output
            encoding: Text encoding of the output
            errors: Encoding error handler name
            line_buffered: Flush after every write
        """
        self._path = path
        self._encoding = encoding
        self._errors = errors
        self._line_buffered = line_buffered
        self._stream: TextIO | None = None
        self._wrapped_stdout = False

    @property
    def name(self) -> str:
        """Display name of the output."""
        return STDOUT_NAME if self._path is None else str(self._path)

    def open(self) -> None:
        """Open the output.

        Raises:
            OutputWriteError: If the output file cannot be created
        """
        if self._path is None:
            buffer = getattr(sys.stdout, "buffer", None)
            if buffer is None:
                self._stream = sys.stdout
            else:
                sys.stdout.flush()
                self._stream = io.TextIOWrapper(
                    buffer,
                    encoding=self._encoding,
                    errors=self._errors,
                    newline="",
                )
                self._wrapped_stdout = True
            return

        try:
            self._stream = open(  # noqa: SIM115
                self._path,
                "w",
                encoding=self._encoding,
                errors=self._errors,
                newline="",
            )
        except OSError as e:
            raise OutputWriteError(self.name, e.strerror or str(e)) from e

    def write(self, text: str) -> None:
        """Write text to the output.

        Args:
            text: Text to write

        Raises:
            RuntimeError: If the writer has not been opened
            OutputWriteError: If writing fails
            BrokenPipeError: If the reading end of a pipe was closed
        """
        if self._stream is None:
            raise RuntimeError("Output not opened. Call open() first.")

        try:
            self._stream.write(text)
            if self._line_buffered:
                self._stream.flush()
        except BrokenPipeError:
            self._silence_stdout()
            raise
        except UnicodeEncodeError as e:
            raise OutputWriteError(self.name, f"cannot encode as {e.encoding}: {e.reason}") from e
        except OSError as e:
            raise OutputWriteError(self.name, e.strerror or str(e)) from e

    def close(self) -> None:
        """Flush and close the output. Standard output itself is left open."""
        if self._stream is None:
            return

        stream = self._stream
        self._stream = None
        try:
            if self._wrapped_stdout:
                stream.detach()  # type: ignore[attr-defined]
            elif self._path is not None:
                stream.close()
            else:
                stream.flush()
        except OSError as e:
            raise OutputWriteError(self.name, e.strerror or str(e)) from e
        finally:
            self._wrapped_stdout = False

    def _silence_stdout(self) -> None:
        """Point the stdout descriptor at devnull so buffered output can be dropped."""
        if not self._wrapped_stdout:
            return
        try:
            fileno = sys.stdout.fileno()
        except (AttributeError, OSError):
            return
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, fileno)
        os.close(devnull)

    def __enter__(self) -> "TextWriter":
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
