"""Exception hierarchy for porcus.

The pig latin transformation itself never fails; these errors come from
reading and writing text streams and from invalid command-line options.
"""


class PorcusError(Exception):
    """Base exception for all porcus errors."""

    pass


class TextIOError(PorcusError):
    """Errors related to reading or writing text."""

    pass


class InputReadError(TextIOError):
    """Error reading input text."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to read '{source}': {reason}")


class OutputWriteError(TextIOError):
    """Error writing transformed text."""

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"Failed to write '{target}': {reason}")


class ConfigurationError(PorcusError):
    """Invalid option value."""

    def __init__(self, option: str, reason: str) -> None:
        self.option = option
        self.reason = reason
        super().__init__(f"Invalid value for '{option}': {reason}")
