"""Package-specific exception types."""

from __future__ import annotations


class ParseError(ValueError):
    """Base class for parsing-related errors.

    Represents errors encountered while scanning Snudown HTML.
    """


class MalformedInputError(ParseError):
    """Raised when the input breaks an assumption of the scanner.

    Covers attribute scans that run off the end of a tag, escapes cut off by
    the end of input, and structural tags that close something never opened.

    Args:
        message: Description of the problem.
        position: Zero-based cursor position where the problem was detected.
    """

    def __init__(self, message: str, position: int):
        self.message = message
        self.position = position
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return f"Malformed input at position {self.position}: {self.message}"
