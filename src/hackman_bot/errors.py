"""
hackman_bot.errors — Custom exception classes
=============================================

Defines the exception hierarchy for protocol and callback errors.
Each exception stores full context for structured logging.
"""

from __future__ import annotations
from typing import Any, Optional

from .error_formatter import format_error_block


class HackManBotError(Exception):
    """Base exception for all Hack Man bot package errors."""
    pass


class ProtocolError(HackManBotError):
    """
    A single input line could not be applied.

    Recoverable: the runner skips the line and Game State is left
    unchanged, unless strict mode is enabled.
    """

    error_type = "PROTOCOL_ERROR"

    def __init__(self, message: str, line: Optional[str] = None):
        self.line = line
        super().__init__(message)

    def format_error_log(self) -> str:
        return format_error_block(
            error_type=self.error_type,
            source="line dispatcher",
            line=self.line,
            details=[str(self)],
        )


class MalformedToken(ProtocolError):
    """Raised when a cell token or numeric value does not match the grammar."""

    error_type = "MALFORMED_TOKEN"

    def __init__(self, token: str, reason: str, line: Optional[str] = None):
        self.token = token
        self.reason = reason
        super().__init__(f"Malformed token {token!r}: {reason}", line=line)


class DimensionMismatch(ProtocolError):
    """Raised when a field's cell count disagrees with the declared dimensions."""

    error_type = "DIMENSION_MISMATCH"

    def __init__(
        self,
        cell_count: int,
        width: int,
        height: Optional[int] = None,
        line: Optional[str] = None,
    ):
        self.cell_count = cell_count
        self.width = width
        self.height = height
        if height:
            expected = f"{width}x{height}={width * height} cells"
        else:
            expected = f"a positive multiple of width {width}"
        super().__init__(
            f"Field has {cell_count} cells, expected {expected}", line=line
        )


class IncompleteLine(ProtocolError):
    """Raised when a command has fewer tokens than its verb requires."""

    error_type = "INCOMPLETE_LINE"

    def __init__(self, verb: str, expected: int, received: int,
                 line: Optional[str] = None):
        self.verb = verb
        self.expected = expected
        self.received = received
        super().__init__(
            f"'{verb}' needs {expected} tokens, got {received}", line=line
        )


class InvalidResponseError(HackManBotError):
    """Raised when a decision callback returns a value of the wrong type."""

    def __init__(self, callback_name: str, expected: str, raw_output: Any):
        self.callback_name = callback_name
        self.expected = expected
        self.raw_output = raw_output
        self.raw_output_type = type(raw_output).__name__
        super().__init__(
            f"Callback '{callback_name}' returned {self.raw_output_type} "
            f"instead of {expected}"
        )

    def format_error_log(self) -> str:
        return format_error_block(
            error_type="INVALID_RESPONSE",
            source=f"callback {self.callback_name}",
            line=None,
            details=[
                f"Expected {self.expected}, got {self.raw_output_type}",
                f"Raw output: {self.raw_output!r}",
            ],
        )
