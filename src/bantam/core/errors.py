"""
Error types for Bantam configuration, expression loading, and parsing.

Tokenizing never raises: unrecognised characters are skipped and the end
of input is reported as ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class BantamError(Exception):
    """Base exception for all Bantam errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ConfigError(BantamError):
    """
    Raised when bantam.toml cannot be used.

    Examples:
    - Unreadable file
    - Invalid TOML syntax
    - Unknown log level or negative token limit
    """

    pass


class ExpressionLoadError(BantamError):
    """
    Raised when a serialized expression tree is invalid.

    Examples:
    - Malformed JSON
    - Unknown node kind
    - Missing child (e.g. an assignment without a right-hand side)
    - Operator that is not a punctuator
    """

    pass


class ParseError(BantamError):
    """
    Raised by parser implementations when a token stream is not an expression.

    Examples:
    - Unexpected token
    - Unmatched parenthesis
    - Assignment to something other than a name
    """

    pass


@dataclass
class ErrorContext:
    """
    Location of an error inside a file.

    Attributes:
        file: Path to the file being read
        line: Optional line number (1-indexed)
        column: Optional column number (1-indexed)
    """

    file: Path
    line: int | None = None
    column: int | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "bantam.toml:3:9"
        """
        location = str(self.file)
        if self.line is not None:
            location += f":{self.line}"
            if self.column is not None:
                location += f":{self.column}"
        return location


def make_config_error(
    message: str,
    file: Path,
    line: int | None = None,
    column: int | None = None,
) -> ConfigError:
    """
    Helper to create a ConfigError with context.

    Args:
        message: Error description
        file: Config file path
        line: Optional line number (1-indexed)
        column: Optional column number (1-indexed)

    Returns:
        ConfigError with context attached
    """
    context = ErrorContext(file=file, line=line, column=column)
    return ConfigError(message, context)
