"""
Exception classes for column-align.

This module defines all custom exceptions used throughout the aligner,
organized in a hierarchy for easy handling.
"""

from typing import Optional


class AlignError(Exception):
    """Base exception for all alignment errors."""

    pass


class ConfigError(AlignError):
    """Configuration error.

    Raised when there's an issue with the configuration,
    such as missing required options or invalid values.

    Attributes:
        field: Name of the offending configuration field, if known
        message: Description of the error
    """

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        self.message = message
        if field:
            super().__init__(f"{field}: {message}")
        else:
            super().__init__(message)


class InvalidSeparatorError(ConfigError):
    """The field separator is empty."""

    def __init__(self, field: str = "separator"):
        super().__init__("separator must be a non-empty string", field)


class InvalidColumnError(ConfigError):
    """A column number is not a positive integer.

    Column numbers used by the filter and by justification overrides
    are 1-based.

    Attributes:
        column: The rejected column number
    """

    def __init__(self, column: int, field: str = "columns"):
        self.column = column
        super().__init__(f"column numbers start at 1, got {column}", field)


class InvalidJustificationError(ConfigError):
    """Unknown justification name.

    Attributes:
        value: The rejected name
    """

    def __init__(self, value: str, field: str = "justification"):
        self.value = value
        super().__init__(
            f"unknown justification '{value}' (expected left, right or center)",
            field,
        )
