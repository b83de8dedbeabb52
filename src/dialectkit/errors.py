"""
Error hierarchy for dialectkit.
"""

from __future__ import annotations

from typing import Any


class DialectError(Exception):
    """Base error for dialect-related failures."""


class DialectConfigurationError(DialectError):
    """Raised when a dialect profile, capability override or config value is invalid."""


class InvalidPatternError(DialectError, ValueError):
    """
    Raised when a reference regular expression cannot be translated.

    Dialects catch this and report the predicate as unsupported.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid regular expression {pattern!r}: {reason}")


class MalformedLiteralError(DialectError, ValueError):
    """
    Raised when a value cannot be rendered as a literal of the requested type.
    """

    def __init__(self, value: Any, datatype: str) -> None:
        self.value = value
        self.datatype = datatype
        super().__init__(f"Illegal {datatype.upper()} literal: {value!r}")
