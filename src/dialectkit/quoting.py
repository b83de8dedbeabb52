"""
Identifier and literal quoting shared by every dialect.

Literal writers append to a text buffer (anything with ``write``) so callers
can assemble larger statements without intermediate strings.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Callable, Optional, Protocol

from .errors import DialectConfigurationError, MalformedLiteralError
from .types import Datatype
from .utils import get_logger

logger = get_logger("quoting")


class TextBuffer(Protocol):
    def write(self, text: str, /) -> int: ...


StringQuoter = Callable[[TextBuffer, str], None]


# ---------------------------------------------------------------------- #
# Identifiers
# ---------------------------------------------------------------------- #
def resolve_identifier_quote(reported: Optional[str], fallback: str) -> str:
    """
    Pick the identifier quote token for a dialect.

    Drivers report an empty or blank string when they do not support quoting,
    and some report nothing at all even though the engine does. In either case
    the dialect's fallback is used so an empty quote never reaches SQL.
    """

    if not fallback or not fallback.strip():
        raise DialectConfigurationError("Fallback identifier quote must be non-empty")
    if reported is None or not reported.strip():
        logger.info(
            "Metadata reported no identifier quote; using fallback %r",
            fallback,
            extra={"reported_quote": reported},
        )
        return fallback
    return reported.strip()


def quote_identifier(quote: str, name: str) -> str:
    if len(name) >= 2 * len(quote) and name.startswith(quote) and name.endswith(quote):
        return name
    escaped = name.replace(quote, quote + quote)
    return f"{quote}{escaped}{quote}"


def quote_qualified(quote: str, *names: Optional[str]) -> str:
    """
    Quote a dotted name such as ``schema.table.column``; empty parts are skipped.
    """

    parts = [quote_identifier(quote, name) for name in names if name]
    if not parts:
        raise ValueError("At least one non-empty identifier is required")
    return ".".join(parts)


# ---------------------------------------------------------------------- #
# Strings
# ---------------------------------------------------------------------- #
def quote_string_literal(buf: TextBuffer, value: str) -> None:
    buf.write("'")
    buf.write(value.replace("'", "''"))
    buf.write("'")


def quote_string_literal_backslash(buf: TextBuffer, value: str) -> None:
    """
    Quote for engines that treat backslash as an escape inside string literals.
    """

    buf.write("'")
    buf.write(value.replace("\\", "\\\\").replace("'", "''"))
    buf.write("'")


# ---------------------------------------------------------------------- #
# Dates and times
# ---------------------------------------------------------------------- #
_DATE_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$", re.ASCII)
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{1,2}):(\d{1,2})$", re.ASCII)
_TIMESTAMP_RE = re.compile(
    r"^(\d{4})-(\d{1,2})-(\d{1,2}) (\d{1,2}):(\d{1,2}):(\d{1,2})(?:\.(\d{1,9}))?$",
    re.ASCII,
)


def _parse_date(value: str) -> date | None:
    match = _DATE_RE.match(value)
    if match is None:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _parse_timestamp(value: str) -> datetime | None:
    match = _TIMESTAMP_RE.match(value)
    if match is None:
        return None
    year, month, day, hour, minute, second = (int(part) for part in match.groups()[:6])
    fraction = match.group(7) or "0"
    # nanosecond precision is truncated to what datetime can hold
    microsecond = int(fraction[:6].ljust(6, "0"))
    try:
        return datetime(year, month, day, hour, minute, second, microsecond)
    except ValueError:
        return None


def _parse_time(value: str) -> time | None:
    match = _TIME_RE.match(value)
    if match is None:
        return None
    hour, minute, second = (int(part) for part in match.groups())
    try:
        return time(hour, minute, second)
    except ValueError:
        return None


def parse_date_value(value: str) -> date:
    """
    Parse a date literal whose textual format is not certain.

    Some drivers hand back a timestamp even when a date was requested, so the
    value is tried as a plain date first and as a timestamp second, keeping
    only the date part. The order matters: ``2024-03-01`` must never be read
    as a timestamp.
    """

    text = value.strip()
    parsed = _parse_date(text)
    if parsed is not None:
        return parsed
    stamp = _parse_timestamp(text)
    if stamp is not None:
        return stamp.date()
    raise MalformedLiteralError(value, Datatype.DATE.value)


def quote_date_literal(buf: TextBuffer, value: str, string_quoter: StringQuoter = quote_string_literal) -> None:
    parsed = parse_date_value(value)
    buf.write("DATE ")
    string_quoter(buf, parsed.isoformat())


def quote_time_literal(buf: TextBuffer, value: str, string_quoter: StringQuoter = quote_string_literal) -> None:
    if _parse_time(value.strip()) is None:
        raise MalformedLiteralError(value, Datatype.TIME.value)
    buf.write("TIME ")
    string_quoter(buf, value.strip())


def quote_timestamp_literal(
    buf: TextBuffer, value: str, string_quoter: StringQuoter = quote_string_literal
) -> None:
    if _parse_timestamp(value.strip()) is None:
        raise MalformedLiteralError(value, Datatype.TIMESTAMP.value)
    buf.write("TIMESTAMP ")
    string_quoter(buf, value.strip())


# ---------------------------------------------------------------------- #
# Numbers and booleans
# ---------------------------------------------------------------------- #
# ASCII digits only: Python also accepts "1_000" and non-Latin digits, SQL does not.
_NUMERIC_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$", re.ASCII)
_INTEGER_RE = re.compile(r"^[+-]?\d+$", re.ASCII)


def quote_numeric_literal(buf: TextBuffer, value: str) -> None:
    text = value.strip()
    if _NUMERIC_RE.match(text) is None:
        raise MalformedLiteralError(value, Datatype.NUMERIC.value)
    buf.write(text)


def quote_integer_literal(buf: TextBuffer, value: str) -> None:
    text = value.strip()
    if _INTEGER_RE.match(text) is None:
        raise MalformedLiteralError(value, Datatype.INTEGER.value)
    buf.write(text)


def quote_boolean_literal(buf: TextBuffer, value: str) -> None:
    text = value.strip()
    if text.lower() not in ("true", "false"):
        raise MalformedLiteralError(value, Datatype.BOOLEAN.value)
    buf.write(text.upper())


def quote_value(
    buf: TextBuffer,
    value: Optional[str],
    datatype: Datatype | str,
    string_quoter: StringQuoter = quote_string_literal,
) -> None:
    """
    Write ``value`` as a literal of ``datatype``; ``None`` becomes ``null``.
    """

    if value is None:
        buf.write("null")
        return
    kind = Datatype.from_name(datatype)
    if kind is Datatype.STRING:
        string_quoter(buf, value)
    elif kind is Datatype.NUMERIC:
        quote_numeric_literal(buf, value)
    elif kind is Datatype.INTEGER:
        quote_integer_literal(buf, value)
    elif kind is Datatype.BOOLEAN:
        quote_boolean_literal(buf, value)
    elif kind is Datatype.DATE:
        quote_date_literal(buf, value, string_quoter)
    elif kind is Datatype.TIME:
        quote_time_literal(buf, value, string_quoter)
    else:
        quote_timestamp_literal(buf, value, string_quoter)
