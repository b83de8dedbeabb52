"""
Higher-level SQL fragments: inline virtual tables and null-aware ORDER BY items.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Callable, Optional, Sequence

from .types import Datatype, NullCollation

if TYPE_CHECKING:
    from .dialects.dialect import Dialect


Row = Sequence[Optional[str]]
InlineGenerator = Callable[["Dialect", Sequence[str], Sequence[str], Sequence[Row]], str]
OrderByNulls = Callable[[str, bool, bool], str]


# ---------------------------------------------------------------------- #
# Inline tables
# ---------------------------------------------------------------------- #
def _check_shape(column_names: Sequence[str], column_types: Sequence[str], rows: Sequence[Row]) -> list[Datatype]:
    if len(column_types) != len(column_names):
        raise ValueError(
            f"Expected {len(column_names)} column types, got {len(column_types)}"
        )
    if not rows:
        raise ValueError("An inline table needs at least one row")
    for index, row in enumerate(rows):
        if len(row) != len(column_names):
            raise ValueError(
                f"Row {index} has {len(row)} values, expected {len(column_names)}"
            )
    return [Datatype.from_name(column_type) for column_type in column_types]


def generate_inline_union(
    dialect: "Dialect",
    column_names: Sequence[str],
    column_types: Sequence[str],
    rows: Sequence[Row],
    *,
    from_clause: str | None = None,
    cast: bool = False,
) -> str:
    """
    Render rows as ``select ... union all select ...``.

    ``from_clause`` is appended to every branch for engines that need a FROM
    even for constant rows. With ``cast`` set, string values are wrapped in
    ``CAST(... AS VARCHAR(n))`` using the longest value in the column, since
    some engines type a column from its first row and truncate the rest.
    """

    datatypes = _check_shape(column_names, column_types, rows)
    max_lengths: list[int | None] = [None] * len(column_names)
    if cast:
        for position, datatype in enumerate(datatypes):
            if datatype is not Datatype.STRING:
                continue
            lengths = [len(row[position]) for row in rows if row[position] is not None]
            if lengths:
                max_lengths[position] = max(lengths)

    buf = io.StringIO()
    for row_index, row in enumerate(rows):
        if row_index > 0:
            buf.write(" union all ")
        buf.write("select ")
        for position, value in enumerate(row):
            if position > 0:
                buf.write(", ")
            max_length = max_lengths[position]
            if max_length is not None:
                buf.write("CAST(")
                dialect.quote(buf, value, datatypes[position])
                buf.write(f" AS VARCHAR({max_length}))")
            else:
                dialect.quote(buf, value, datatypes[position])
            buf.write(" as " if dialect.capabilities.allows_as else " ")
            buf.write(dialect.quote_identifier(column_names[position]))
        if from_clause:
            buf.write(from_clause)
    return buf.getvalue()


def generate_inline_values(
    dialect: "Dialect",
    column_names: Sequence[str],
    column_types: Sequence[str],
    rows: Sequence[Row],
    *,
    alias: str = "t",
) -> str:
    """
    Render rows as ``SELECT * FROM (VALUES (...), ...) AS "t" ("c1", ...)``.
    """

    datatypes = _check_shape(column_names, column_types, rows)
    buf = io.StringIO()
    buf.write("SELECT * FROM (VALUES ")
    for row_index, row in enumerate(rows):
        if row_index > 0:
            buf.write(", ")
        buf.write("(")
        for position, value in enumerate(row):
            if position > 0:
                buf.write(", ")
            dialect.quote(buf, value, datatypes[position])
        buf.write(")")
    buf.write(") AS ")
    buf.write(dialect.quote_identifier(alias))
    buf.write(" (")
    buf.write(", ".join(dialect.quote_identifier(name) for name in column_names))
    buf.write(")")
    return buf.getvalue()


# ---------------------------------------------------------------------- #
# Null ordering
# ---------------------------------------------------------------------- #
def _direction(ascending: bool) -> str:
    return " ASC" if ascending else " DESC"


def order_by_plain(expr: str, ascending: bool) -> str:
    return expr + _direction(ascending)


def order_by_nulls_ansi(expr: str, ascending: bool, nulls_last: bool) -> str:
    return expr + _direction(ascending) + (" NULLS LAST" if nulls_last else " NULLS FIRST")


def order_by_nulls_case(expr: str, ascending: bool, nulls_last: bool) -> str:
    """
    Emulate NULLS FIRST/LAST with a leading CASE sort key.
    """

    null_key, value_key = (1, 0) if nulls_last else (0, 1)
    return (
        f"CASE WHEN {expr} IS NULL THEN {null_key} ELSE {value_key} END, "
        + expr
        + _direction(ascending)
    )


def order_by_nulls_native(collation: NullCollation) -> OrderByNulls:
    """
    Strategy for engines without NULLS FIRST/LAST syntax.

    The plain direction keyword is emitted when the engine already places
    NULLs where requested; otherwise the CASE emulation is used.
    """

    def generate(expr: str, ascending: bool, nulls_last: bool) -> str:
        if collation.nulls_last(ascending) == nulls_last:
            return order_by_plain(expr, ascending)
        return order_by_nulls_case(expr, ascending, nulls_last)

    generate.__name__ = f"order_by_nulls_native_{collation.value}"
    return generate
