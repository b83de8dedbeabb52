"""
Driver metadata consumed when a dialect is constructed.

Only the handful of facts a dialect needs are modelled; connections and
result sets stay with the caller.
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import Optional, Protocol


class DatabaseMetadata(Protocol):
    """
    Metadata probed from a live connection.

    ``identifier_quote_string`` may be ``None``, empty or blank when the driver
    does not know (or misreports) how identifiers are quoted.
    """

    @property
    def product_name(self) -> str: ...

    @property
    def product_version(self) -> Optional[str]: ...

    @property
    def identifier_quote_string(self) -> Optional[str]: ...

    @property
    def read_only(self) -> bool: ...

    @property
    def max_column_name_length(self) -> Optional[int]: ...


@dataclass(frozen=True)
class StaticMetadata:
    product_name: str
    product_version: Optional[str] = None
    identifier_quote_string: Optional[str] = None
    read_only: bool = False
    max_column_name_length: Optional[int] = None


def sqlite_metadata(connection: sqlite3.Connection, *, read_only: bool = False) -> StaticMetadata:
    """
    Probe an open ``sqlite3`` connection.
    """

    row = connection.execute("select sqlite_version()").fetchone()
    return StaticMetadata(
        product_name="SQLite",
        product_version=row[0] if row else None,
        identifier_quote_string='"',
        read_only=read_only,
    )
