"""
Enumerations shared by the quoting, fragment and dialect modules.
"""

from __future__ import annotations

import enum

from .errors import DialectConfigurationError


class DatabaseProduct(str, enum.Enum):
    """Database products with a dedicated dialect profile."""

    GENERIC = "generic"
    ADS = "ads"
    ORACLE = "oracle"
    MYSQL = "mysql"
    POSTGRES = "postgres"
    SQLITE = "sqlite"

    @classmethod
    def from_name(cls, product_name: str | None) -> "DatabaseProduct":
        """
        Map a driver-reported product name onto a known product.

        Unrecognized names fall back to ``GENERIC``.
        """

        if not product_name:
            return cls.GENERIC
        upper = product_name.strip().upper()
        if upper == "ADS":
            return cls.ADS
        for token, product in _PRODUCT_TOKENS:
            if token in upper:
                return product
        return cls.GENERIC


_PRODUCT_TOKENS = (
    ("ADVANTAGE", DatabaseProduct.ADS),
    ("ORACLE", DatabaseProduct.ORACLE),
    ("MYSQL", DatabaseProduct.MYSQL),
    ("MARIADB", DatabaseProduct.MYSQL),
    ("POSTGRES", DatabaseProduct.POSTGRES),
    ("SQLITE", DatabaseProduct.SQLITE),
)


class Datatype(str, enum.Enum):
    """Logical column types understood by the literal quoter."""

    STRING = "string"
    NUMERIC = "numeric"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    DATE = "date"
    TIME = "time"
    TIMESTAMP = "timestamp"

    @classmethod
    def from_name(cls, name: "str | Datatype") -> "Datatype":
        if isinstance(name, Datatype):
            return name
        try:
            return cls(name.strip().lower())
        except ValueError as exc:
            raise DialectConfigurationError(f"Unknown datatype: {name!r}") from exc


class NullCollation(enum.Enum):
    """
    Where an engine places NULLs in ORDER BY when no null ordering is spelled out.
    """

    LOW = "low"
    HIGH = "high"
    FIRST = "first"
    LAST = "last"

    def nulls_last(self, ascending: bool) -> bool:
        """Return True if NULLs naturally sort last for the given direction."""
        if self is NullCollation.FIRST:
            return False
        if self is NullCollation.LAST:
            return True
        if self is NullCollation.HIGH:
            return ascending
        return not ascending
