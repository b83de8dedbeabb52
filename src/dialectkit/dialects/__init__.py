"""
Dialect registry.
"""

from __future__ import annotations

from typing import Any, Optional

from ..metadata import DatabaseMetadata
from .ads import AdsDialect
from .base import DatabaseProduct, Datatype, DialectCapabilities, DialectProfile, NullCollation
from .dialect import Dialect
from .generic import GenericDialect
from .mysql import MySQLDialect
from .oracle import OracleDialect
from .postgres import PostgresDialect
from .sqlite import SQLiteDialect

_DIALECTS: dict[DatabaseProduct, type[Dialect]] = {
    DatabaseProduct.GENERIC: GenericDialect,
    DatabaseProduct.ADS: AdsDialect,
    DatabaseProduct.ORACLE: OracleDialect,
    DatabaseProduct.MYSQL: MySQLDialect,
    DatabaseProduct.POSTGRES: PostgresDialect,
    DatabaseProduct.SQLITE: SQLiteDialect,
}


def get_dialect(
    product: DatabaseProduct | str,
    metadata: Optional[DatabaseMetadata] = None,
    **capability_overrides: Any,
) -> Dialect:
    """
    Build the dialect for ``product``; unknown names get the generic dialect.
    """

    if not isinstance(product, DatabaseProduct):
        try:
            product = DatabaseProduct(product.strip().lower())
        except ValueError:
            product = DatabaseProduct.from_name(product)
    return _DIALECTS[product](metadata, **capability_overrides)


def dialect_for_metadata(metadata: DatabaseMetadata, **capability_overrides: Any) -> Dialect:
    """
    Pick the dialect from the product name the driver reports.
    """

    product = DatabaseProduct.from_name(metadata.product_name)
    return get_dialect(product, metadata, **capability_overrides)


__all__ = [
    "AdsDialect",
    "DatabaseProduct",
    "Datatype",
    "Dialect",
    "DialectCapabilities",
    "DialectProfile",
    "GenericDialect",
    "MySQLDialect",
    "NullCollation",
    "OracleDialect",
    "PostgresDialect",
    "SQLiteDialect",
    "dialect_for_metadata",
    "get_dialect",
]
