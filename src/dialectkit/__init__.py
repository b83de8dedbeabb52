"""
dialectkit public package initialization.

Dialects turn resolved column and value data into SQL text for a specific
database product: identifier and literal quoting, inline tables, null-aware
ordering and regular-expression predicates.
"""

from .config import DialectConfig, dialect_from_dsn, dialect_from_env  # noqa: F401
from .dialects import (
    AdsDialect,
    DatabaseProduct,
    Datatype,
    Dialect,
    DialectCapabilities,
    DialectProfile,
    GenericDialect,
    MySQLDialect,
    NullCollation,
    OracleDialect,
    PostgresDialect,
    SQLiteDialect,
    dialect_for_metadata,
    get_dialect,
)  # noqa: F401
from .errors import (
    DialectConfigurationError,
    DialectError,
    InvalidPatternError,
    MalformedLiteralError,
)  # noqa: F401
from .metadata import DatabaseMetadata, StaticMetadata, sqlite_metadata  # noqa: F401
from .regex import RegexTranslator, TranslatedRegex, translate_regex  # noqa: F401

__all__ = [
    "AdsDialect",
    "DatabaseMetadata",
    "DatabaseProduct",
    "Datatype",
    "Dialect",
    "DialectCapabilities",
    "DialectConfig",
    "DialectConfigurationError",
    "DialectError",
    "DialectProfile",
    "GenericDialect",
    "InvalidPatternError",
    "MalformedLiteralError",
    "MySQLDialect",
    "NullCollation",
    "OracleDialect",
    "PostgresDialect",
    "RegexTranslator",
    "SQLiteDialect",
    "StaticMetadata",
    "TranslatedRegex",
    "dialect_for_metadata",
    "dialect_from_dsn",
    "dialect_from_env",
    "get_dialect",
    "sqlite_metadata",
    "translate_regex",
]
