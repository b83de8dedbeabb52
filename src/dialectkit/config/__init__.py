"""
Dialect configuration helpers.
"""

from .dsns import DSNConfig, parse_dsn
from .settings import DialectConfig, dialect_from_dsn, dialect_from_env

__all__ = ["DSNConfig", "DialectConfig", "dialect_from_dsn", "dialect_from_env", "parse_dsn"]
