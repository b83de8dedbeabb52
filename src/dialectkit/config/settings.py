"""
Dialect configuration sourced from DSNs and environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any

from ..dialects import Dialect, get_dialect
from ..dialects.base import DialectCapabilities
from ..errors import DialectConfigurationError
from ..metadata import StaticMetadata
from ..types import DatabaseProduct
from ..utils import get_logger
from .dsns import DSNConfig, parse_dsn

logger = get_logger("config")

_BACKEND_PRODUCTS = {
    "ads": DatabaseProduct.ADS,
    "advantage": DatabaseProduct.ADS,
    "oracle": DatabaseProduct.ORACLE,
    "mysql": DatabaseProduct.MYSQL,
    "mariadb": DatabaseProduct.MYSQL,
    "postgres": DatabaseProduct.POSTGRES,
    "postgresql": DatabaseProduct.POSTGRES,
    "sqlite": DatabaseProduct.SQLITE,
    "generic": DatabaseProduct.GENERIC,
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

_BOOLEAN_CAPABILITIES = frozenset(
    name
    for name in DialectCapabilities.flag_names()
    if isinstance(getattr(DialectCapabilities(), name), bool)
)


def _parse_bool(value: str, *, key: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise DialectConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


def _parse_int(value: str, *, key: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise DialectConfigurationError(f"Invalid integer value for '{key}': {value!r}") from exc


def _product_for_backend(backend: str) -> DatabaseProduct:
    try:
        return _BACKEND_PRODUCTS[backend]
    except KeyError as exc:
        raise DialectConfigurationError(f"Unsupported DSN scheme: {backend!r}") from exc


@dataclass
class DialectConfig:
    """
    Normalized settings for building a dialect without a live connection.
    """

    product: DatabaseProduct
    product_version: str | None = None
    identifier_quote: str | None = None
    read_only: bool = False
    max_column_name_length: int | None = None
    capability_overrides: dict[str, bool] = field(default_factory=dict)
    dsn: DSNConfig | None = None
    source: str | None = None

    @classmethod
    def from_dsn(cls, dsn: str, **kwargs: Any) -> "DialectConfig":
        """
        Build a config from a DSN such as ``oracle://host/db?supports_grouping_sets=false``.

        Query parameters that are not dialect settings (driver options) are ignored.
        """

        parsed = parse_dsn(dsn)
        query = dict(parsed.query)
        product = _product_for_backend(parsed.backend)

        read_only = _parse_bool(query.pop("read_only"), key="read_only") if "read_only" in query else False
        max_length = query.pop("max_column_name_length", None)
        overrides = {
            key: _parse_bool(query.pop(key), key=key)
            for key in sorted(set(query) & _BOOLEAN_CAPABILITIES)
        }
        overrides.update(kwargs.pop("capability_overrides", None) or {})

        return cls(
            product=product,
            product_version=kwargs.pop("product_version", query.pop("product_version", None)),
            identifier_quote=kwargs.pop("identifier_quote", query.pop("identifier_quote", None)),
            read_only=kwargs.pop("read_only", read_only),
            max_column_name_length=kwargs.pop(
                "max_column_name_length",
                _parse_int(max_length, key="max_column_name_length") if max_length is not None else None,
            ),
            capability_overrides=overrides,
            dsn=parsed,
            **kwargs,
        )

    @classmethod
    def from_env(cls, env_var: str, **kwargs: Any) -> "DialectConfig":
        """
        Build a config from an environment variable containing a DSN.
        """

        value = os.getenv(env_var)
        if not value:
            raise DialectConfigurationError(f"Environment variable {env_var} is not set")
        return cls.from_dsn(value, source=env_var, **kwargs)

    def redacted_dsn(self) -> str:
        if self.dsn:
            return self.dsn.redacted()
        return self.product.value

    def descriptive_label(self) -> str:
        redacted = self.redacted_dsn()
        if self.source:
            return f"{self.source} ({redacted})"
        return redacted

    def to_metadata(self) -> StaticMetadata:
        return StaticMetadata(
            product_name=self.product.value,
            product_version=self.product_version,
            identifier_quote_string=self.identifier_quote,
            read_only=self.read_only,
            max_column_name_length=self.max_column_name_length,
        )

    def build_dialect(self) -> Dialect:
        logger.debug("Building dialect from %s", self.descriptive_label())
        return get_dialect(self.product, self.to_metadata(), **self.capability_overrides)


def dialect_from_env(env_var: str, **kwargs: Any) -> Dialect:
    return DialectConfig.from_env(env_var, **kwargs).build_dialect()


def dialect_from_dsn(dsn: str, **kwargs: Any) -> Dialect:
    return DialectConfig.from_dsn(dsn, **kwargs).build_dialect()


__all__ = ["DialectConfig", "dialect_from_dsn", "dialect_from_env"]
