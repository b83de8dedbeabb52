"""
Dialect instances combining a product profile with probed driver metadata.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from ..errors import InvalidPatternError
from ..fragments import OrderByNulls, Row, order_by_nulls_native, order_by_plain
from ..metadata import DatabaseMetadata
from ..quoting import (
    TextBuffer,
    quote_boolean_literal,
    quote_date_literal,
    quote_identifier,
    quote_numeric_literal,
    quote_qualified,
    quote_time_literal,
    quote_timestamp_literal,
    quote_value,
    resolve_identifier_quote,
)
from ..types import DatabaseProduct, Datatype
from ..utils import get_logger
from .base import DialectCapabilities, DialectProfile


class Dialect:
    """
    SQL generation strategy for one database product.

    Capabilities and the identifier quote are resolved once in ``__init__``;
    every other method is a pure function of its arguments and that state, so
    a constructed dialect may be shared freely between threads.
    """

    __slots__ = ("_profile", "_capabilities", "_quote", "_order_by_nulls", "_metadata", "logger")

    def __init__(
        self,
        profile: DialectProfile,
        metadata: Optional[DatabaseMetadata] = None,
        **capability_overrides: Any,
    ) -> None:
        self.logger = get_logger(f"dialects.{profile.product.value}")
        self._profile = profile
        self._metadata = metadata
        self._capabilities = self._deduce_capabilities(profile, metadata, capability_overrides)
        reported = metadata.identifier_quote_string if metadata is not None else None
        self._quote = resolve_identifier_quote(reported, profile.fallback_quote)
        self._order_by_nulls: OrderByNulls = profile.order_by_nulls or order_by_nulls_native(
            self._capabilities.null_collation
        )
        self.logger.debug(
            "Initialized %s dialect (quote=%r)",
            profile.product.value,
            self._quote,
            extra={"capabilities": self._capabilities},
        )

    @staticmethod
    def _deduce_capabilities(
        profile: DialectProfile,
        metadata: Optional[DatabaseMetadata],
        overrides: dict[str, Any],
    ) -> DialectCapabilities:
        probed: dict[str, Any] = {}
        if metadata is not None:
            if metadata.read_only:
                probed["allows_ddl"] = False
            if metadata.max_column_name_length:
                probed["max_column_name_length"] = metadata.max_column_name_length
        probed.update(overrides)
        if not probed:
            return profile.capabilities
        return profile.capabilities.with_overrides(**probed)

    # ------------------------------------------------------------------ #
    # Read-only state
    # ------------------------------------------------------------------ #
    @property
    def name(self) -> str:
        return self._profile.product.value

    @property
    def product(self) -> DatabaseProduct:
        return self._profile.product

    @property
    def profile(self) -> DialectProfile:
        return self._profile

    @property
    def metadata(self) -> Optional[DatabaseMetadata]:
        return self._metadata

    @property
    def capabilities(self) -> DialectCapabilities:
        return self._capabilities

    @property
    def identifier_quote(self) -> str:
        return self._quote

    @property
    def allows_as(self) -> bool:
        return self._capabilities.allows_as

    @property
    def allows_from_query(self) -> bool:
        return self._capabilities.allows_from_query

    @property
    def allows_join_on(self) -> bool:
        return self._capabilities.allows_join_on

    @property
    def requires_group_by_alias(self) -> bool:
        return self._capabilities.requires_group_by_alias

    @property
    def requires_order_by_alias(self) -> bool:
        return self._capabilities.requires_order_by_alias

    @property
    def requires_having_alias(self) -> bool:
        return self._capabilities.requires_having_alias

    @property
    def allows_order_by_alias(self) -> bool:
        return self._capabilities.allows_order_by_alias

    @property
    def allows_regular_expression_in_where_clause(self) -> bool:
        return self._capabilities.allows_regular_expression_in_where_clause

    @property
    def supports_grouping_sets(self) -> bool:
        return self._capabilities.supports_grouping_sets

    # ------------------------------------------------------------------ #
    # Quoting
    # ------------------------------------------------------------------ #
    def quote_identifier(self, identifier: str) -> str:
        return quote_identifier(self._quote, identifier)

    def quote_qualified(self, *names: Optional[str]) -> str:
        return quote_qualified(self._quote, *names)

    def quote_string_literal(self, buf: TextBuffer, value: str) -> None:
        self._profile.string_quoter(buf, value)

    def quote_date_literal(self, buf: TextBuffer, value: str) -> None:
        quote_date_literal(buf, value, self._profile.string_quoter)

    def quote_time_literal(self, buf: TextBuffer, value: str) -> None:
        quote_time_literal(buf, value, self._profile.string_quoter)

    def quote_timestamp_literal(self, buf: TextBuffer, value: str) -> None:
        quote_timestamp_literal(buf, value, self._profile.string_quoter)

    def quote_numeric_literal(self, buf: TextBuffer, value: str) -> None:
        quote_numeric_literal(buf, value)

    def quote_boolean_literal(self, buf: TextBuffer, value: str) -> None:
        quote_boolean_literal(buf, value)

    def quote(self, buf: TextBuffer, value: Optional[str], datatype: Datatype | str) -> None:
        quote_value(buf, value, datatype, self._profile.string_quoter)

    # ------------------------------------------------------------------ #
    # Fragments
    # ------------------------------------------------------------------ #
    def generate_inline(
        self,
        column_names: Sequence[str],
        column_types: Sequence[str],
        rows: Sequence[Row],
    ) -> str:
        return self._profile.inline(self, column_names, column_types, rows)

    def generate_order_by_nulls(self, expr: str, ascending: bool, nulls_last: bool) -> str:
        return self._order_by_nulls(expr, ascending, nulls_last)

    def generate_order_item(self, expr: str, nullable: bool, ascending: bool, nulls_last: bool) -> str:
        if nullable:
            return self.generate_order_by_nulls(expr, ascending, nulls_last)
        return order_by_plain(expr, ascending)

    def generate_regular_expression(self, source: str, pattern: str) -> Optional[str]:
        """
        Return a predicate testing ``source`` against a reference ``pattern``.

        ``None`` means the dialect cannot express the predicate and the caller
        should evaluate it outside SQL instead.
        """

        flavor = self._profile.regex
        if flavor is None or not self._capabilities.allows_regular_expression_in_where_clause:
            return None
        try:
            return flavor.generate(source, pattern, self._profile.string_quoter)
        except InvalidPatternError as exc:
            self.logger.debug(
                "Regular expression not pushed down: %s",
                exc.reason,
                extra={"pattern": pattern},
            )
            return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(product={self.name!r}, quote={self._quote!r})"
