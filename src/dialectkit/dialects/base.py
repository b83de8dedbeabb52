"""
Capability flags and per-product strategy selection.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Optional

from ..errors import DialectConfigurationError
from ..fragments import InlineGenerator, OrderByNulls, generate_inline_union, order_by_nulls_case
from ..quoting import StringQuoter, quote_string_literal
from ..regex import RegexFlavor
from ..types import DatabaseProduct, Datatype, NullCollation


@dataclass(frozen=True)
class DialectCapabilities:
    """
    Feature flags describing what a backend's SQL accepts.

    One instance is computed per dialect at construction and never changes.
    """

    allows_as: bool = True
    allows_from_query: bool = True
    allows_join_on: bool = False
    requires_group_by_alias: bool = False
    requires_order_by_alias: bool = False
    requires_having_alias: bool = False
    allows_regular_expression_in_where_clause: bool = False
    supports_grouping_sets: bool = False
    allows_ddl: bool = True
    max_column_name_length: Optional[int] = None
    null_collation: NullCollation = NullCollation.HIGH

    @property
    def allows_order_by_alias(self) -> bool:
        return self.requires_order_by_alias

    @classmethod
    def flag_names(cls) -> tuple[str, ...]:
        return tuple(item.name for item in fields(cls))

    def with_overrides(self, **overrides: Any) -> "DialectCapabilities":
        unknown = sorted(set(overrides) - set(self.flag_names()))
        if unknown:
            raise DialectConfigurationError(f"Unknown capability flags: {', '.join(unknown)}")
        return replace(self, **overrides)


@dataclass(frozen=True)
class DialectProfile:
    """
    Everything that distinguishes one product's SQL from another's.
    """

    product: DatabaseProduct
    capabilities: DialectCapabilities = field(default_factory=DialectCapabilities)
    fallback_quote: str = '"'
    string_quoter: StringQuoter = quote_string_literal
    inline: InlineGenerator = generate_inline_union
    # None: follow the null collation of the resolved capabilities
    order_by_nulls: Optional[OrderByNulls] = order_by_nulls_case
    regex: Optional[RegexFlavor] = None


__all__ = [
    "DatabaseProduct",
    "Datatype",
    "DialectCapabilities",
    "DialectProfile",
    "NullCollation",
]
