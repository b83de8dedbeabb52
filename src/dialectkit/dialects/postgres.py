"""
PostgreSQL dialect.
"""

from __future__ import annotations

from typing import Any, Final, Optional

from ..fragments import generate_inline_values, order_by_nulls_ansi
from ..metadata import DatabaseMetadata
from ..regex import POSTGRES_ARE
from .base import DatabaseProduct, DialectCapabilities, DialectProfile, NullCollation
from .dialect import Dialect

POSTGRES_PROFILE: Final[DialectProfile] = DialectProfile(
    product=DatabaseProduct.POSTGRES,
    capabilities=DialectCapabilities(
        allows_as=True,
        allows_from_query=True,
        allows_join_on=True,
        allows_regular_expression_in_where_clause=True,
        supports_grouping_sets=True,
        max_column_name_length=63,
        null_collation=NullCollation.HIGH,
    ),
    fallback_quote='"',
    inline=generate_inline_values,
    order_by_nulls=order_by_nulls_ansi,
    regex=POSTGRES_ARE,
)


class PostgresDialect(Dialect):
    __slots__ = ()

    def __init__(self, metadata: Optional[DatabaseMetadata] = None, **capability_overrides: Any) -> None:
        super().__init__(POSTGRES_PROFILE, metadata, **capability_overrides)
