"""
Oracle dialect.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Final, Optional

from ..fragments import generate_inline_union, order_by_nulls_ansi
from ..metadata import DatabaseMetadata
from ..regex import REGEXP_LIKE
from .base import DatabaseProduct, DialectCapabilities, DialectProfile, NullCollation
from .dialect import Dialect

ORACLE_PROFILE: Final[DialectProfile] = DialectProfile(
    product=DatabaseProduct.ORACLE,
    capabilities=DialectCapabilities(
        allows_as=False,
        allows_from_query=True,
        allows_join_on=True,
        allows_regular_expression_in_where_clause=True,
        supports_grouping_sets=True,
        max_column_name_length=30,
        null_collation=NullCollation.HIGH,
    ),
    fallback_quote='"',
    inline=partial(generate_inline_union, from_clause=" from dual"),
    order_by_nulls=order_by_nulls_ansi,
    regex=REGEXP_LIKE,
)


class OracleDialect(Dialect):
    __slots__ = ()

    def __init__(self, metadata: Optional[DatabaseMetadata] = None, **capability_overrides: Any) -> None:
        super().__init__(ORACLE_PROFILE, metadata, **capability_overrides)
