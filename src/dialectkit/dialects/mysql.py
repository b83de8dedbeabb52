"""
MySQL dialect.

String literals escape backslashes, matching the server's default SQL mode.
"""

from __future__ import annotations

from typing import Any, Final, Optional

from ..fragments import generate_inline_union
from ..metadata import DatabaseMetadata
from ..quoting import quote_string_literal_backslash
from ..regex import REGEXP_LIKE
from .base import DatabaseProduct, DialectCapabilities, DialectProfile, NullCollation
from .dialect import Dialect

MYSQL_PROFILE: Final[DialectProfile] = DialectProfile(
    product=DatabaseProduct.MYSQL,
    capabilities=DialectCapabilities(
        allows_as=True,
        allows_from_query=True,
        allows_join_on=True,
        allows_regular_expression_in_where_clause=True,
        supports_grouping_sets=False,
        max_column_name_length=64,
        null_collation=NullCollation.LOW,
    ),
    fallback_quote="`",
    string_quoter=quote_string_literal_backslash,
    inline=generate_inline_union,
    order_by_nulls=None,
    regex=REGEXP_LIKE,
)


class MySQLDialect(Dialect):
    __slots__ = ()

    def __init__(self, metadata: Optional[DatabaseMetadata] = None, **capability_overrides: Any) -> None:
        super().__init__(MYSQL_PROFILE, metadata, **capability_overrides)
