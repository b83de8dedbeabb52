"""
SQLite dialect with minimal capabilities.
"""

from __future__ import annotations

from typing import Any, Final, Optional

from ..fragments import generate_inline_union
from ..metadata import DatabaseMetadata
from .base import DatabaseProduct, DialectCapabilities, DialectProfile, NullCollation
from .dialect import Dialect

# REGEXP needs a user function registered on the connection, so it is off.
SQLITE_PROFILE: Final[DialectProfile] = DialectProfile(
    product=DatabaseProduct.SQLITE,
    capabilities=DialectCapabilities(
        allows_as=True,
        allows_from_query=True,
        allows_join_on=True,
        allows_regular_expression_in_where_clause=False,
        supports_grouping_sets=False,
        null_collation=NullCollation.LOW,
    ),
    fallback_quote='"',
    inline=generate_inline_union,
    order_by_nulls=None,
)


class SQLiteDialect(Dialect):
    __slots__ = ()

    def __init__(self, metadata: Optional[DatabaseMetadata] = None, **capability_overrides: Any) -> None:
        super().__init__(SQLITE_PROFILE, metadata, **capability_overrides)
