"""
Advantage Database Server dialect.

Modelled on Oracle: constant rows need ``from dual``, column aliases take no
``AS`` and regular expressions go through ``REGEXP_LIKE``.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Final, Optional

from ..fragments import generate_inline_union
from ..metadata import DatabaseMetadata
from ..regex import REGEXP_LIKE
from .base import DatabaseProduct, DialectCapabilities, DialectProfile, NullCollation
from .dialect import Dialect

# Some ADS drivers report no identifier quote at all.
ADS_FALLBACK_QUOTE: Final[str] = "'"

ADS_PROFILE: Final[DialectProfile] = DialectProfile(
    product=DatabaseProduct.ADS,
    capabilities=DialectCapabilities(
        allows_as=False,
        allows_from_query=False,
        allows_join_on=True,
        requires_group_by_alias=True,
        requires_order_by_alias=True,
        requires_having_alias=True,
        allows_regular_expression_in_where_clause=True,
        supports_grouping_sets=True,
        null_collation=NullCollation.LOW,
    ),
    fallback_quote=ADS_FALLBACK_QUOTE,
    inline=partial(generate_inline_union, from_clause=" from dual"),
    order_by_nulls=None,
    regex=REGEXP_LIKE,
)


class AdsDialect(Dialect):
    __slots__ = ()

    def __init__(self, metadata: Optional[DatabaseMetadata] = None, **capability_overrides: Any) -> None:
        super().__init__(ADS_PROFILE, metadata, **capability_overrides)
