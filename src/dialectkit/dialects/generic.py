"""
Generic ANSI dialect used when the product is not recognized.
"""

from __future__ import annotations

from typing import Any, Final, Optional

from ..metadata import DatabaseMetadata
from .base import DatabaseProduct, DialectCapabilities, DialectProfile
from .dialect import Dialect

GENERIC_PROFILE: Final[DialectProfile] = DialectProfile(
    product=DatabaseProduct.GENERIC,
    capabilities=DialectCapabilities(),
)


class GenericDialect(Dialect):
    __slots__ = ()

    def __init__(self, metadata: Optional[DatabaseMetadata] = None, **capability_overrides: Any) -> None:
        super().__init__(GENERIC_PROFILE, metadata, **capability_overrides)
