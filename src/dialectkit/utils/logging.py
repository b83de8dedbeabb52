"""Structured logging helpers for dialectkit."""

from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

_ROOT = "dialectkit"
_DIALECT_PREFIX = f"{_ROOT}.dialects."

_correlation_id: ContextVar[str | None] = ContextVar("dialectkit_correlation_id", default=None)


class DialectContextFilter(logging.Filter):
    """
    Stamp records with the active correlation id and the dialect product.

    ``dialect`` is taken from the logger name (``dialectkit.dialects.<product>``)
    and is ``-`` for records from shared helpers.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id()
        if record.name.startswith(_DIALECT_PREFIX):
            record.dialect = record.name[len(_DIALECT_PREFIX):]
        else:
            record.dialect = "-"
        return True


def configure_logging(level: int = logging.INFO) -> None:
    logger = logging.getLogger(_ROOT)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(correlation_id)s | %(dialect)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    handler.addFilter(DialectContextFilter())
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"{_ROOT}.{name}")


def get_correlation_id() -> str:
    return _correlation_id.get() or "-"


@contextmanager
def correlation_scope(value: Optional[str] = None) -> Iterator[str]:
    """
    Tag every dialectkit record emitted inside the block with one id.

    Callers wrap the generation of a statement so quote fallbacks and rejected
    regular expressions can be traced back to it. The previous id is restored
    on exit.
    """

    token_value = value or uuid.uuid4().hex
    token = _correlation_id.set(token_value)
    try:
        yield token_value
    finally:
        _correlation_id.reset(token)
