"""
Utility helpers shared across dialectkit modules.
"""

from .logging import correlation_scope, get_logger

__all__ = ["correlation_scope", "get_logger"]
