"""
Observability module.

Provides logging configuration and structured logging helpers.
"""

from search_indexer.observability.logger import configure_logging
from search_indexer.observability.log_utils import log_exception_with_context, safe_log_value

__all__ = [
    "configure_logging",
    "log_exception_with_context",
    "safe_log_value",
]
