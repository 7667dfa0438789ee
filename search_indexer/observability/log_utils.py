"""
Logging utilities for safe structured logging.

Keeps ``extra`` context small and printable: job payloads can carry whole
documents and embedding vectors, neither of which belongs in a log line.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Safely convert any value to a short string for logging.

    Sequences and mappings are summarised by size; long strings are truncated.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, bytes):
            val_str = value.decode("utf-8", errors="replace")
        elif isinstance(value, str):
            val_str = value
        elif isinstance(value, (list, tuple)):
            val_str = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            val_str = f"dict({len(value)} keys)"
        else:
            val_str = str(value)

        if len(val_str) > max_length:
            return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
        return val_str
    except Exception as e:  # pylint: disable=broad-except
        return f"<unable to log: {type(e).__name__}>"


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log an exception with traceback and structured context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context (values are passed through safe_log_value)
    """
    safe_context = {key: safe_log_value(val) for key, val in context.items()}
    safe_context.update(
        {
            "error_type": type(exc).__name__,
            "error_msg": safe_log_value(str(exc)),
        }
    )
    logger.error(message, exc_info=exc, extra=safe_context)
