"""
Error handling module for formatting operations.

This module provides centralized handling of degenerate input: every
failure gets a short error ID, is logged, and is replaced by the
caller's fallback value instead of propagating.
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)


def handle_error(
    error: Exception,
    context: str = "",
    default: Any = None,
    level: int = logging.WARNING
) -> Any:
    """
    Log a formatting failure and return the fallback value.

    Generates an error ID, logs the error type, message and context at
    the requested level, and hands back ``default`` so the caller can
    return it directly.

    Args:
        error: Exception instance that was raised
        context: Optional context description (e.g., "while parsing instant")
            to help identify error source
        default: Value returned to the caller in place of a result
        level: Logging level for the report (default: WARNING)

    Returns:
        The ``default`` argument, unchanged

    Example:
        >>> try:
        ...     value = parse_amount(raw)
        ... except InvalidAmountError as e:
        ...     return handle_error(e, "in currency formatting", "0.00")

    Note:
        - Error ID is 6-digit hash for easy reference in logs
        - Traceback is attached only when DEBUG logging is enabled
        - Does not re-raise exception - assumes error is handled
    """
    # Generate 6-digit error ID from exception hash for tracking
    error_id = f"ERR-{hash(error) % 1000000}"

    logger.log(
        level,
        f"[{error_id}] {type(error).__name__} {context or 'n/a'}: {error}",
        exc_info=logger.isEnabledFor(logging.DEBUG)
    )
    return default
