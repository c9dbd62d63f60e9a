"""
Standardized error handling utilities for the chart engine.
Provides consistent error handling patterns and logging across all modules.

Malformed cells and unresolvable years are not errors: they degrade to
zero or to an empty result inside the engine. The helpers here cover the
unexpected failures that remain, so the public entry points can still
hand back a well-formed structure.
"""

import logging
from functools import wraps
from typing import Any, Callable, Optional

logger = logging.getLogger('statchart.error_handler')


class ErrorSeverity:
    """Error severity levels for consistent logging and handling."""
    CRITICAL = "critical"  # Caller cannot continue
    HIGH = "error"        # A chart could not be produced
    MEDIUM = "warning"    # Degraded output, still usable
    LOW = "info"          # Expected behaviour worth recording


class ChartEngineError(Exception):
    """Base exception for chart engine failures."""
    pass


class RenderError(ChartEngineError):
    """Custom exception for chart rendering failures."""
    pass


def log_error_with_context(
    error: Exception,
    context: str,
    severity: str = ErrorSeverity.MEDIUM,
    additional_info: Optional[dict] = None
) -> None:
    """
    Log an error with consistent formatting and context information.

    Args:
        error: The exception that occurred
        context: Description of what was being attempted
        severity: Error severity level
        additional_info: Additional context information
    """
    message = "Error in %s: %s: %s"
    args = [context, type(error).__name__, error]
    if additional_info:
        message += " | %s"
        args.append(", ".join(f"{k}={v}" for k, v in additional_info.items()))

    log_method = getattr(logger, severity, logger.error)
    log_method(message, *args, exc_info=severity in (ErrorSeverity.HIGH, ErrorSeverity.CRITICAL))


def handle_chart_error(fallback: Callable[[], Any]) -> Callable:
    """
    Decorator that turns unexpected exceptions into a fallback result.

    The exception is logged with its traceback and ``fallback()`` is
    returned, so callers always receive a fresh, well-formed value.

    Args:
        fallback: Zero-argument factory for the value returned on failure
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                log_error_with_context(e, func.__name__, ErrorSeverity.HIGH)
                return fallback()
        return wrapper
    return decorator
