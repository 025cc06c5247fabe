"""
Structured logging configuration for dateserial.

Provides consistent JSON logging with structured fields and
configurable log levels. Nothing is configured on import; applications
call configure_logging() when they want this output.
"""

import logging
import os
import sys
import time
from functools import wraps
from typing import Any, Callable

import structlog

SERVICE_NAME = "dateserial"


def add_service_info(
    logger: structlog.typing.WrappedLogger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Processor to add service info to log entries."""
    event_dict["service"] = SERVICE_NAME
    return event_dict


def configure_logging(
    level: str = "INFO",
    format: str = "json",
    show_timestamps: bool = True,
) -> None:
    """
    Configure structured logging for the package.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format: Output format ('json' or 'console')
        show_timestamps: Whether to include timestamps
    """
    # Get configuration from environment
    level = os.getenv("LOG_LEVEL", level).upper()
    format = os.getenv("LOG_FORMAT", format).lower()

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level, logging.INFO),
    )

    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        add_service_info,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if show_timestamps:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if format == "console":
        processors.append(
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
        )
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structured logger
    """
    return structlog.get_logger(name)


def encoder_logger() -> structlog.stdlib.BoundLogger:
    """Get logger for encoding events."""
    return get_logger("dateserial.encoder")


def generator_logger() -> structlog.stdlib.BoundLogger:
    """Get logger for the random serial facade."""
    return get_logger("dateserial.generator")


def config_logger() -> structlog.stdlib.BoundLogger:
    """Get logger for configuration loading."""
    return get_logger("dateserial.config")


def log_execution_time(logger: structlog.stdlib.BoundLogger | None = None):
    """
    Decorator to log function execution time.

    Args:
        logger: Optional logger instance (uses default if not provided)
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            _logger = logger or get_logger(func.__module__)
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
                duration_ms = (time.perf_counter() - start) * 1000
                _logger.debug(
                    "Function executed",
                    function=func.__name__,
                    duration_ms=round(duration_ms, 2),
                )
                return result
            except Exception as e:
                duration_ms = (time.perf_counter() - start) * 1000
                _logger.error(
                    "Function failed",
                    function=func.__name__,
                    duration_ms=round(duration_ms, 2),
                    error=str(e),
                    exc_info=True,
                )
                raise
        return wrapper
    return decorator

