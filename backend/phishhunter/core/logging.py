"""
PhishHunter - Logging Infrastructure

This module provides structured logging with support for:
- JSON formatted logs for machine consumption
- Text formatted logs for interactive use
- Context binding for per-analysis tracing
"""

from __future__ import annotations

import logging
import sys
import time
from functools import wraps
from typing import Any, Awaitable, Callable, Optional, Tuple, Type, TypeVar, ParamSpec

import structlog
from structlog.types import Processor

from phishhunter.core.config import get_settings

P = ParamSpec("P")
R = TypeVar("R")


def get_log_level(settings: Any) -> int:
    """Convert string log level to logging constant."""
    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return level_map.get(settings.log_level.upper(), logging.INFO)


def get_processors(settings: Any) -> list[Processor]:
    """Get structlog processors based on settings."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.log_format == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    return processors


def configure_logging() -> None:
    """
    Configure structured logging for the application.

    This should be called once at startup. Logs go to stderr so that
    stdout stays reserved for analysis output.
    """
    settings = get_settings()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=get_log_level(settings),
    )

    structlog.configure(
        processors=get_processors(settings),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name. If None, uses the calling module's name.

    Returns:
        A structlog BoundLogger instance.

    Example:
        >>> log = get_logger(__name__)
        >>> log.info("analysis_started", message_length=42)
    """
    return structlog.get_logger(name)


def log_execution_time(
    log: structlog.stdlib.BoundLogger,
    operation: str,
    expected: Tuple[Type[BaseException], ...] = (),
    **extra_fields: Any
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """
    Decorator to log execution time of a coroutine function.

    Args:
        log: Logger instance
        operation: Name of the operation being timed
        expected: Exception types that are part of normal operation; these
            are logged at info level and re-raised for the caller to report
        **extra_fields: Additional fields to include in the log

    Example:
        >>> @log_execution_time(log, "analysis")
        ... async def analyze(message: str) -> AnalysisResult:
        ...     ...
    """
    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            start_time = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
                duration_ms = (time.perf_counter() - start_time) * 1000
                log.info(
                    f"{operation}_completed",
                    duration_ms=round(duration_ms, 2),
                    success=True,
                    **extra_fields
                )
                return result
            except Exception as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                emit = log.info if isinstance(e, expected) else log.error
                emit(
                    f"{operation}_failed",
                    duration_ms=round(duration_ms, 2),
                    success=False,
                    error=str(e),
                    error_type=type(e).__name__,
                    **extra_fields
                )
                raise
        return wrapper
    return decorator
