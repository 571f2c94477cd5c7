"""Structured logging configuration for the Monty Hall simulator.

This module provides structured logging using structlog so that simulation
runs can be followed on the console during development or collected as JSON.
"""

import functools
import logging
import os
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

import structlog
from structlog.typing import EventDict, Processor


def configure_logging(
    log_level: str = "INFO",
    log_format: str = "json",
    log_file: Optional[str] = None,
    enable_colors: bool = True,
) -> None:
    """Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format ('json' or 'console')
        log_file: Optional log file path
        enable_colors: Whether to enable colored output for console format
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    processors = _get_processors(log_format, enable_colors)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=False,
    )

    if log_file:
        _ensure_log_directory(log_file)

    _configure_stdlib_logging(numeric_level, log_file)


def _get_processors(log_format: str, enable_colors: bool) -> List[Processor]:
    """Get the appropriate processors for the given format."""
    processors: List[Processor] = [
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_process_info,
    ]

    if log_format.lower() == "json":
        processors.extend([
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ])
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=enable_colors))

    return processors


def _configure_stdlib_logging(level: int, log_file: Optional[str]) -> None:
    """Configure the standard library logging."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stdout carries the summary table, so log lines go to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    formatter = logging.Formatter("%(message)s")
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def _add_process_info(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add process information to log entries."""
    event_dict["process_id"] = os.getpid()
    return event_dict


def _ensure_log_directory(log_file: str) -> None:
    """Ensure the log file directory exists."""
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)


def get_logger(name: str, **context: Any) -> structlog.BoundLogger:
    """Get a structured logger with optional context.

    Args:
        name: Logger name (typically __name__)
        **context: Additional context to bind to the logger

    Returns:
        Bound structlog logger with context
    """
    logger = structlog.get_logger(name)
    if context:
        logger = logger.bind(**context)
    return logger


def log_function_call(
    logger: structlog.BoundLogger,
    function_name: str,
    args: Optional[Dict[str, Any]] = None,
    duration_ms: Optional[float] = None,
) -> None:
    """Log a function call with parameters and timing.

    Args:
        logger: Structured logger instance
        function_name: Name of the function being called
        args: Function arguments to log
        duration_ms: Function execution time in milliseconds
    """
    log_data: Dict[str, Any] = {"function": function_name}

    if args:
        log_data["args"] = args

    if duration_ms is not None:
        log_data["duration_ms"] = round(duration_ms, 3)

    logger.info("function_executed", **log_data)


def log_performance(logger: Optional[structlog.BoundLogger] = None):
    """Decorator to log function performance metrics."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            func_logger = logger or get_logger(func.__module__)

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                func_logger.error(
                    "function_failed",
                    function=func.__name__,
                    duration_ms=round(duration_ms, 3),
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise

            duration_ms = (time.perf_counter() - start_time) * 1000
            log_function_call(
                func_logger,
                func.__name__,
                {"args_count": len(args), "kwargs_count": len(kwargs)},
                duration_ms,
            )
            return result

        return wrapper

    return decorator
