"""
Logging utilities for the application.

This module provides utilities for logging, including:
- Root logger configuration (console and optional log file)
- structlog configuration routed through the standard library
- Structured logger access for dispatch-level events

Log records always go to stderr or a file. Standard output belongs to the
script being interpreted or to the compiled shell text.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s:%(lineno)d %(message)s"


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    Args:
        name: Optional logger name

    Returns:
        A structured logger
    """
    return structlog.get_logger(name)  # type: ignore


def configure_structlog() -> None:
    """Route structlog events through the standard library logging tree."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(
                key_order=["event"], drop_missing=True
            ),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def configure_logging(
    level: int = logging.WARNING,
    log_format: str | None = None,
    log_file: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure root logging and structlog.

    Args:
        level: Logging level
        log_format: Optional log format string
        log_file: Optional log file path
        stream: Console stream, stderr when omitted
    """
    formatter = logging.Formatter(fmt=log_format or DEFAULT_LOG_FORMAT)

    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=True,  # Override any existing configuration
    )

    configure_structlog()
