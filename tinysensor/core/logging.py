"""
Logging configuration for the application.
Uses structlog for structured logging (JSON in production, colorful in dev).
"""

import logging
import sys
from typing import Any

import structlog
from asgi_correlation_id import correlation_id

from tinysensor.config import get_settings

# Handlers installed by the last configure_logging call
_handlers: list[logging.Handler] = []


def add_correlation_id(logger, method_name, event_dict):
    request_id = correlation_id.get()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def configure_logging() -> None:
    """Configure structured logging for console and, optionally, a log file."""
    settings = get_settings()
    production = settings.ENVIRONMENT == "production"

    shared_processors: list[Any] = [
        add_correlation_id,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    if production:
        # JSON logs for production (ELK / Datadog compatible)
        renderers = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        renderers = [structlog.dev.ConsoleRenderer()]

    console_formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta] + renderers,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(console_formatter)

    root_logger = logging.getLogger()
    # Replace handlers from a previous call (tests build the app more than once)
    while _handlers:
        previous = _handlers.pop()
        root_logger.removeHandler(previous)
        previous.close()
    _handlers.append(handler)
    root_logger.addHandler(handler)

    # JSON lines file log, appended across restarts
    if settings.LOG_FILE:
        file_formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
        )
        file_handler = logging.FileHandler(settings.LOG_FILE, mode="a", encoding="utf-8")
        file_handler.setFormatter(file_formatter)
        _handlers.append(file_handler)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(settings.LOG_LEVEL.upper())
