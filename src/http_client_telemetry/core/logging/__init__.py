"""
Structured logging for HTTP Client.

Example:
    >>> from http_client_telemetry.core.logging import HTTPClientLogger, LoggingConfig
    >>> logger = HTTPClientLogger(LoggingConfig.create(level="DEBUG", format="json"))
    >>> logger.info("Request started", method="GET", host="api.example.com")
"""

from .config import LoggingConfig, LogLevel, LogFormat
from .logger import HTTPClientLogger
from .formatters import JSONFormatter, TextFormatter, get_formatter
from .filters import (
    CorrelationIdFilter,
    ExtraFieldsFilter,
    set_correlation_id,
    get_correlation_id,
    clear_correlation_id,
)
from .handlers import create_console_handler, create_file_handler

__all__ = [
    # Config
    "LoggingConfig",
    "LogLevel",
    "LogFormat",
    # Logger
    "HTTPClientLogger",
    # Formatters
    "JSONFormatter",
    "TextFormatter",
    "get_formatter",
    # Filters
    "CorrelationIdFilter",
    "ExtraFieldsFilter",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
    # Handlers
    "create_console_handler",
    "create_file_handler",
]
