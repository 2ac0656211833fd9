"""
Structured logger used by HTTPClient when ``config.logging`` is set.
"""

import logging
from typing import Optional, Any

from .config import LoggingConfig, LogLevel
from .formatters import get_formatter
from .filters import CorrelationIdFilter, ExtraFieldsFilter
from .handlers import create_console_handler, create_file_handler


class HTTPClientLogger:
    """
    Thin wrapper over ``logging.Logger`` that takes structured keyword fields.

    Example:
        >>> logger = HTTPClientLogger(LoggingConfig.create(level="DEBUG"))
        >>> logger.info("Request started", method="GET", host="api.example.com")
        >>> logger.close()
    """

    def __init__(self, config: Optional[LoggingConfig] = None, name: str = "http_client"):
        self.config = config or LoggingConfig()
        self.name = name
        self._closed = False

        level = self._get_level(self.config.level)

        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)
        self._logger.propagate = False
        # Reinitializing with the same name must not stack handlers
        self._logger.handlers.clear()

        filters = []
        if self.config.enable_correlation_id:
            filters.append(CorrelationIdFilter())
        if self.config.extra_fields:
            filters.append(ExtraFieldsFilter(self.config.extra_fields))

        formatter = get_formatter(self.config.format.value)

        if self.config.enable_console:
            self._logger.addHandler(
                create_console_handler(level=level, formatter=formatter, filters=filters)
            )

        if self.config.enable_file and self.config.file_path:
            self._logger.addHandler(
                create_file_handler(
                    file_path=self.config.file_path,
                    level=level,
                    formatter=formatter,
                    max_bytes=self.config.max_bytes,
                    backup_count=self.config.backup_count,
                    filters=filters
                )
            )

    @staticmethod
    def _get_level(level: LogLevel) -> int:
        return getattr(logging, level.value)

    @property
    def handlers(self):
        return list(self._logger.handlers)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """
        Log info message.

        Example:
            >>> logger.info("Request completed", status_code=200, duration_ms=150)
        """
        self._logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(message, extra=kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(message, extra=kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log error with traceback; call from an except block."""
        self._logger.exception(message, extra=kwargs)

    def close(self) -> None:
        """
        Flush and close all handlers. Idempotent.
        """
        if self._closed:
            return

        for handler in self._logger.handlers[:]:
            handler.flush()
            handler.close()
            self._logger.removeHandler(handler)

        self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
