"""
Log filters.

The correlation ID lives in a context variable: the client sets it for the
duration of one request, so every record emitted while that request is in
flight (from the client or from event handlers it triggers) carries it.
"""

import logging
from contextvars import ContextVar
from typing import Any, Mapping, Optional


_correlation_id: ContextVar[Optional[str]] = ContextVar("http_client_correlation_id", default=None)


def set_correlation_id(correlation_id: str) -> None:
    _correlation_id.set(correlation_id)


def get_correlation_id() -> Optional[str]:
    """
    Correlation ID of the request in flight, or None.

    Example:
        >>> set_correlation_id("req-12345")
        >>> get_correlation_id()
        'req-12345'
    """
    return _correlation_id.get()


def clear_correlation_id() -> None:
    _correlation_id.set(None)


class CorrelationIdFilter(logging.Filter):
    """Stamps ``correlation_id`` on records emitted during a request."""

    def filter(self, record: logging.LogRecord) -> bool:
        correlation_id = _correlation_id.get()
        if correlation_id:
            record.correlation_id = correlation_id
        return True


class ExtraFieldsFilter(logging.Filter):
    """Static fields (service, environment) for every record; per-call fields take precedence."""

    def __init__(self, extra_fields: Mapping[str, Any]):
        super().__init__()
        self.extra_fields = dict(extra_fields)

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in self.extra_fields.items():
            record.__dict__.setdefault(key, value)
        return True
