"""
OpenTelemetry spans from HTTP client stop events.

One CLIENT span is produced per ("http_client", "request", "stop") event.
The span is reconstructed after the fact: the event carries the request
duration, so the start time is computed backwards from the moment the
event is handled. Span attributes follow the OpenTelemetry HTTP semantic
conventions.
"""

import logging
from enum import Enum
from time import time_ns
from typing import Any, Hashable, Mapping, Optional

from opentelemetry import trace
from opentelemetry.trace import SpanKind, Status, StatusCode
from opentelemetry.semconv.trace import SpanAttributes

from ... import telemetry
from ...core.http_client import REQUEST_STOP
from ...core.request import Error, Ok

logger = logging.getLogger(__name__)

HANDLER_ID: Hashable = (__name__, "request_stop")

TRACER_NAME = "http_client_telemetry"


def setup(options: Optional[Mapping[str, Any]] = None) -> None:
    """
    Attach the span handler to HTTP client stop events.

    Call once at application start, after the tracer provider is configured.
    Calling it again replaces the existing registration.

    Args:
        options: Reserved for future use; currently ignored

    Example:
        >>> from http_client_telemetry.contrib.opentelemetry import setup
        >>> setup()
    """
    if options:
        logger.debug("Ignoring unsupported options: %s", sorted(options))

    telemetry.attach(
        HANDLER_ID,
        REQUEST_STOP,
        handle_request_stop,
        {"tracer": trace.get_tracer(TRACER_NAME)},
    )
    logger.debug("Span handler attached: %s", HANDLER_ID)


def teardown() -> None:
    """Detach the span handler."""
    if telemetry.detach(HANDLER_ID):
        logger.debug("Span handler detached: %s", HANDLER_ID)


def handle_request_stop(
    event: telemetry.EventName,
    measurements: Mapping[str, Any],
    metadata: Mapping[str, Any],
    config: Optional[Mapping[str, Any]],
) -> None:
    """Create, annotate and end one span for a finished request."""
    end_time = time_ns()
    start_time = end_time - measurements["duration"]

    request = metadata["request"]
    result = metadata["result"]

    status = result.response.status_code if isinstance(result, Ok) else 0

    attributes = {
        SpanAttributes.HTTP_URL: build_url(request.scheme, request.host, request.port, request.path),
        SpanAttributes.HTTP_SCHEME: request.scheme,
        SpanAttributes.NET_PEER_NAME: request.host,
        SpanAttributes.NET_PEER_PORT: request.port,
        SpanAttributes.HTTP_TARGET: request.path,
        SpanAttributes.HTTP_METHOD: request.method,
        SpanAttributes.HTTP_STATUS_CODE: status,
    }

    tracer = (config or {}).get("tracer") or trace.get_tracer(TRACER_NAME)

    # https://opentelemetry.io/docs/specs/semconv/http/http-spans/#name
    span = tracer.start_span(
        method_name(request.method),
        kind=SpanKind.CLIENT,
        attributes=attributes,
        start_time=start_time,
    )

    if 500 <= status < 600:
        span.set_status(Status(StatusCode.ERROR))

    if isinstance(result, Error):
        span.set_status(Status(StatusCode.ERROR, format_error(result.reason)))

    # Same timestamp as start_time was derived from: end - start == duration
    span.end(end_time=end_time)


def build_url(scheme: str, host: str, port: int, path: str) -> str:
    """Display URL "scheme://host:port path"; no escaping, default ports kept."""
    return f"{scheme}://{host}:{port}{path}"


def method_name(method: Any) -> str:
    """
    String form of an HTTP method.

    Examples:
        >>> method_name("post")
        'POST'
    """
    if isinstance(method, Enum):
        method = method.value
    return str(method).upper()


def format_error(reason: Any) -> str:
    """
    Human-readable text for a failure reason.

    Exceptions render as their message, anything else as its repr.
    Never raises.
    """
    if isinstance(reason, BaseException):
        try:
            message = str(getattr(reason, "message", None) or reason)
        except Exception:
            message = ""
        if message:
            return message
    try:
        return repr(reason)
    except Exception:
        return f"<{type(reason).__name__} object>"
