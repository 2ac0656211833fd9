"""
OpenTelemetry integration for http-client-telemetry.

Turns every finished HTTP client request into a CLIENT span.
Requires opentelemetry-api and opentelemetry-semantic-conventions.

Installation:
    pip install http-client-telemetry[otel]

Example:
    >>> from opentelemetry import trace
    >>> from opentelemetry.sdk.trace import TracerProvider
    >>> from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor
    >>>
    >>> from http_client_telemetry import HTTPClient
    >>> from http_client_telemetry.contrib import opentelemetry as otel
    >>>
    >>> provider = TracerProvider()
    >>> provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))
    >>> trace.set_tracer_provider(provider)
    >>>
    >>> otel.setup()
    >>> client = HTTPClient(base_url="https://api.example.com")
    >>> response = client.get("/users")  # one "GET" span
"""

try:
    import opentelemetry.trace  # noqa: F401
    import opentelemetry.semconv  # noqa: F401
except ImportError as e:
    raise ImportError(
        "OpenTelemetry support requires opentelemetry-api and "
        "opentelemetry-semantic-conventions. "
        "Install with: pip install http-client-telemetry[otel]"
    ) from e

from .instrumentation import (
    HANDLER_ID,
    setup,
    teardown,
    handle_request_stop,
    build_url,
    format_error,
    method_name,
)

__all__ = [
    "HANDLER_ID",
    "setup",
    "teardown",
    "handle_request_stop",
    "build_url",
    "format_error",
    "method_name",
]
