"""HTTP client with lifecycle events and OpenTelemetry tracing."""

import logging
from importlib.metadata import version, PackageNotFoundError

from . import telemetry
from .core.http_client import HTTPClient, REQUEST_START, REQUEST_STOP
from .core.config import HTTPClientConfig, TimeoutConfig, ConnectionPoolConfig
from .core.request import RequestDescriptor, Ok, Error, RequestResult
from .core.exceptions import (
    HTTPClientException,
    HTTPError,
    TimeoutError,
    ConnectionError,
    NotFoundError,
    ServerError,
    InvalidRequestError,
    ConfigurationError,
)
from .core.logging import LoggingConfig

# Users configure output themselves via logging.getLogger('http_client_telemetry')
logging.getLogger('http_client_telemetry').addHandler(logging.NullHandler())

try:
    __version__ = version("http-client-telemetry")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    # Core
    "HTTPClient",
    "telemetry",
    "REQUEST_START",
    "REQUEST_STOP",
    "RequestDescriptor",
    "Ok",
    "Error",
    "RequestResult",

    # Config
    "HTTPClientConfig",
    "TimeoutConfig",
    "ConnectionPoolConfig",
    "LoggingConfig",

    # Exceptions
    "HTTPClientException",
    "HTTPError",
    "TimeoutError",
    "ConnectionError",
    "NotFoundError",
    "ServerError",
    "InvalidRequestError",
    "ConfigurationError",

    "__version__",
]
