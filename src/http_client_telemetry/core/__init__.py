"""Core HTTP Client модули."""

from .config import (
    TimeoutConfig,
    ConnectionPoolConfig,
    HTTPClientConfig,
)
from .exceptions import (
    HTTPClientException,
    TemporaryError,
    FatalError,
    NetworkError,
    TimeoutError,
    ConnectionError,
    ProxyError,
    ServerError,
    HTTPError,
    NotFoundError,
    InvalidRequestError,
    ConfigurationError,
    classify_requests_exception,
    classify_status,
)
from .request import RequestDescriptor, Ok, Error, RequestResult
from .http_client import HTTPClient, REQUEST_START, REQUEST_STOP

__all__ = [
    # Config
    "TimeoutConfig",
    "ConnectionPoolConfig",
    "HTTPClientConfig",
    # Core
    "HTTPClient",
    "REQUEST_START",
    "REQUEST_STOP",
    "RequestDescriptor",
    "Ok",
    "Error",
    "RequestResult",
    # Exceptions
    "HTTPClientException",
    "TemporaryError",
    "FatalError",
    "NetworkError",
    "TimeoutError",
    "ConnectionError",
    "ProxyError",
    "ServerError",
    "HTTPError",
    "NotFoundError",
    "InvalidRequestError",
    "ConfigurationError",
    "classify_requests_exception",
    "classify_status",
]
