"""
Request descriptor and request result types.

Оба типа передаются в metadata событий HTTP клиента и не изменяются
после создания (frozen dataclasses).
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union
from urllib.parse import urlsplit

import requests

DEFAULT_PORTS = {"http": 80, "https": 443}


@dataclass(frozen=True)
class RequestDescriptor:
    """
    Snapshot of an outgoing request.

    Args:
        scheme: URL scheme ("http" / "https")
        host: Host name
        port: Port number (default port of the scheme if URL has none)
        path: Request path ("/" if URL has none)
        method: HTTP method, upper-case
        query: Raw query string without "?" (may be empty)
        headers: Request headers

    Examples:
        >>> request = RequestDescriptor.build("get", "https://api.example.com/v1/items?page=2")
        >>> request.method, request.port, request.path, request.query
        ('GET', 443, '/v1/items', 'page=2')
    """
    scheme: str
    host: str
    port: int
    path: str
    method: str
    query: str = ""
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self):
        if isinstance(self.headers, dict):
            object.__setattr__(self, 'headers', MappingProxyType(dict(self.headers)))

    @classmethod
    def build(
        cls,
        method: str,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
    ) -> 'RequestDescriptor':
        """
        Разобрать URL в дескриптор запроса.

        Args:
            method: HTTP метод
            url: Полный URL
            headers: Заголовки запроса

        Returns:
            RequestDescriptor
        """
        parts = urlsplit(url)
        scheme = parts.scheme.lower()

        try:
            port = parts.port
        except ValueError:
            # Невалидный порт в URL - транспорт всё равно упадёт, здесь не падаем
            port = None
        if port is None:
            port = DEFAULT_PORTS.get(scheme, 0)

        return cls(
            scheme=scheme,
            host=parts.hostname or "",
            port=port,
            path=parts.path or "/",
            method=str(method).upper(),
            query=parts.query,
            headers=dict(headers or {}),
        )

    @property
    def target(self) -> str:
        """Path with query string."""
        if self.query:
            return f"{self.path}?{self.query}"
        return self.path


@dataclass(frozen=True)
class Ok:
    """Request completed: a response was received (any status code)."""
    response: requests.Response

    def is_ok(self) -> bool:
        return True

    def is_error(self) -> bool:
        return False


@dataclass(frozen=True)
class Error:
    """Request failed before a response was received."""
    reason: Any

    def is_ok(self) -> bool:
        return False

    def is_error(self) -> bool:
        return True


RequestResult = Union[Ok, Error]
