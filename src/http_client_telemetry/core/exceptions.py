"""
Иерархия исключений HTTP Client.

Классификация:
- TemporaryError - сетевые сбои, 5xx (повтор может помочь)
- FatalError - 4xx, невалидный запрос, конфигурация

Экземпляры этих исключений попадают в Error(reason) события
("http_client", "request", "stop"), поэтому каждое несёт
человекочитаемое сообщение в атрибуте message.
"""

from typing import Optional

import requests

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# BASE
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class HTTPClientException(Exception):
    """Базовое исключение HTTP Client."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ВРЕМЕННЫЕ ОШИБКИ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TemporaryError(HTTPClientException):
    """Временная ошибка: таймауты, сетевые ошибки, 5xx."""

class NetworkError(TemporaryError):
    """Сетевая ошибка."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        super().__init__(message)

class TimeoutError(NetworkError):
    """
    Таймаут запроса.

    Args:
        message: Сообщение об ошибке
        url: URL запроса
        timeout_type: Тип таймаута ('connect' или 'read')
    """

    def __init__(self, message: str, url: Optional[str] = None, timeout_type: Optional[str] = None):
        self.timeout_type = timeout_type
        super().__init__(message, url)

class ConnectionError(NetworkError):
    """Connection refused / reset / network unreachable."""

class ProxyError(NetworkError):
    """Ошибка прокси."""

class ServerError(TemporaryError):
    """5xx ошибка сервера."""

    def __init__(self, status_code: int, url: str, message: str = ""):
        self.status_code = status_code
        self.url = url

        msg = f"HTTP {status_code} error for {url}"
        if message:
            msg += f": {message}"
        super().__init__(msg)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ФАТАЛЬНЫЕ ОШИБКИ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class FatalError(HTTPClientException):
    """Фатальная ошибка - повтор запроса не поможет."""

class HTTPError(FatalError):
    """4xx (и прочие не-5xx) HTTP ошибки."""

    def __init__(self, status_code: int, url: str, message: str = ""):
        self.status_code = status_code
        self.url = url

        msg = f"HTTP {status_code} error for {url}"
        if message:
            msg += f": {message}"
        super().__init__(msg)

class NotFoundError(HTTPError):
    """404 Not Found."""

    def __init__(self, url: str, message: str = ""):
        super().__init__(404, url, message)

class InvalidRequestError(FatalError):
    """Невалидный запрос: битый URL, неподдерживаемая схема и т.п."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        super().__init__(message)

class ConfigurationError(FatalError):
    """Ошибка конфигурации."""

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# УТИЛИТЫ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def classify_status(status_code: int, url: str) -> Optional[HTTPClientException]:
    """
    Исключение для HTTP статуса ответа, или None для успешных статусов.

    Examples:
        >>> classify_status(200, "https://example.com") is None
        True
        >>> isinstance(classify_status(503, "https://example.com"), TemporaryError)
        True
    """
    if status_code < 400:
        return None
    if 500 <= status_code < 600:
        return ServerError(status_code, url)
    if status_code == 404:
        return NotFoundError(url)
    return HTTPError(status_code, url)


def classify_requests_exception(exc: Exception, url: str) -> HTTPClientException:
    """
    Конвертировать requests.exceptions в наши исключения.

    Args:
        exc: Исключение из requests
        url: URL запроса

    Returns:
        Наше исключение с правильной классификацией

    Examples:
        >>> exc = requests.exceptions.ConnectTimeout("timed out")
        >>> our_exc = classify_requests_exception(exc, "https://example.com")
        >>> our_exc.message
        'connect timeout'
    """
    # ConnectTimeout наследует и Timeout, и ConnectionError - проверяем первым
    if isinstance(exc, requests.exceptions.ConnectTimeout):
        return TimeoutError("connect timeout", url, timeout_type="connect")

    elif isinstance(exc, requests.exceptions.ReadTimeout):
        return TimeoutError("read timeout", url, timeout_type="read")

    elif isinstance(exc, requests.exceptions.Timeout):
        return TimeoutError("timeout", url)

    elif isinstance(exc, requests.exceptions.ProxyError):
        return ProxyError(f"proxy error: {exc}", url)

    elif isinstance(exc, requests.exceptions.ConnectionError):
        return ConnectionError(f"connection error: {exc}", url)

    elif isinstance(exc, (
        requests.exceptions.MissingSchema,
        requests.exceptions.InvalidSchema,
        requests.exceptions.InvalidURL,
    )):
        return InvalidRequestError(f"invalid request: {exc}", url)

    elif isinstance(exc, requests.exceptions.HTTPError):
        response = exc.response
        status_code = response.status_code if response is not None else 0
        return classify_status(status_code, url) or HTTPError(status_code, url)

    else:
        # Неизвестная ошибка - оборачиваем
        return HTTPClientException(str(exc) or type(exc).__name__)
