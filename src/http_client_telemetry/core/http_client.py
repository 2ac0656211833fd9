# src/http_client_telemetry/core/http_client.py
"""
HTTP клиент, публикующий события жизненного цикла запроса.

Events (see ``http_client_telemetry.telemetry``):

    ("http_client", "request", "start")
        measurements: monotonic_time, system_time (ns)
        metadata: request (RequestDescriptor), name (client name)

    ("http_client", "request", "stop")
        measurements: duration, monotonic_time (ns)
        metadata: request, result (Ok(response) | Error(reason)), name

Ровно одно stop событие на каждый запрос - и для успеха, и для ошибки.
"""
from typing import Any, Dict, Optional
import itertools
import time
import uuid

import requests
from requests.adapters import HTTPAdapter

from .. import telemetry
from .config import HTTPClientConfig
from .exceptions import (
    ConfigurationError,
    classify_requests_exception,
    classify_status,
)
from .request import Error, Ok, RequestDescriptor, RequestResult
from .session_manager import ThreadSafeSessionManager
from .logging import HTTPClientLogger, set_correlation_id, clear_correlation_id

REQUEST_START = ("http_client", "request", "start")
REQUEST_STOP = ("http_client", "request", "stop")

CORRELATION_HEADER = "X-Correlation-ID"

# Suffix for logger names: each client owns its logger and handlers
_client_ids = itertools.count(1)


class HTTPClient:
    """
    HTTP клиент на базе requests с публикацией telemetry событий.

    Features:
        - Connection pooling (requests HTTPAdapter)
        - Thread-safe: каждый поток получает собственную сессию
        - Immutable конфигурация
        - start/stop события для каждого запроса
        - Опциональное структурированное логирование

    Example:
        >>> with HTTPClient(base_url="https://api.example.com") as client:
        ...     response = client.get("/users")
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        config: Optional[HTTPClientConfig] = None,
        **kwargs: Any
    ):
        """
        Initialize HTTP client.

        Args:
            base_url: Base URL (shortcut for HTTPClientConfig.create(base_url=...))
            config: HTTPClientConfig instance
            **kwargs: Parameters of HTTPClientConfig.create()

        Raises:
            ConfigurationError: If both config and keyword parameters are given
        """
        if config is None:
            config = HTTPClientConfig.create(base_url=base_url, **kwargs)
        elif base_url is not None or kwargs:
            raise ConfigurationError(
                "Pass either a config object or keyword parameters, not both"
            )

        self._config = config
        self._logger: Optional[HTTPClientLogger] = None
        if config.logging:
            self._logger = HTTPClientLogger(
                config=config.logging,
                name=f"http_client.{config.name}.{next(_client_ids)}",
            )

        self._session_manager = ThreadSafeSessionManager(session_factory=self._create_session)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def _create_session(self) -> requests.Session:
        """Create configured session."""
        session = requests.Session()

        adapter = HTTPAdapter(
            pool_connections=self._config.pool.pool_connections,
            pool_maxsize=self._config.pool.pool_maxsize,
            pool_block=self._config.pool.pool_block,
        )
        session.mount('http://', adapter)
        session.mount('https://', adapter)

        if self._config.headers:
            session.headers.update(self._config.headers)

        return session

    def close(self) -> None:
        """Закрывает сессии всех потоков и хендлеры логгера."""
        if self._logger is not None:
            self._logger.close()
        self._session_manager.close_all()

    # ==================== Внутренние методы ====================

    def _build_url(self, endpoint: str) -> str:
        """
        Строит полный URL из base_url и endpoint.

        Абсолютный endpoint используется как есть.
        """
        if endpoint.startswith(("http://", "https://")):
            return endpoint

        base = self._config.base_url
        if base:
            return f"{base}/{endpoint.lstrip('/')}"
        return endpoint

    def _emit_stop(self, request: RequestDescriptor, result: RequestResult, started: int) -> int:
        """Publish the stop event, returns the measured duration (ns)."""
        now = time.monotonic_ns()
        duration = now - started
        telemetry.execute(
            REQUEST_STOP,
            {"duration": duration, "monotonic_time": now},
            {"request": request, "result": result, "name": self._config.name},
        )
        return duration

    def request(self, method: str, endpoint: str, **kwargs: Any) -> requests.Response:
        """
        Выполняет HTTP запрос.

        Любой полученный ответ (в том числе 5xx) - это Ok(response) в stop
        событии. Сетевые ошибки публикуются как Error(reason) с
        классифицированным исключением, которое затем выбрасывается.

        Args:
            method: HTTP метод
            endpoint: Endpoint или полный URL
            **kwargs: Параметры requests (params, json, data, headers, timeout...)

        Returns:
            Объект Response

        Raises:
            HTTPClientException: Сетевая ошибка, или 4xx/5xx при raise_for_status
        """
        method = method.upper()
        url = self._build_url(endpoint)

        headers: Dict[str, str] = dict(kwargs.pop('headers', None) or {})
        correlation_id = headers.setdefault(CORRELATION_HEADER, str(uuid.uuid4()))
        timeout = kwargs.pop('timeout', self._config.timeout.as_tuple())

        descriptor = RequestDescriptor.build(
            method, url, headers={**self._config.headers, **headers}
        )

        started = time.monotonic_ns()
        telemetry.execute(
            REQUEST_START,
            {"monotonic_time": started, "system_time": time.time_ns()},
            {"request": descriptor, "name": self._config.name},
        )

        if self._logger:
            set_correlation_id(correlation_id)
            self._logger.info(
                "Request started",
                method=method,
                host=descriptor.host,
                path=descriptor.path,
            )

        try:
            try:
                response = self.session.request(
                    method=method,
                    url=url,
                    headers=headers,
                    timeout=timeout,
                    verify=self._config.verify_ssl,
                    **kwargs
                )
            except BaseException as exc:
                if isinstance(exc, requests.exceptions.RequestException):
                    reason = classify_requests_exception(exc, url)
                else:
                    reason = exc

                duration = self._emit_stop(descriptor, Error(reason), started)

                if self._logger:
                    self._logger.error(
                        "Request failed",
                        method=method,
                        host=descriptor.host,
                        path=descriptor.path,
                        error=str(reason),
                        error_type=type(reason).__name__,
                        duration_ms=round(duration / 1e6, 2),
                    )

                if reason is exc:
                    raise
                raise reason from exc

            duration = self._emit_stop(descriptor, Ok(response), started)

            if self._logger:
                self._logger.info(
                    "Request completed",
                    method=method,
                    host=descriptor.host,
                    path=descriptor.path,
                    status_code=response.status_code,
                    duration_ms=round(duration / 1e6, 2),
                )
        finally:
            if self._logger:
                clear_correlation_id()

        if self._config.raise_for_status:
            error = classify_status(response.status_code, url)
            if error is not None:
                raise error

        return response

    def get(self, endpoint: str, **kwargs: Any) -> requests.Response:
        """Выполняет GET запрос."""
        return self.request("GET", endpoint, **kwargs)

    def post(self, endpoint: str, **kwargs: Any) -> requests.Response:
        """Выполняет POST запрос."""
        return self.request("POST", endpoint, **kwargs)

    def put(self, endpoint: str, **kwargs: Any) -> requests.Response:
        """Выполняет PUT запрос."""
        return self.request("PUT", endpoint, **kwargs)

    def patch(self, endpoint: str, **kwargs: Any) -> requests.Response:
        """Выполняет PATCH запрос."""
        return self.request("PATCH", endpoint, **kwargs)

    def delete(self, endpoint: str, **kwargs: Any) -> requests.Response:
        """Выполняет DELETE запрос."""
        return self.request("DELETE", endpoint, **kwargs)

    def head(self, endpoint: str, **kwargs: Any) -> requests.Response:
        """Выполняет HEAD запрос."""
        return self.request("HEAD", endpoint, **kwargs)

    def options(self, endpoint: str, **kwargs: Any) -> requests.Response:
        """Выполняет OPTIONS запрос."""
        return self.request("OPTIONS", endpoint, **kwargs)

    # ==================== Свойства ====================

    @property
    def session(self) -> requests.Session:
        """Thread-local сессия текущего потока."""
        return self._session_manager.get_session()

    @property
    def config(self) -> HTTPClientConfig:
        return self._config

    @property
    def base_url(self) -> Optional[str]:
        return self._config.base_url

    @property
    def name(self) -> str:
        return self._config.name
