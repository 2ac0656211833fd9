"""
Система конфигурации для HTTP Client.

Все конфиги immutable (frozen dataclasses) для потокобезопасности.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from .logging import LoggingConfig

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# TIMEOUT CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class TimeoutConfig:
    """
    Конфигурация таймаутов.

    Args:
        connect: Таймаут подключения (сек)
        read: Таймаут чтения данных (сек)

    Examples:
        >>> TimeoutConfig(connect=5, read=30)
    """
    connect: float = 5
    read: float = 30

    def __post_init__(self):
        """Валидация."""
        if self.connect <= 0:
            raise ValueError("connect timeout must be positive")
        if self.read <= 0:
            raise ValueError("read timeout must be positive")

    def as_tuple(self) -> Tuple[float, float]:
        """Вернуть как (connect, read) для requests."""
        return (self.connect, self.read)

    @classmethod
    def coerce(cls, timeout: Union[float, Tuple[float, float], 'TimeoutConfig']) -> 'TimeoutConfig':
        """Построить TimeoutConfig из числа, кортежа (connect, read) или готового конфига."""
        if isinstance(timeout, TimeoutConfig):
            return timeout
        if isinstance(timeout, tuple):
            return cls(connect=timeout[0], read=timeout[1])
        return cls(read=timeout)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# CONNECTION POOL CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class ConnectionPoolConfig:
    """
    Конфигурация connection pool (передаётся в requests HTTPAdapter).

    Args:
        pool_connections: Количество connection pools для кеширования
        pool_maxsize: Максимум соединений в пуле
        pool_block: Блокировать при достижении лимита
    """
    pool_connections: int = 10
    pool_maxsize: int = 10
    pool_block: bool = False

    def __post_init__(self):
        """Валидация."""
        if self.pool_connections <= 0:
            raise ValueError("pool_connections must be positive")
        if self.pool_maxsize <= 0:
            raise ValueError("pool_maxsize must be positive")

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# MAIN CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class HTTPClientConfig:
    """
    Главная конфигурация HTTPClient.

    Args:
        base_url: Базовый URL (опционально)
        headers: Дефолтные заголовки
        timeout: Конфигурация таймаутов
        pool: Конфигурация connection pool
        verify_ssl: Проверять SSL сертификаты
        raise_for_status: Выбрасывать HTTPError для 4xx/5xx ответов
        name: Имя клиента, передаётся в metadata событий
        logging: Конфигурация логирования (None = без логирования)

    Examples:
        >>> config = HTTPClientConfig(base_url="https://api.example.com")
        >>> config = HTTPClientConfig.create(timeout=(3, 60), raise_for_status=True)
    """
    base_url: Optional[str] = None
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)
    pool: ConnectionPoolConfig = field(default_factory=ConnectionPoolConfig)
    verify_ssl: bool = True
    raise_for_status: bool = False
    name: str = "http_client"
    logging: Optional['LoggingConfig'] = None

    def __post_init__(self):
        """Normalize base_url and freeze headers."""
        if isinstance(self.headers, dict):
            object.__setattr__(self, 'headers', MappingProxyType(dict(self.headers)))

        if self.base_url:
            object.__setattr__(self, 'base_url', self.base_url.rstrip('/'))

        if not self.name:
            raise ValueError("name must be a non-empty string")

    @classmethod
    def create(
        cls,
        base_url: Optional[str] = None,
        timeout: Union[float, Tuple[float, float], TimeoutConfig] = 30,
        headers: Optional[Dict[str, str]] = None,
        verify_ssl: bool = True,
        raise_for_status: bool = False,
        pool_connections: Optional[int] = None,
        pool_maxsize: Optional[int] = None,
        name: str = "http_client",
        logging: Optional['LoggingConfig'] = None,
    ) -> 'HTTPClientConfig':
        """
        Удобный конструктор конфигурации.

        Args:
            base_url: Базовый URL
            timeout: Таймаут (число, (connect, read) или TimeoutConfig)
            headers: Заголовки
            verify_ssl: Проверять SSL
            raise_for_status: Выбрасывать HTTPError для 4xx/5xx
            pool_connections: Количество connection pools
            pool_maxsize: Максимальный размер pool
            name: Имя клиента
            logging: Конфигурация логирования

        Returns:
            HTTPClientConfig instance
        """
        pool_kwargs = {}
        if pool_connections is not None:
            pool_kwargs['pool_connections'] = pool_connections
        if pool_maxsize is not None:
            pool_kwargs['pool_maxsize'] = pool_maxsize

        return cls(
            base_url=base_url,
            headers=headers or {},
            timeout=TimeoutConfig.coerce(timeout),
            pool=ConnectionPoolConfig(**pool_kwargs),
            verify_ssl=verify_ssl,
            raise_for_status=raise_for_status,
            name=name,
            logging=logging,
        )

    def with_timeout(self, timeout: Union[float, Tuple[float, float], TimeoutConfig]) -> 'HTTPClientConfig':
        """Создать новый конфиг с изменённым timeout."""
        return replace(self, timeout=TimeoutConfig.coerce(timeout))

    def with_headers(self, headers: Dict[str, str]) -> 'HTTPClientConfig':
        """
        Создать новый конфиг с дополнительными заголовками.

        Example:
            >>> new_config = config.with_headers({"X-API-Key": "secret"})
        """
        merged = dict(self.headers)
        merged.update(headers)
        return replace(self, headers=merged)
