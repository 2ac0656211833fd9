"""Тесты для системы конфигурации."""

import pytest

from http_client_telemetry.core.config import (
    TimeoutConfig,
    ConnectionPoolConfig,
    HTTPClientConfig,
)
from http_client_telemetry.core.logging import LoggingConfig

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# TimeoutConfig
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def test_timeout_config_defaults():
    """Тест дефолтных значений."""
    config = TimeoutConfig()
    assert config.connect == 5
    assert config.read == 30

def test_timeout_config_as_tuple():
    """Тест метода as_tuple."""
    assert TimeoutConfig(connect=3, read=45).as_tuple() == (3, 45)

def test_timeout_config_validation():
    """Тест валидации."""
    with pytest.raises(ValueError, match="connect timeout must be positive"):
        TimeoutConfig(connect=-1)
    with pytest.raises(ValueError, match="read timeout must be positive"):
        TimeoutConfig(read=0)

@pytest.mark.parametrize("value,expected", [
    (60, (5, 60)),
    ((2, 20), (2, 20)),
    (TimeoutConfig(connect=1, read=2), (1, 2)),
])
def test_timeout_config_coerce(value, expected):
    """Тест coerce из числа, кортежа и готового конфига."""
    assert TimeoutConfig.coerce(value).as_tuple() == expected

def test_timeout_config_immutable():
    """Тест immutability."""
    config = TimeoutConfig()
    with pytest.raises(Exception):  # frozen dataclass
        config.connect = 10

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ConnectionPoolConfig
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def test_pool_config_validation():
    """Тест валидации."""
    with pytest.raises(ValueError):
        ConnectionPoolConfig(pool_connections=0)
    with pytest.raises(ValueError):
        ConnectionPoolConfig(pool_maxsize=-1)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# HTTPClientConfig
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def test_client_config_defaults():
    """Тест дефолтных значений."""
    config = HTTPClientConfig()
    assert config.base_url is None
    assert config.verify_ssl is True
    assert config.raise_for_status is False
    assert config.name == "http_client"
    assert config.logging is None

def test_client_config_strips_trailing_slash():
    """Тест нормализации base_url."""
    assert HTTPClientConfig(base_url="https://api.example.com///").base_url == "https://api.example.com"

def test_client_config_headers_frozen():
    """Тест что headers нельзя изменить."""
    config = HTTPClientConfig(headers={"X-API-Key": "secret"})
    with pytest.raises(TypeError):
        config.headers["X-New"] = "value"

def test_client_config_empty_name():
    """Тест валидации имени."""
    with pytest.raises(ValueError):
        HTTPClientConfig(name="")

def test_client_config_create():
    """Тест удобного конструктора."""
    logging_config = LoggingConfig.create(level="DEBUG")
    config = HTTPClientConfig.create(
        base_url="https://api.example.com/",
        timeout=(3, 60),
        headers={"Accept": "application/json"},
        verify_ssl=False,
        raise_for_status=True,
        pool_maxsize=20,
        name="billing",
        logging=logging_config,
    )

    assert config.base_url == "https://api.example.com"
    assert config.timeout.as_tuple() == (3, 60)
    assert config.headers["Accept"] == "application/json"
    assert config.verify_ssl is False
    assert config.raise_for_status is True
    assert config.pool.pool_maxsize == 20
    assert config.pool.pool_connections == 10
    assert config.name == "billing"
    assert config.logging is logging_config

def test_client_config_with_timeout():
    """Тест with_timeout возвращает новый конфиг."""
    config = HTTPClientConfig.create(base_url="https://a.b")
    new_config = config.with_timeout(90)

    assert new_config is not config
    assert new_config.timeout.read == 90
    assert config.timeout.read == 30
    assert new_config.base_url == "https://a.b"

def test_client_config_with_headers_merges():
    """Тест with_headers объединяет заголовки."""
    config = HTTPClientConfig.create(headers={"A": "1"})
    new_config = config.with_headers({"B": "2"})

    assert dict(new_config.headers) == {"A": "1", "B": "2"}
    assert dict(config.headers) == {"A": "1"}
