"""
Tests for settings validation and client construction.
"""

import pytest
import redis

from task_cache.config import get_redis_client

from .conftest import make_settings


def test_defaults_are_valid():
    settings = make_settings()
    assert settings.cache_ttl == 600
    assert settings.api_port == 0


@pytest.mark.parametrize(
    "overrides",
    [
        {"cache_ttl": 0},
        {"cache_key": ""},
        {"redis_db": -1},
        {"redis_socket_timeout": 0},
        {"api_port": 70000},
        {"id_policy": "random"},
        {"text_field": "label"},
    ],
)
def test_invalid_settings_are_rejected(overrides):
    with pytest.raises(ValueError):
        make_settings(**overrides)


def test_redis_client_uses_db_and_timeouts():
    settings = make_settings(redis_url="redis://cache.internal:6380", redis_db=3, redis_socket_timeout=2.5)

    client = get_redis_client(settings)

    kwargs = client.connection_pool.connection_kwargs
    assert isinstance(client, redis.Redis)
    assert kwargs["host"] == "cache.internal"
    assert kwargs["port"] == 6380
    assert kwargs["db"] == 3
    assert kwargs["socket_timeout"] == 2.5
    assert kwargs["socket_connect_timeout"] == 2.5
