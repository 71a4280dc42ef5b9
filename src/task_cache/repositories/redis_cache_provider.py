"""Redis implementation of CacheProvider.

Stores raw bytes under plain string keys with a per-key expiration.
It satisfies the CacheProvider protocol.
"""

import logging

import redis

from task_cache.config import Settings, get_redis_client, get_settings
from task_cache.errors import CacheOperationError, CacheUnavailableError

logger = logging.getLogger(__name__)


class RedisCacheProvider:
    """Redis-backed cache provider.

    This class satisfies the CacheProvider protocol through structural
    typing - no explicit inheritance needed.

    Every redis.RedisError (connection refused, timeout, ...) raised by a
    single call is wrapped in CacheOperationError. Calls are made exactly
    once; there is no retry.
    """

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        """Initialize the provider.

        Args:
            redis_client: Redis client instance. If None, creates default.
        """
        self._client = redis_client or get_redis_client()

    @classmethod
    def create(
        cls,
        settings: Settings | None = None,
        redis_client: redis.Redis | None = None,
    ) -> "RedisCacheProvider":
        """Factory method that connects and verifies the backend.

        Args:
            settings: Connection settings. If None, uses the global settings.
            redis_client: Pre-built client, mainly for tests.

        Returns:
            A provider whose backend answered PING

        Raises:
            CacheUnavailableError: If Redis cannot be reached
        """
        settings = settings or get_settings()
        client = redis_client or get_redis_client(settings)
        try:
            client.ping()
        except redis.RedisError as e:
            raise CacheUnavailableError(
                f"Could not connect to Redis at {settings.redis_url} (db={settings.redis_db}): {e}"
            ) from e
        logger.info("Redis connection successful url=%s db=%s", settings.redis_url, settings.redis_db)
        return cls(redis_client=client)

    def get(self, key: str) -> bytes | None:
        try:
            value = self._client.get(key)
        except redis.RedisError as e:
            raise CacheOperationError("get", key, e) from e
        if value is None:
            return None
        if isinstance(value, str):
            return value.encode("utf-8")
        return value  # type: ignore[return-value]

    def set(self, key: str, value: bytes, ttl: int) -> None:
        try:
            self._client.set(key, value, ex=ttl)
        except redis.RedisError as e:
            raise CacheOperationError("set", key, e) from e

    def delete(self, key: str) -> None:
        # DEL on a missing key returns 0, which is still success
        try:
            self._client.delete(key)
        except redis.RedisError as e:
            raise CacheOperationError("delete", key, e) from e

    def ping(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
