import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()

ID_POLICIES = ("server", "client")
TEXT_FIELDS = ("name", "title")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")
    redis_db: int = int(os.getenv("REDIS_DB", "0"))
    redis_socket_timeout: float = float(os.getenv("REDIS_SOCKET_TIMEOUT", "5.0"))

    # Cache
    cache_key: str = os.getenv("CACHE_KEY", "tasks")
    cache_ttl: int = int(os.getenv("CACHE_TTL", "600"))  # 10 minutes default

    # Tasks
    id_policy: str = os.getenv("TASK_ID_POLICY", "server")
    text_field: str = os.getenv("TASK_TEXT_FIELD", "name")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "0"))  # 0 = OS-assigned
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_ttl <= 0:
            raise ValueError(f"CACHE_TTL must be positive, got {self.cache_ttl}")

        if not self.cache_key:
            raise ValueError("CACHE_KEY must not be empty")

        if self.redis_db < 0:
            raise ValueError(f"REDIS_DB must be >= 0, got {self.redis_db}")

        if self.redis_socket_timeout <= 0:
            raise ValueError(
                f"REDIS_SOCKET_TIMEOUT must be positive, got {self.redis_socket_timeout}"
            )

        if not 0 <= self.api_port <= 65535:
            raise ValueError(f"API_PORT must be between 0 and 65535, got {self.api_port}")

        if self.id_policy not in ID_POLICIES:
            raise ValueError(
                f"TASK_ID_POLICY must be one of {list(ID_POLICIES)}, got {self.id_policy!r}"
            )

        if self.text_field not in TEXT_FIELDS:
            raise ValueError(
                f"TASK_TEXT_FIELD must be one of {list(TEXT_FIELDS)}, got {self.text_field!r}"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def get_redis_client(settings: Settings | None = None) -> redis.Redis:
    """Create a Redis client instance.

    Both the connect and the per-call socket timeout come from settings,
    so no cache call can block a request forever.
    """
    settings = settings or get_settings()
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        db=settings.redis_db,
        socket_timeout=settings.redis_socket_timeout,
        socket_connect_timeout=settings.redis_socket_timeout,
        decode_responses=False,
    )
