"""Cache provider protocol.

Defines the minimal key-value surface the coordinator needs from a cache
backend: get, set with expiration, and idempotent delete.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CacheProvider(Protocol):
    """Protocol for key-value caches with per-entry expiration.

    Implementations raise CacheOperationError when a single call fails.
    A missing key is not a failure.
    """

    def get(self, key: str) -> bytes | None:
        """Fetch a value.

        Args:
            key: The cache key

        Returns:
            The stored bytes, or None on a miss
        """
        ...

    def set(self, key: str, value: bytes, ttl: int) -> None:
        """Store a value that expires after ttl seconds.

        Args:
            key: The cache key
            value: Bytes to store verbatim
            ttl: Time-to-live in seconds
        """
        ...

    def delete(self, key: str) -> None:
        """Remove a key. Deleting an absent key succeeds.

        Args:
            key: The cache key
        """
        ...

    def ping(self) -> bool:
        """Check if the backend is reachable.

        Returns:
            True if healthy, False otherwise
        """
        ...
