import threading
import time
from collections.abc import Callable

from task_cache.errors import CacheOperationError


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeCacheProvider:
    """
    In-memory CacheProvider used by service and API tests.

    - Honors TTLs against an injectable clock
    - Records every call for assertions
    - Fails selected operations on demand (fail_on={"get", "set", "delete"})
    """

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock or time.monotonic
        self._entries: dict[str, tuple[bytes, float]] = {}
        self._lock = threading.Lock()
        self.fail_on: set[str] = set()
        self.calls: list[tuple[str, str]] = []
        self.healthy = True

    def get(self, key: str) -> bytes | None:
        self._record("get", key)
        with self._lock:
            return self._live(key)

    def set(self, key: str, value: bytes, ttl: int) -> None:
        self._record("set", key)
        with self._lock:
            self._entries[key] = (value, self._clock() + ttl)

    def delete(self, key: str) -> None:
        self._record("delete", key)
        with self._lock:
            self._entries.pop(key, None)

    def ping(self) -> bool:
        return self.healthy

    def peek(self, key: str) -> bytes | None:
        """Read without recording a call or triggering failures."""
        with self._lock:
            return self._live(key)

    def count(self, operation: str) -> int:
        return sum(1 for op, _ in self.calls if op == operation)

    def _live(self, key: str) -> bytes | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    def _record(self, operation: str, key: str) -> None:
        with self._lock:
            self.calls.append((operation, key))
        if operation in self.fail_on:
            raise CacheOperationError(operation, key, ConnectionError("cache is down"))
