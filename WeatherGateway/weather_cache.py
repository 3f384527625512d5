"""In-memory cache with a fixed freshness window and lazy expiration."""
import threading
import time
from typing import Any, Callable, Dict, Optional, Tuple


class ExpiringCache:
    """
    Key/value store where every entry is valid for a fixed duration.

    Expired entries are only dropped when they are read; there is no
    background sweep, so keys that are never read again stay in memory.
    """

    def __init__(self, duration_seconds: float, clock: Callable[[], float] = time.monotonic):
        """
        Initialize the cache.

        Args:
            duration_seconds: Freshness window for every entry
            clock: Source of the current time in seconds (monotonic by default)
        """
        self._duration = duration_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: Dict[str, Tuple[Any, float]] = {}  # key -> (value, written_at)

    @property
    def duration_seconds(self) -> float:
        return self._duration

    def get(self, key: str) -> Optional[Any]:
        """Return the value stored under key, or None if missing or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, written_at = entry
            if self._clock() - written_at < self._duration:
                return value
            del self._entries[key]
            return None

    def set(self, key: str, value: Any) -> None:
        """Store value under key; the entry is fresh for a full window from now."""
        with self._lock:
            self._entries[key] = (value, self._clock())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
