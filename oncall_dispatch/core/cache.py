# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Bounded TTL cache for derived, rarely-changing lookups."""
import threading
import time
from collections import OrderedDict
from typing import Any, Callable, Hashable, Optional

_MISSING = object()


class TTLCache:
    """
    Keyed cache with per-entry expiry and a size cap.

    Expired entries are dropped when touched; once ``max_entries`` is reached
    the oldest insertion is evicted. Call ``invalidate()`` when the
    underlying data changes.

    Safe to share between threadpool workers: every read and write of the
    backing dict happens under one lock, and the clock is read outside it.
    """

    def __init__(self, ttl_seconds: float, max_entries: int = 1024,
                 clock: Callable[[], float] = time.monotonic):
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.ttl = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._lock = threading.Lock()
        self._data: "OrderedDict[Hashable, tuple[float, Any]]" = OrderedDict()

    def get(self, key: Hashable, default: Any = None) -> Any:
        now = self._clock()
        with self._lock:
            item = self._data.get(key, _MISSING)
            if item is _MISSING:
                return default
            expires_at, value = item
            if expires_at <= now:
                self._data.pop(key, None)
                return default
            return value

    def set(self, key: Hashable, value: Any) -> None:
        expires_at = self._clock() + self.ttl
        with self._lock:
            self._data.pop(key, None)
            while self._data and len(self._data) >= self.max_entries:
                self._data.popitem(last=False)
            self._data[key] = (expires_at, value)

    def get_or_compute(self, key: Hashable, compute: Callable[[], Any]) -> Any:
        """
        Return the cached value, or compute, store and return it.
        ``compute`` runs outside the lock, so concurrent misses may each call it.
        """
        value = self.get(key, _MISSING)
        if value is _MISSING:
            value = compute()
            self.set(key, value)
        return value

    def invalidate(self, key: Optional[Hashable] = None) -> None:
        """Drop one key, or everything when no key is given."""
        with self._lock:
            if key is None:
                self._data.clear()
            else:
                self._data.pop(key, None)

    def __len__(self) -> int:
        now = self._clock()
        with self._lock:
            return sum(1 for expires_at, _ in self._data.values() if expires_at > now)
