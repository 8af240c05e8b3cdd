"""
In-memory cache with per-entry expiry.

Create one per application and pass it to whatever needs it; tests build
their own with a fake clock.
"""

import functools
import json
import time
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Optional

import settings

_MISSING = object()


@dataclass
class CacheItem:
    data: Any
    timestamp: float
    expires_at: float


class TTLCache:
    def __init__(self, default_ttl: Optional[float] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.default_ttl = settings.CACHE_TTL_SECONDS if default_ttl is None else default_ttl
        self._clock = clock
        self._storage: dict = {}

    def __len__(self) -> int:
        return len(self._storage)

    def set(self, key: Hashable, data: Any, ttl: Optional[float] = None) -> None:
        now = self._clock()
        expires_at = now + (self.default_ttl if ttl is None else ttl)
        self._storage[key] = CacheItem(data=data, timestamp=now, expires_at=expires_at)
        self._cleanup()

    def get(self, key: Hashable, default: Any = None) -> Any:
        item = self._live_item(key)
        return default if item is None else item.data

    def has(self, key: Hashable) -> bool:
        return self._live_item(key) is not None

    def delete(self, key: Hashable) -> None:
        self._storage.pop(key, None)

    def clear(self) -> None:
        self._storage.clear()

    def stats(self) -> dict:
        now = self._clock()
        expired = sum(1 for item in self._storage.values() if now > item.expires_at)
        return {
            'active': len(self._storage) - expired,
            'expired': expired,
            'total': len(self._storage),
        }

    def memoize(self, fn: Callable = None, *, key: Optional[Callable[..., Hashable]] = None,
                ttl: Optional[float] = None):
        """
        Cache a function's results in this cache.

        Usable bare (`@cache.memoize`) or configured
        (`@cache.memoize(key=..., ttl=...)`). Without a key function the
        arguments are JSON-encoded to build the cache key.
        """
        def decorator(func):
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                if key is not None:
                    raw_key = key(*args, **kwargs)
                else:
                    raw_key = json.dumps([args, kwargs], sort_keys=True, default=repr)
                cache_key = f"memoize:{func.__qualname__}:{raw_key}"

                result = self.get(cache_key, _MISSING)
                if result is _MISSING:
                    result = func(*args, **kwargs)
                    self.set(cache_key, result, ttl)
                return result
            return wrapper

        if fn is not None:
            return decorator(fn)
        return decorator

    def _live_item(self, key: Hashable) -> Optional[CacheItem]:
        item = self._storage.get(key)
        if item is None:
            return None
        if self._clock() > item.expires_at:
            del self._storage[key]
            return None
        return item

    def _cleanup(self) -> None:
        now = self._clock()
        expired = [k for k, item in self._storage.items() if now > item.expires_at]
        for k in expired:
            del self._storage[k]
