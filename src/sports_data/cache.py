"""
In-process TTL cache sitting in front of every data-layer read.

Expiry is lazy (checked on read); there is no eviction thread. Writes are
first-writer-wins: a second store for a key that still holds a live entry is
ignored, so two identical concurrent misses settle on one value.
"""

from __future__ import annotations

import json
import threading
import time
from dataclasses import dataclass, field
from typing import Any

from sports_data.domain.response import to_jsonable


def make_cache_key(method: str, params: Any) -> str:
    """`method:` + JSON of params with sorted keys, so field order never matters."""

    payload = json.dumps(to_jsonable(params), sort_keys=True, separators=(",", ":"), default=str)
    return f"{method}:{payload}"


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    expires_at: float


@dataclass
class TTLCache:
    ttl_s: float = 300.0
    enabled: bool = True

    _clock: Any = field(default=time.time, repr=False)
    _entries: dict[str, CacheEntry] = field(default_factory=dict, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def get(self, key: str) -> Any | None:
        if not self.enabled:
            return None
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.expires_at <= self._clock():
                del self._entries[key]
                return None
            return entry.value

    def set(self, key: str, value: Any, ttl_s: float | None = None) -> None:
        if not self.enabled:
            return
        ttl = self.ttl_s if ttl_s is None else ttl_s
        now = self._clock()
        with self._lock:
            existing = self._entries.get(key)
            if existing is not None and existing.expires_at > now:
                return
            self._entries[key] = CacheEntry(value=value, expires_at=now + ttl)

    def invalidate(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def stats(self) -> dict[str, Any]:
        with self._lock:
            return {"size": len(self._entries), "keys": list(self._entries)}
