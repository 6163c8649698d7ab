"""Small in-memory TTL cache with lazy expiry.

Entries are stamped with a monotonic insertion time and dropped when a read
finds them older than the configured TTL. There is no background sweep.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Dict, Generic, Optional, TypeVar

T = TypeVar("T")


def _now_ms() -> float:
    return time.monotonic() * 1000.0


@dataclass(slots=True)
class CacheEntry(Generic[T]):
    # Stores value + monotonic insertion time (ms)
    value: T
    inserted_at: float


class TTLCache(Generic[T]):
    def __init__(self, ttl_minutes: float = 60) -> None:
        self._ttl_ms = float(ttl_minutes) * 60 * 1000
        self._store: Dict[str, CacheEntry[T]] = {}

    @property
    def ttl_ms(self) -> float:
        return self._ttl_ms

    def get(self, key: str) -> Optional[T]:
        entry = self._store.get(key)
        if entry is None:
            return None

        # Still valid at exactly ttl; expired strictly after it
        if _now_ms() - entry.inserted_at > self._ttl_ms:
            self._store.pop(key, None)
            return None

        return entry.value

    def set(self, key: str, value: T) -> None:
        self._store[key] = CacheEntry(value=value, inserted_at=_now_ms())

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)
