"""Per-identity sliding-window rate limiting.

Checking and recording are separate steps: `is_limited` prunes the identity's
log to the trailing window and reports whether the threshold is reached, while
`record` appends a timestamp. Callers decide which requests to record.
"""

from __future__ import annotations

import time
from typing import List, MutableMapping, Optional


class SlidingWindowRateLimiter:
    # Request log: identity -> ascending timestamps (monotonic ms)
    def __init__(
        self,
        *,
        window_ms: float = 60_000,
        max_requests: int = 10,
        log: Optional[MutableMapping[str, List[float]]] = None,
    ) -> None:
        self._window_ms = float(window_ms)
        self._max_requests = int(max_requests)
        self._log: MutableMapping[str, List[float]] = {} if log is None else log

    @property
    def window_ms(self) -> float:
        return self._window_ms

    @property
    def max_requests(self) -> int:
        return self._max_requests

    def is_limited(self, identity: str) -> bool:
        now = self._now_ms()
        cutoff = now - self._window_ms

        # Prune unconditionally, even when the verdict is "limited"
        recent = [t for t in self._log.get(identity, []) if t > cutoff]
        self._log[identity] = recent

        return len(recent) >= self._max_requests

    def record(self, identity: str) -> None:
        self._log.setdefault(identity, []).append(self._now_ms())

    def _now_ms(self) -> float:
        return time.monotonic() * 1000.0
