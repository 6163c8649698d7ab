"""Fact-check request flow built on the cache, retry and rate-limit primitives.

A request is admitted by the rate limiter, recorded, looked up in the cache,
and on a miss sent to the backend through `with_retry`. The backend payload
is validated inside the retried action so malformed output is retried too.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from clients.fact_check_client import FactCheckClient
from core.cache import TTLCache
from core.errors import RateLimitedError, ValidationError
from core.keys import UNKNOWN_IDENTITY, cache_key_for_text, normalize_text
from core.models import FactCheckResult, parse_results
from core.rate_limiter import SlidingWindowRateLimiter
from core.retry import RetryOptions, with_retry

logger = logging.getLogger("factcheck_mcp.fact_check_service")


class FactCheckService:
    def __init__(
        self,
        *,
        client: FactCheckClient,
        cache: Optional[TTLCache[Tuple[FactCheckResult, ...]]] = None,
        limiter: Optional[SlidingWindowRateLimiter] = None,
        retry_options: Optional[RetryOptions] = None,
    ) -> None:
        self._client = client
        self._cache: TTLCache[Tuple[FactCheckResult, ...]] = cache if cache is not None else TTLCache()
        self._limiter = limiter if limiter is not None else SlidingWindowRateLimiter()
        self._retry_options = retry_options or RetryOptions()

    async def check(self, text: Any, identity: str = UNKNOWN_IDENTITY) -> List[FactCheckResult]:
        if self._limiter.is_limited(identity):
            logger.warning("Rate limit exceeded for %s", identity)
            raise RateLimitedError("Too many requests. Please try again later.")

        self._limiter.record(identity)

        if not isinstance(text, str) or not normalize_text(text):
            raise ValidationError("Invalid input. Please provide a text to fact-check.")

        key = cache_key_for_text(text)
        cached = self._cache.get(key)
        if cached is not None:
            logger.info("Cache hit for %s", key)
            return list(cached)

        logger.info("Cache miss for %s; calling backend", key)
        results = await with_retry(lambda: self._fetch(text), self._retry_options)

        self._cache.set(key, tuple(results))
        return results

    def clear_cache(self) -> None:
        self._cache.clear()
        logger.info("Fact-check cache cleared")

    async def _fetch(self, text: str) -> List[FactCheckResult]:
        try:
            payload = await self._client.check(text)
            return parse_results(payload)
        except Exception as e:
            logger.warning("Fact-check attempt failed: %s", e)
            raise
