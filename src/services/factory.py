"""Factory for the configured FactCheckService.

Exposes build_service, which wires the backend client, result cache, rate
limiter and retry schedule from the environment-driven settings in config.
"""

from __future__ import annotations

from clients.fact_check_client import FactCheckClient
from config import (
    CACHE_TTL_MINUTES,
    FACT_CHECK_API_KEY,
    FACT_CHECK_BASE_URL,
    FACT_CHECK_TIMEOUT,
    HTTP_VERIFY,
    RATE_LIMIT_MAX_REQUESTS,
    RATE_LIMIT_WINDOW_MS,
    RETRY_BACKOFF_FACTOR,
    RETRY_INITIAL_DELAY_MS,
    RETRY_MAX_DELAY_MS,
    RETRY_MAX_RETRIES,
)
from core.cache import TTLCache
from core.rate_limiter import SlidingWindowRateLimiter
from core.retry import RetryOptions
from services.fact_check_service import FactCheckService


def build_service() -> FactCheckService:
    client = FactCheckClient(
        base_url=FACT_CHECK_BASE_URL,
        timeout=FACT_CHECK_TIMEOUT,
        verify=HTTP_VERIFY,
        api_key=FACT_CHECK_API_KEY,
    )
    return FactCheckService(
        client=client,
        cache=TTLCache(ttl_minutes=CACHE_TTL_MINUTES),
        limiter=SlidingWindowRateLimiter(
            window_ms=RATE_LIMIT_WINDOW_MS,
            max_requests=RATE_LIMIT_MAX_REQUESTS,
        ),
        retry_options=RetryOptions(
            max_retries=RETRY_MAX_RETRIES,
            initial_delay_ms=RETRY_INITIAL_DELAY_MS,
            max_delay_ms=RETRY_MAX_DELAY_MS,
            backoff_factor=RETRY_BACKOFF_FACTOR,
        ),
    )
