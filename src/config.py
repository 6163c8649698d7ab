"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (backend
URL and timeout, cache TTL, rate-limit window and retry schedule).
"""

from __future__ import annotations

import os


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


# Network / HTTP
HTTP_VERIFY = _env_bool("HTTP_VERIFY", True)

# Fact-check backend
FACT_CHECK_BASE_URL = os.environ.get("FACT_CHECK_BASE_URL", "http://localhost:8000").strip()
FACT_CHECK_TIMEOUT = _env_float("FACT_CHECK_TIMEOUT", 60.0)
FACT_CHECK_API_KEY = os.environ.get("FACT_CHECK_API_KEY", "").strip() or None

# Result cache
CACHE_TTL_MINUTES = _env_float("CACHE_TTL_MINUTES", 60.0)

# Rate limiting
RATE_LIMIT_WINDOW_MS = _env_int("RATE_LIMIT_WINDOW_MS", 60_000)
RATE_LIMIT_MAX_REQUESTS = _env_int("RATE_LIMIT_MAX_REQUESTS", 10)

# Retry schedule for backend calls
RETRY_MAX_RETRIES = _env_int("RETRY_MAX_RETRIES", 3)
RETRY_INITIAL_DELAY_MS = _env_int("RETRY_INITIAL_DELAY_MS", 1000)
RETRY_MAX_DELAY_MS = _env_int("RETRY_MAX_DELAY_MS", 5000)
RETRY_BACKOFF_FACTOR = _env_float("RETRY_BACKOFF_FACTOR", 2.0)

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
