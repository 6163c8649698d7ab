from __future__ import annotations

import hashlib
from typing import Optional

"""
Key helpers used by the fact-check service.

Cache keys are derived from normalized request text; rate-limit identities
come from a forwarded-address style value.
"""

UNKNOWN_IDENTITY = "unknown"

_CACHE_KEY_PREFIX = "fact-check:"


def normalize_text(text: str) -> str:
    """Trim surrounding whitespace so equivalent submissions share a key."""
    return (text or "").strip()


def cache_key_for_text(text: str) -> str:
    """Return a stable cache key for a submitted text."""
    digest = hashlib.sha256(normalize_text(text).encode("utf-8")).hexdigest()
    return f"{_CACHE_KEY_PREFIX}{digest}"


def resolve_identity(raw: Optional[str]) -> str:
    """Pick the client identity from an X-Forwarded-For style value.

    Uses the first comma-separated entry; falls back to 'unknown'.
    """
    first = (raw or "").split(",", 1)[0].strip()
    return first or UNKNOWN_IDENTITY
