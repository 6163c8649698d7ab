"""Retry with exponential backoff for unreliable async calls.

The wrapped action is re-invoked until it succeeds or the attempt budget is
spent. Delays start at initial_delay_ms, grow by backoff_factor and are capped
at max_delay_ms. When every attempt fails, the last exception is re-raised
unchanged.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class RetryOptions:
    max_retries: int = 3
    initial_delay_ms: float = 1000
    max_delay_ms: float = 10000
    backoff_factor: float = 2

    def __post_init__(self) -> None:
        if int(self.max_retries) < 1:
            raise ValueError("max_retries must be at least 1")
        if self.initial_delay_ms < 0 or self.max_delay_ms < 0:
            raise ValueError("Retry delays must not be negative")
        if self.backoff_factor <= 0:
            raise ValueError("backoff_factor must be positive")


async def with_retry(
    action: Callable[[], Awaitable[T]],
    options: Optional[RetryOptions] = None,
    *,
    retry_if: Optional[Callable[[Exception], bool]] = None,
) -> T:
    """Run `action` until it succeeds, sleeping between failed attempts.

    Params:
      - action: zero-argument callable returning an awaitable.
      - options: attempt budget and delay schedule (defaults: 3 / 1000ms / 10000ms / x2).
      - retry_if: optional predicate; when it returns False for an error, that
        error is raised immediately instead of being retried.

    Raises:
      The exception from the last attempt, unwrapped.
    """
    opts = options or RetryOptions()
    attempts = int(opts.max_retries)
    delay = float(opts.initial_delay_ms)

    for attempt in range(attempts):
        try:
            return await action()
        except Exception as e:
            # No wait after the final attempt
            if attempt == attempts - 1:
                raise
            if retry_if is not None and not retry_if(e):
                raise

        await asyncio.sleep(delay / 1000.0)
        delay = min(delay * opts.backoff_factor, float(opts.max_delay_ms))

    raise AssertionError("unreachable")
