"""Retry handler with pluggable retry predicate and backoff."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

RETRYABLE_ERROR_NAMES = frozenset({"NetworkError", "RateLimitError"})


def is_retryable_error(error: BaseException) -> bool:
    """Network failures, rate limits and anything whose message mentions a timeout."""
    if any(cls.__name__ in RETRYABLE_ERROR_NAMES for cls in type(error).__mro__):
        return True
    if isinstance(error, (TimeoutError, ConnectionError)):
        return True
    return "timeout" in str(error)


@dataclass
class RetryOptions:
    max_retries: int = 3
    base_delay: float = 1.0  # seconds
    max_delay: float = 30.0
    exponential: bool = True
    on_retry: Callable[[int, Exception], None] | None = None

    def __post_init__(self) -> None:
        if self.max_retries < 1:
            raise ValueError("max_retries must be >= 1")


@dataclass
class RetryStrategy:
    should_retry: Callable[[Exception, int], bool]
    get_delay: Callable[[int], float]


class RetryHandler:
    def __init__(self, options: RetryOptions | None = None) -> None:
        self.options = options or RetryOptions()
        self.strategy = RetryStrategy(
            should_retry=self._default_should_retry,
            get_delay=self._default_get_delay,
        )

    async def execute(self, operation: Callable[[], Awaitable[T]]) -> T:
        attempt = 0
        last_err: Exception | None = None
        while attempt < self.options.max_retries:
            try:
                return await operation()
            except Exception as e:
                last_err = e
                attempt += 1
                if not self.strategy.should_retry(e, attempt):
                    raise
                delay = self.strategy.get_delay(attempt)
                logger.debug("Retrying after %s (attempt %d, delay %.2fs)", type(e).__name__, attempt, delay)
                if self.options.on_retry:
                    self.options.on_retry(attempt, e)
                await asyncio.sleep(delay)
        # only reachable with a custom should_retry that ignores the attempt bound
        raise last_err

    def set_strategy(
        self,
        should_retry: Callable[[Exception, int], bool] | None = None,
        get_delay: Callable[[int], float] | None = None,
    ) -> None:
        if should_retry is not None:
            self.strategy.should_retry = should_retry
        if get_delay is not None:
            self.strategy.get_delay = get_delay

    def _default_should_retry(self, error: Exception, attempt: int) -> bool:
        return is_retryable_error(error) and attempt < self.options.max_retries

    def _default_get_delay(self, attempt: int) -> float:
        if self.options.exponential:
            return min(self.options.base_delay * (2 ** (attempt - 1)), self.options.max_delay)
        return self.options.base_delay
