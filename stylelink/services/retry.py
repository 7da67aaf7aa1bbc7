import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import httpx

logger = logging.getLogger(__name__)

RETRYABLE_STATUSES = (429, 500, 502, 503, 504)


@dataclass(frozen=True)
class RetryPolicy:
    """How many times an outbound provider call is attempted.

    ``RetryPolicy.none()`` makes exactly one attempt. ``bounded`` retries
    transport errors and 429/5xx responses with a linear backoff.
    """

    max_attempts: int = 1
    backoff_seconds: float = 0.0
    retry_statuses: tuple[int, ...] = RETRYABLE_STATUSES

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

    @classmethod
    def none(cls) -> "RetryPolicy":
        return cls(max_attempts=1)

    @classmethod
    def bounded(cls, attempts: int, backoff_seconds: float = 0.5) -> "RetryPolicy":
        return cls(max_attempts=attempts, backoff_seconds=backoff_seconds)

    async def send(self, call: Callable[[], Awaitable[httpx.Response]]) -> httpx.Response:
        """Run ``call`` until it yields a non-retryable response or attempts run out."""
        attempt = 1
        while True:
            last_attempt = attempt >= self.max_attempts
            try:
                resp = await call()
            except httpx.TransportError as exc:
                if last_attempt:
                    raise
                logger.warning(
                    "Transport error (attempt %d/%d), retrying: %s",
                    attempt, self.max_attempts, exc,
                )
            else:
                if last_attempt or resp.status_code not in self.retry_statuses:
                    return resp
                logger.warning(
                    "Provider returned %d (attempt %d/%d), retrying",
                    resp.status_code, attempt, self.max_attempts,
                )
            await asyncio.sleep(self.backoff_seconds * attempt)
            attempt += 1
