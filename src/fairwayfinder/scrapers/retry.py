"""Bounded retry with linear backoff for provider data requests."""

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from typing import TypeVar

from fairwayfinder.config import settings
from fairwayfinder.scrapers.errors import ProviderBlocked, ProviderFetchFailed

logger = logging.getLogger(__name__)

T = TypeVar("T")

Sleep = Callable[[float], Awaitable[None]]


class RetryController:
    """
    Run one request attempt at a time until it succeeds or attempts run out.

    Every attempt is preceded by a short random delay so requests do not land
    at machine-regular intervals. After a failed attempt ``n`` the controller
    waits ``n * backoff_seconds`` before trying again. A 403 from the provider
    (``ProviderBlocked``) and any other exception are backed off the same way;
    the block is only logged differently.
    """

    def __init__(
        self,
        max_attempts: int | None = None,
        backoff_seconds: float | None = None,
        jitter_ms: tuple[int, int] | None = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self.max_attempts = settings.scrape_max_retries if max_attempts is None else max_attempts
        self.backoff_seconds = (
            settings.scrape_backoff_seconds if backoff_seconds is None else backoff_seconds
        )
        self.jitter_ms = (
            (settings.scrape_jitter_min_ms, settings.scrape_jitter_max_ms) if jitter_ms is None else jitter_ms
        )
        self._sleep = sleep

    async def run(self, attempt: Callable[[], Awaitable[T]], label: str) -> T:
        """
        Call ``attempt`` until it returns.

        Args:
            attempt: Zero-argument coroutine function making one request
            label: Name used in log lines and in the final error

        Raises:
            ProviderFetchFailed: when the last attempt fails
        """
        last_error: BaseException | None = None

        for attempt_number in range(1, self.max_attempts + 1):
            await self._sleep(random.uniform(*self.jitter_ms) / 1000)

            try:
                return await attempt()
            except ProviderBlocked as e:
                last_error = e
                logger.warning(f"{label}: blocked on attempt {attempt_number}/{self.max_attempts}")
            except Exception as e:
                last_error = e
                logger.warning(
                    f"{label}: error on attempt {attempt_number}/{self.max_attempts}: {e}"
                )

            if attempt_number < self.max_attempts:
                delay = attempt_number * self.backoff_seconds
                logger.info(f"{label}: retrying in {delay}s...")
                await self._sleep(delay)

        raise ProviderFetchFailed(label, self.max_attempts, last_error)
