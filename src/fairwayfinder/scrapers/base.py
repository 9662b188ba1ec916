"""Base provider interface for all booking-platform adapters."""

import logging
from abc import ABC, abstractmethod
from datetime import date

import httpx

from fairwayfinder.config import settings
from fairwayfinder.models.golf_course import DATE_PLACEHOLDER, GolfCourse
from fairwayfinder.scrapers.errors import ProviderBlocked
from fairwayfinder.scrapers.models import TeeTime
from fairwayfinder.scrapers.retry import RetryController
from fairwayfinder.scrapers.session import browser_headers, prime_session

logger = logging.getLogger(__name__)


class BaseTeeTimeProvider(ABC):
    """
    Abstract base class for all booking-platform providers.

    The dispatcher only sees this interface, whether the provider talks plain
    HTTP or drives a browser.
    """

    name: str = "provider"

    @abstractmethod
    async def fetch(self, course: GolfCourse, today: date) -> list[TeeTime]:
        """
        Fetch today's available tee times for a course.

        Args:
            course: Catalog entry carrying the provider URLs
            today: Date to request availability for

        Returns:
            Normalized tee times, possibly empty

        Raises:
            TeeTimeError subclasses when the provider cannot be read.
        """
        pass


class HttpTeeTimeProvider(BaseTeeTimeProvider):
    """
    Provider pipeline over plain HTTP.

    Opens one client per fetch, primes the session on the booking page, then
    makes the data request under the retry controller and hands the response
    to ``extract``. Subclasses supply the date format, request headers and
    extractor for their platform.
    """

    SITE_URL: str = ""  # Sent as Referer when priming

    def __init__(self, retry: RetryController | None = None) -> None:
        self.retry = retry or RetryController()

    async def fetch(self, course: GolfCourse, today: date) -> list[TeeTime]:
        url = self.build_fetch_url(course.fetch_url, today)

        async with httpx.AsyncClient(
            timeout=settings.scrape_timeout,
            follow_redirects=True,
        ) as client:
            await prime_session(client, course.booking_url, self.SITE_URL)
            tee_times = await self.retry.run(
                lambda: self._attempt(client, url, course.booking_url),
                label=f"{self.name} ({course.name})",
            )

        logger.info(f"{self.name}: Found {len(tee_times)} tee times for {course.name}")
        return tee_times

    def build_fetch_url(self, template: str, today: date) -> str:
        """Replace the literal ``{DATE}`` in the course's fetch URL template."""
        if DATE_PLACEHOLDER not in template:
            logger.warning(f"{self.name}: fetch URL has no {DATE_PLACEHOLDER} placeholder: {template}")
        return template.replace(DATE_PLACEHOLDER, self.format_date(today))

    async def _attempt(self, client: httpx.AsyncClient, url: str, referer: str) -> list[TeeTime]:
        response = await client.get(url, headers=self.request_headers(referer))
        if response.status_code == 403:
            raise ProviderBlocked(url)
        response.raise_for_status()
        return self.extract(response)

    def request_headers(self, referer: str) -> dict[str, str]:
        """Headers for the data request. Defaults to a browser page load."""
        return browser_headers(referer)

    @abstractmethod
    def format_date(self, today: date) -> str:
        """Format the date the way the platform expects it in the URL."""
        pass

    @abstractmethod
    def extract(self, response: httpx.Response) -> list[TeeTime]:
        """Turn the data response into tee times."""
        pass
