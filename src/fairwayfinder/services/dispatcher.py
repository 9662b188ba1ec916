"""Resolve a course to its booking platform and fetch its tee times."""

import logging
from collections.abc import Callable
from datetime import date

from fairwayfinder.scrapers import get_provider
from fairwayfinder.scrapers.errors import CourseNotFound
from fairwayfinder.scrapers.models import TeeTime
from fairwayfinder.services.course_catalog import CourseCatalog

logger = logging.getLogger(__name__)


class TeeTimeDispatcher:
    """
    Entry point of the tee-time engine.

    Looks the course up in the catalog, picks the provider registered for its
    booking-software tag and returns whatever the provider extracts. Lookup
    and tag errors are raised straight away and never retried.
    """

    def __init__(
        self,
        catalog: CourseCatalog,
        today: Callable[[], date] = date.today,
    ) -> None:
        """
        Initialize dispatcher.

        Args:
            catalog: Source of golf course records
            today: Clock for the date to request (injectable for tests)
        """
        self.catalog = catalog
        self.today = today

    async def fetch_tee_times(self, course_id: int) -> list[TeeTime]:
        """
        Fetch today's tee times for a course.

        Raises:
            CourseNotFound: if the catalog has no such course
            UnsupportedProvider: if the course's tag has no provider
            SessionBootstrapFailed, ProviderFetchFailed, RenderTimeout: from the provider
        """
        course = await self.catalog.get_course_by_id(course_id)
        if course is None:
            raise CourseNotFound(course_id)

        provider = get_provider(course.booking_software)
        logger.info(f"Fetching tee times for {course.name} ({course_id}) via {provider.name}")

        return await provider.fetch(course, self.today())
