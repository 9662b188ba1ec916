"""Read access to the golf course catalog."""

from abc import ABC, abstractmethod

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from fairwayfinder.models.golf_course import GolfCourse


class CourseCatalog(ABC):
    """Lookup interface the tee-time engine needs from the catalog."""

    @abstractmethod
    async def get_course_by_id(self, course_id: int) -> GolfCourse | None:
        """Return the course, or None if no course has this id."""
        pass

    @abstractmethod
    async def list_courses(self) -> list[GolfCourse]:
        """Return every course, ordered by name."""
        pass


class SqlCourseCatalog(CourseCatalog):
    """
    Catalog backed by the ``golf_courses`` table.

    Opens a short-lived session per call so it can be shared between request
    handlers and background scrape jobs.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def get_course_by_id(self, course_id: int) -> GolfCourse | None:
        async with self.session_factory() as db:
            return await db.get(GolfCourse, course_id)

    async def list_courses(self) -> list[GolfCourse]:
        async with self.session_factory() as db:
            result = await db.execute(select(GolfCourse).order_by(GolfCourse.name))
            return list(result.scalars().all())
