"""Shared test fixtures."""

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI

from fairwayfinder.api.routes import golf_courses, health, tee_times
from fairwayfinder.models.golf_course import GolfCourse
from fairwayfinder.services.course_catalog import CourseCatalog
from fairwayfinder.services.dispatcher import TeeTimeDispatcher
from fairwayfinder.tasks.job_store import JobStore
from fairwayfinder.tasks.scrape_job import ScrapeJobRunner


class InMemoryCourseCatalog(CourseCatalog):
    """Catalog over a plain list, for tests that do not need a database."""

    def __init__(self, courses: list[GolfCourse] | None = None) -> None:
        self.courses = {c.id: c for c in courses or []}

    async def get_course_by_id(self, course_id: int) -> GolfCourse | None:
        return self.courses.get(course_id)

    async def list_courses(self) -> list[GolfCourse]:
        return sorted(self.courses.values(), key=lambda c: c.name)


def make_course(
    id: int = 1,
    name: str = "Pine Hills",
    booking_software: str = "foreup",
    fetch_url: str = "https://x/api?date={DATE}",
) -> GolfCourse:
    return GolfCourse(
        id=id,
        name=name,
        img="https://img.example.com/pine-hills.jpg",
        location="Plymouth, MA",
        booking_software=booking_software,
        fetch_url=fetch_url,
        booking_url="https://x/booking",
    )


@pytest.fixture
def pine_hills() -> GolfCourse:
    return make_course()


@pytest.fixture
def catalog(pine_hills: GolfCourse) -> InMemoryCourseCatalog:
    return InMemoryCourseCatalog(
        [
            pine_hills,
            make_course(id=2, name="Old Barnstable", booking_software="golfrev"),
            make_course(id=3, name="Cedar Ridge", booking_software="golfnow"),
        ]
    )


@pytest.fixture
def dispatcher() -> AsyncMock:
    return AsyncMock(spec=TeeTimeDispatcher)


@pytest.fixture
def job_runner(dispatcher: AsyncMock) -> ScrapeJobRunner:
    return ScrapeJobRunner(dispatcher, JobStore(), max_concurrent_jobs=4)


@pytest.fixture
def test_app(
    catalog: InMemoryCourseCatalog,
    dispatcher: AsyncMock,
    job_runner: ScrapeJobRunner,
) -> FastAPI:
    """Minimal FastAPI app without the database lifespan, for API tests."""
    app = FastAPI()
    app.include_router(health.router)
    app.include_router(golf_courses.router, prefix="/api")
    app.include_router(tee_times.router, prefix="/api")
    app.state.catalog = catalog
    app.state.dispatcher = dispatcher
    app.state.job_runner = job_runner
    return app
