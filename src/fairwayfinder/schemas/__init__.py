"""Pydantic schemas for API requests and responses."""

from fairwayfinder.schemas.golf_course import GolfCourseResponse
from fairwayfinder.schemas.tee_time import (
    ScrapeJobCreated,
    ScrapeJobStatusResponse,
    TeeTimeResponse,
)

__all__ = [
    "GolfCourseResponse",
    "ScrapeJobCreated",
    "ScrapeJobStatusResponse",
    "TeeTimeResponse",
]
