"""Pydantic schemas for tee times and scrape jobs."""

from typing import Literal

from fairwayfinder.schemas.base import CamelModel


class TeeTimeResponse(CamelModel):
    """Individual tee time."""

    time: str
    course_name: str
    available_spots: int
    green_fee: float


class ScrapeJobCreated(CamelModel):
    """Response for starting a background scrape."""

    job_id: str


class ScrapeJobStatusResponse(CamelModel):
    """Poll response for a background scrape. ``tee_times`` is set once complete."""

    status: Literal["pending", "complete"]
    tee_times: list[TeeTimeResponse] | None = None
