"""Tee-time endpoints: synchronous fetch and background scrape jobs."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from fairwayfinder.api.dependencies import get_dispatcher, get_job_runner
from fairwayfinder.scrapers.errors import (
    CourseNotFound,
    JobNotFound,
    ProviderFetchFailed,
    RenderTimeout,
    SessionBootstrapFailed,
    TeeTimeError,
    UnsupportedProvider,
)
from fairwayfinder.scrapers.models import TeeTime
from fairwayfinder.schemas.tee_time import (
    ScrapeJobCreated,
    ScrapeJobStatusResponse,
    TeeTimeResponse,
)
from fairwayfinder.services.dispatcher import TeeTimeDispatcher
from fairwayfinder.tasks.scrape_job import ScrapeJobRunner

logger = logging.getLogger(__name__)
router = APIRouter()

ERROR_STATUS_CODES: dict[type[TeeTimeError], int] = {
    CourseNotFound: 404,
    JobNotFound: 404,
    UnsupportedProvider: 422,
    SessionBootstrapFailed: 502,
    ProviderFetchFailed: 502,
    RenderTimeout: 502,
}


def to_http_exception(error: TeeTimeError) -> HTTPException:
    """Map an engine error to the HTTP status the API reports it with."""
    status_code = ERROR_STATUS_CODES.get(type(error), 500)
    return HTTPException(status_code=status_code, detail=str(error))


@router.get("/golf-courses/{course_id}/tee-times", response_model=list[TeeTimeResponse])
async def get_tee_times(
    course_id: int,
    dispatcher: TeeTimeDispatcher = Depends(get_dispatcher),
) -> list[TeeTime]:
    """
    Fetch today's tee times for a course and wait for the result.

    This can take several seconds when the provider needs retries. Use the
    scrape-job endpoints to avoid holding the request open.
    """
    try:
        return await dispatcher.fetch_tee_times(course_id)
    except TeeTimeError as e:
        logger.warning(f"Tee-time fetch for course {course_id} failed: {e}")
        raise to_http_exception(e) from e


@router.post(
    "/golf-courses/{course_id}/scrape-jobs",
    response_model=ScrapeJobCreated,
    status_code=202,
)
async def start_scrape_job(
    course_id: int,
    runner: ScrapeJobRunner = Depends(get_job_runner),
) -> ScrapeJobCreated:
    """Start a background scrape for a course and return the id to poll."""
    job_id = runner.start_job(course_id)
    return ScrapeJobCreated(job_id=job_id)


@router.get(
    "/scrape-jobs/{job_id}",
    response_model=ScrapeJobStatusResponse,
    response_model_exclude_none=True,
)
async def get_scrape_job(
    job_id: str,
    runner: ScrapeJobRunner = Depends(get_job_runner),
) -> ScrapeJobStatusResponse:
    """
    Poll a background scrape.

    Returns ``{"status": "pending"}`` while it runs and
    ``{"status": "complete", "teeTimes": [...]}`` once done. Unknown ids,
    including jobs that failed, return 404.
    """
    view = runner.get_job_status(job_id)
    if not view.found:
        raise to_http_exception(JobNotFound(job_id))

    if not view.complete:
        return ScrapeJobStatusResponse(status="pending")

    return ScrapeJobStatusResponse(
        status="complete",
        tee_times=[TeeTimeResponse.model_validate(t) for t in view.results or []],
    )
