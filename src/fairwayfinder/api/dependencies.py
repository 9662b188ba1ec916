"""FastAPI dependencies for engine components held on the application state."""

from fastapi import Request

from fairwayfinder.services.course_catalog import CourseCatalog
from fairwayfinder.services.dispatcher import TeeTimeDispatcher
from fairwayfinder.tasks.scrape_job import ScrapeJobRunner


def get_catalog(request: Request) -> CourseCatalog:
    return request.app.state.catalog


def get_dispatcher(request: Request) -> TeeTimeDispatcher:
    return request.app.state.dispatcher


def get_job_runner(request: Request) -> ScrapeJobRunner:
    return request.app.state.job_runner
