"""Background scrape jobs that callers start and then poll."""

import asyncio
import logging

from fairwayfinder.config import settings
from fairwayfinder.services.dispatcher import TeeTimeDispatcher
from fairwayfinder.tasks.job_store import JobStatusView, JobStore

logger = logging.getLogger(__name__)


class ScrapeJobRunner:
    """
    Run dispatcher fetches as asyncio tasks tracked in a JobStore.

    ``start_job`` returns as soon as the job is registered; the fetch runs on
    the event loop alongside request handling. At most
    ``max_concurrent_jobs`` fetches run at once; the rest wait their turn
    while still reported as pending. Jobs cannot be cancelled by callers.
    """

    def __init__(
        self,
        dispatcher: TeeTimeDispatcher,
        store: JobStore,
        max_concurrent_jobs: int | None = None,
    ) -> None:
        self.dispatcher = dispatcher
        self.store = store
        if max_concurrent_jobs is None:
            max_concurrent_jobs = settings.max_concurrent_jobs
        self._semaphore = asyncio.Semaphore(max_concurrent_jobs)
        # Strong references so running tasks are not garbage collected
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending_count(self) -> int:
        return len(self._tasks)

    def start_job(self, course_id: int) -> str:
        """Register a pending job for the course, schedule it and return its id."""
        job = self.store.create(course_id)

        task = asyncio.create_task(self._run(job.id, course_id), name=f"scrape-job-{job.id}")
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

        logger.info(f"Started scrape job {job.id} for course {course_id}")
        return job.id

    def get_job_status(self, job_id: str) -> JobStatusView:
        return self.store.status(job_id)

    async def drain(self) -> None:
        """Wait for every job started so far to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def _run(self, job_id: str, course_id: int) -> None:
        async with self._semaphore:
            try:
                tee_times = await self.dispatcher.fetch_tee_times(course_id)
            except Exception as e:
                # Failed jobs are dropped; pollers then see the id as unknown
                logger.error(f"Scrape job {job_id} for course {course_id} failed: {e}", exc_info=True)
                self.store.remove(job_id)
                return

        self.store.complete(job_id, tee_times)
        logger.info(f"Scrape job {job_id} complete: {len(tee_times)} tee times")
