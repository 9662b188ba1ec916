"""In-memory store of background scrape jobs."""

import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from fairwayfinder.scrapers.errors import JobNotFound
from fairwayfinder.scrapers.models import TeeTime


class JobStatus(str, Enum):
    PENDING = "pending"
    COMPLETE = "complete"


@dataclass
class ScrapeJob:
    """A tee-time scrape running (or finished) in the background."""

    id: str
    course_id: int
    status: JobStatus = JobStatus.PENDING
    results: list[TeeTime] | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    completed_at: datetime | None = None


@dataclass(frozen=True)
class JobStatusView:
    """What a poller sees for a job id."""

    found: bool
    complete: bool = False
    results: list[TeeTime] | None = None


class JobStore:
    """
    Thread-safe map of job id to ScrapeJob.

    Each job has a single writer (the task running it) and any number of
    readers. All reads and writes go through one lock, and completing a job
    sets its status and results together, so a reader never sees a complete
    job without results.

    A job that fails is removed rather than marked failed; polling its id
    afterwards looks the same as polling an id that was never issued.
    """

    def __init__(self) -> None:
        self._jobs: dict[str, ScrapeJob] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._jobs)

    def create(self, course_id: int) -> ScrapeJob:
        """Register a new pending job under a fresh random id."""
        job = ScrapeJob(id=uuid.uuid4().hex, course_id=course_id)
        with self._lock:
            self._jobs[job.id] = job
        return job

    def complete(self, job_id: str, results: list[TeeTime]) -> None:
        """Store results and mark the job complete. Complete jobs are not changed again."""
        with self._lock:
            job = self._jobs.get(job_id)
            if job is None:
                raise JobNotFound(job_id)
            if job.status is JobStatus.COMPLETE:
                return
            job.results = list(results)
            job.completed_at = datetime.now(timezone.utc)
            job.status = JobStatus.COMPLETE

    def remove(self, job_id: str) -> None:
        with self._lock:
            self._jobs.pop(job_id, None)

    def get(self, job_id: str) -> ScrapeJob | None:
        with self._lock:
            return self._jobs.get(job_id)

    def status(self, job_id: str) -> JobStatusView:
        with self._lock:
            job = self._jobs.get(job_id)
            if job is None:
                return JobStatusView(found=False)
            if job.status is JobStatus.COMPLETE:
                return JobStatusView(found=True, complete=True, results=list(job.results or []))
            return JobStatusView(found=True, complete=False)
