"""Tests for the in-memory scrape job store."""

import threading
from decimal import Decimal

import pytest

from fairwayfinder.scrapers.errors import JobNotFound
from fairwayfinder.scrapers.models import TeeTime
from fairwayfinder.tasks.job_store import JobStatus, JobStatusView, JobStore

TEE_TIMES = [TeeTime("7:30 AM", "Pine Hills", 2, Decimal("45.00"))]


@pytest.fixture
def store() -> JobStore:
    return JobStore()


class TestJobStore:
    def test_new_job_is_pending(self, store: JobStore) -> None:
        job = store.create(course_id=1)

        assert job.status is JobStatus.PENDING
        assert job.results is None
        assert store.status(job.id) == JobStatusView(found=True, complete=False)

    def test_ids_are_unique(self, store: JobStore) -> None:
        ids = {store.create(course_id=1).id for _ in range(100)}
        assert len(ids) == 100
        assert len(store) == 100

    def test_complete_stores_results(self, store: JobStore) -> None:
        job = store.create(course_id=1)

        store.complete(job.id, TEE_TIMES)

        view = store.status(job.id)
        assert view.found and view.complete
        assert view.results == TEE_TIMES
        assert store.get(job.id).completed_at is not None

    def test_complete_job_is_not_overwritten(self, store: JobStore) -> None:
        job = store.create(course_id=1)
        store.complete(job.id, TEE_TIMES)

        store.complete(job.id, [])

        assert store.status(job.id).results == TEE_TIMES

    def test_complete_unknown_job_raises(self, store: JobStore) -> None:
        with pytest.raises(JobNotFound):
            store.complete("missing", TEE_TIMES)

    def test_removed_job_is_not_found(self, store: JobStore) -> None:
        job = store.create(course_id=1)

        store.remove(job.id)

        assert store.status(job.id) == JobStatusView(found=False)
        assert store.get(job.id) is None

    def test_remove_unknown_job_is_a_no_op(self, store: JobStore) -> None:
        store.remove("missing")
        assert len(store) == 0

    def test_unissued_id_is_not_found(self, store: JobStore) -> None:
        assert store.status("0123456789abcdef").found is False

    def test_status_results_are_a_copy(self, store: JobStore) -> None:
        job = store.create(course_id=1)
        store.complete(job.id, TEE_TIMES)

        store.status(job.id).results.clear()

        assert store.status(job.id).results == TEE_TIMES

    def test_concurrent_writers_and_readers(self, store: JobStore) -> None:
        jobs = [store.create(course_id=i) for i in range(200)]
        errors: list[Exception] = []

        def complete_all() -> None:
            for job in jobs:
                store.complete(job.id, TEE_TIMES)

        def poll_all() -> None:
            try:
                for _ in range(5):
                    for job in jobs:
                        view = store.status(job.id)
                        # A complete job always carries its results
                        assert not view.complete or view.results == TEE_TIMES
            except AssertionError as e:
                errors.append(e)

        threads = [threading.Thread(target=complete_all)] + [
            threading.Thread(target=poll_all) for _ in range(4)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert all(store.status(job.id).complete for job in jobs)
