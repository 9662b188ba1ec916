"""Fetch tee times for one course from the command line.

Usage:
    python -m fairwayfinder.scripts.fetch_tee_times --course-id 3
    python -m fairwayfinder.scripts.fetch_tee_times --course-id 3 --background
"""

import argparse
import asyncio
import logging
import sys

from fairwayfinder.config import settings
from fairwayfinder.database import AsyncSessionLocal, engine
from fairwayfinder.scrapers.errors import TeeTimeError
from fairwayfinder.scrapers.models import TeeTime
from fairwayfinder.services.course_catalog import SqlCourseCatalog
from fairwayfinder.services.dispatcher import TeeTimeDispatcher
from fairwayfinder.tasks.job_store import JobStore
from fairwayfinder.tasks.scrape_job import ScrapeJobRunner

POLL_INTERVAL_SECONDS = 1.0


async def fetch_via_job(runner: ScrapeJobRunner, course_id: int) -> list[TeeTime] | None:
    """Start a background job and poll it the way an API client would."""
    job_id = runner.start_job(course_id)
    print(f"Started job {job_id}")

    while True:
        await asyncio.sleep(POLL_INTERVAL_SECONDS)
        view = runner.get_job_status(job_id)
        if not view.found:
            return None
        if view.complete:
            return view.results or []
        print("  ...pending")


async def fetch(course_id: int, background: bool) -> bool:
    """Print the tee times for a course and return True on success."""
    dispatcher = TeeTimeDispatcher(SqlCourseCatalog(AsyncSessionLocal))

    try:
        if background:
            tee_times = await fetch_via_job(ScrapeJobRunner(dispatcher, JobStore()), course_id)
            if tee_times is None:
                print(f"Job for course {course_id} failed (see log)")
                return False
        else:
            tee_times = await dispatcher.fetch_tee_times(course_id)
    except TeeTimeError as e:
        print(f"Error: {e}")
        return False
    finally:
        await engine.dispose()

    print(f"{len(tee_times)} tee time{'s' if len(tee_times) != 1 else ''} for course {course_id}\n")
    for t in tee_times:
        print(f"  {t.time:>8}  {t.course_name:<35} {t.available_spots} spots  ${t.green_fee}")
    return True


def main() -> None:
    parser = argparse.ArgumentParser(description="Fetch today's tee times for a golf course.")
    parser.add_argument("--course-id", type=int, required=True, metavar="N", help="Course id")
    parser.add_argument(
        "--background",
        action="store_true",
        help="Run as a background scrape job and poll for the result",
    )
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level)
    ok = asyncio.run(fetch(args.course_id, args.background))
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
