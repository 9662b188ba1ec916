"""Exceptions raised by the tee-time acquisition pipeline."""


class TeeTimeError(Exception):
    """Base class for all tee-time acquisition errors."""


class CourseNotFound(TeeTimeError):
    """The course catalog has no course with the requested id."""

    def __init__(self, course_id: int) -> None:
        self.course_id = course_id
        super().__init__(f"Golf course {course_id} does not exist")


class UnsupportedProvider(TeeTimeError):
    """A course's booking-software tag has no registered provider."""

    def __init__(self, tag: str | None) -> None:
        self.tag = tag
        super().__init__(f"Unsupported booking software: {tag!r}")


class SessionBootstrapFailed(TeeTimeError):
    """The priming request to the booking page did not succeed."""

    def __init__(self, url: str, status_code: int | None = None) -> None:
        self.url = url
        self.status_code = status_code
        if status_code is None:
            message = f"Session priming request to {url} failed"
        else:
            message = f"Session priming request to {url} returned HTTP {status_code}"
        super().__init__(message)


class ProviderBlocked(TeeTimeError):
    """The provider answered with HTTP 403. Consumed by the retry controller."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Request to {url} was blocked (HTTP 403)")


class ProviderFetchFailed(TeeTimeError):
    """Every attempt at a provider data request failed."""

    def __init__(self, label: str, attempts: int, last_error: BaseException | None) -> None:
        self.label = label
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(f"{label}: fetch failed after {attempts} attempts: {last_error}")


class RenderTimeout(TeeTimeError):
    """The browser never saw the availability cards appear."""

    def __init__(self, url: str, timeout_seconds: float) -> None:
        self.url = url
        self.timeout_seconds = timeout_seconds
        super().__init__(f"Tee-time cards did not render at {url} within {timeout_seconds}s")


class JobNotFound(TeeTimeError):
    """No scrape job with this id is known (never issued, or removed after failure)."""

    def __init__(self, job_id: str) -> None:
        self.job_id = job_id
        super().__init__(f"Scrape job {job_id} not found")
