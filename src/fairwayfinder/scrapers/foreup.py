"""ForeUp booking platform provider (JSON API)."""

from datetime import date

import httpx

from fairwayfinder.scrapers.base import HttpTeeTimeProvider
from fairwayfinder.scrapers.extractors import extract_foreup_json
from fairwayfinder.scrapers.models import TeeTime
from fairwayfinder.scrapers.session import browser_headers


class ForeUpProvider(HttpTeeTimeProvider):
    """
    Provider for courses booked through ForeUp.

    The booking widget loads availability from a JSON endpoint; the course's
    fetch URL points at that endpoint with ``{DATE}`` standing in for
    ``MM-dd-yyyy``. The endpoint checks the session cookie set by the
    booking page, so the page is opened first.
    """

    name = "ForeUp"
    SITE_URL = "https://foreupsoftware.com/"

    def format_date(self, today: date) -> str:
        return today.strftime("%m-%d-%Y")

    def request_headers(self, referer: str) -> dict[str, str]:
        headers = browser_headers(referer)
        headers["Accept"] = "application/json, text/javascript, */*; q=0.01"
        headers["X-Requested-With"] = "XMLHttpRequest"
        return headers

    def extract(self, response: httpx.Response) -> list[TeeTime]:
        return extract_foreup_json(response.json())
