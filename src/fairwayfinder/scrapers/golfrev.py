"""GolfRev booking platform provider (server-rendered HTML)."""

from datetime import date
from urllib.parse import quote

import httpx

from fairwayfinder.scrapers.base import HttpTeeTimeProvider
from fairwayfinder.scrapers.extractors import extract_golfrev_html
from fairwayfinder.scrapers.models import TeeTime


class GolfRevProvider(HttpTeeTimeProvider):
    """
    Provider for courses booked through GolfRev.

    The tee sheet endpoint returns an HTML fragment of availability cards.
    It takes the date as ``M/d/yyyy``, URL-escaped: ``5%2F18%2F2025``.
    """

    name = "GolfRev"
    SITE_URL = "https://www.golfrev.com/"

    def format_date(self, today: date) -> str:
        return quote(f"{today.month}/{today.day}/{today.year}", safe="")

    def extract(self, response: httpx.Response) -> list[TeeTime]:
        return extract_golfrev_html(response.text)
