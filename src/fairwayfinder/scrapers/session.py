"""Session priming for booking platforms that track visitors with cookies."""

import logging

import httpx

from fairwayfinder.config import settings
from fairwayfinder.scrapers.errors import SessionBootstrapFailed

logger = logging.getLogger(__name__)


def browser_headers(referer: str | None = None) -> dict[str, str]:
    """Header set a desktop Chrome sends when opening a booking page."""
    headers = {
        "User-Agent": settings.user_agent,
        "Accept": (
            "text/html,application/xhtml+xml,application/xml;q=0.9,"
            "image/avif,image/webp,*/*;q=0.8"
        ),
        "Accept-Language": "en-US,en;q=0.9",
        "Upgrade-Insecure-Requests": "1",
    }
    if referer:
        headers["Referer"] = referer
    return headers


async def prime_session(client: httpx.AsyncClient, booking_url: str, referer: str) -> None:
    """
    Open the booking page so the client's cookie jar picks up session tokens.

    The response body is thrown away. Later requests made on the same
    ``client`` send the cookies back automatically.

    Raises:
        SessionBootstrapFailed: on a non-2xx response or a transport error
    """
    try:
        response = await client.get(booking_url, headers=browser_headers(referer))
    except httpx.HTTPError as e:
        raise SessionBootstrapFailed(booking_url) from e

    if not response.is_success:
        raise SessionBootstrapFailed(booking_url, response.status_code)

    logger.debug(f"Primed session at {booking_url}")
