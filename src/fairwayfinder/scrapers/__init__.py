"""Provider registry for mapping booking-software tags to provider classes."""

from typing import Type

from fairwayfinder.scrapers.base import BaseTeeTimeProvider, HttpTeeTimeProvider
from fairwayfinder.scrapers.browser import BrowserRenderedProvider
from fairwayfinder.scrapers.errors import UnsupportedProvider
from fairwayfinder.scrapers.foreup import ForeUpProvider
from fairwayfinder.scrapers.golfrev import GolfRevProvider
from fairwayfinder.scrapers.models import BookingSoftware, TeeTime

# Registry mapping booking-software tags to provider classes.
# Every BookingSoftware member must have an entry.
PROVIDER_REGISTRY: dict[BookingSoftware, Type[BaseTeeTimeProvider]] = {
    BookingSoftware.FOREUP: ForeUpProvider,
    BookingSoftware.GOLFREV: GolfRevProvider,
    BookingSoftware.GOLFREV_RENDERED: BrowserRenderedProvider,
}


def get_provider(tag: str | None) -> BaseTeeTimeProvider:
    """
    Get a provider instance for a course's booking-software tag.

    Args:
        tag: The tag stored on the course (e.g., "foreup", "golfrev")

    Returns:
        Provider instance

    Raises:
        UnsupportedProvider: if the tag is not a registered booking platform
    """
    try:
        software = BookingSoftware((tag or "").strip().lower())
    except ValueError:
        raise UnsupportedProvider(tag) from None

    provider_class = PROVIDER_REGISTRY.get(software)
    if provider_class is None:
        raise UnsupportedProvider(tag)
    return provider_class()


__all__ = [
    "PROVIDER_REGISTRY",
    "get_provider",
    "BaseTeeTimeProvider",
    "BookingSoftware",
    "BrowserRenderedProvider",
    "ForeUpProvider",
    "GolfRevProvider",
    "HttpTeeTimeProvider",
    "TeeTime",
]
