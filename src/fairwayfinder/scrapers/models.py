"""Data models for scrapers."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class BookingSoftware(str, Enum):
    """Booking platforms a golf course can be wired to."""

    FOREUP = "foreup"
    GOLFREV = "golfrev"
    GOLFREV_RENDERED = "golfrev-rendered"  # GolfRev pages whose cards are injected by script


@dataclass(frozen=True)
class TeeTime:
    """
    Normalized tee-time listing.

    This is the output format that all providers must return. Instances are
    only built from source records that carried all four fields.
    """

    time: str  # Display time, e.g. "7:30 AM"
    course_name: str  # Course name as reported by the provider
    available_spots: int
    green_fee: Decimal

    def __post_init__(self) -> None:
        """Validate that numeric fields are non-negative."""
        if self.available_spots < 0:
            raise ValueError("available_spots must be non-negative")
        if self.green_fee < 0:
            raise ValueError("green_fee must be non-negative")
