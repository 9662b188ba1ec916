"""Pydantic schemas for golf course data."""

from fairwayfinder.schemas.base import CamelModel


class GolfCourseResponse(CamelModel):
    """Golf course response schema."""

    id: int
    name: str
    img: str | None = None
    location: str | None = None
    booking_software: str
