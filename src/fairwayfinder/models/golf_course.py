"""Golf course model, read by the tee-time engine."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from fairwayfinder.models.base import Base, TimestampMixin

DATE_PLACEHOLDER = "{DATE}"


class GolfCourse(Base, TimestampMixin):
    """
    Golf course catalog entry.

    ``booking_software`` selects the provider adapter. ``fetch_url`` is the
    availability endpoint with a literal ``{DATE}`` placeholder, and
    ``booking_url`` is the public booking page used to prime sessions.
    """

    __tablename__ = "golf_courses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    img: Mapped[str | None] = mapped_column(String(500), nullable=True)
    location: Mapped[str | None] = mapped_column(String(200), nullable=True)

    # Provider configuration
    booking_software: Mapped[str] = mapped_column(String(50), nullable=False)
    fetch_url: Mapped[str] = mapped_column(Text, nullable=False)
    booking_url: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<GolfCourse(id={self.id!r}, name={self.name!r}, "
            f"booking_software={self.booking_software!r})>"
        )
