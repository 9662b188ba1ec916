"""SQLAlchemy ORM models."""

from fairwayfinder.models.base import Base
from fairwayfinder.models.golf_course import GolfCourse

__all__ = ["Base", "GolfCourse"]
