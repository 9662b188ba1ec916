"""Golf course catalog read endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from fairwayfinder.api.dependencies import get_catalog
from fairwayfinder.models.golf_course import GolfCourse
from fairwayfinder.schemas.golf_course import GolfCourseResponse
from fairwayfinder.services.course_catalog import CourseCatalog

router = APIRouter()


@router.get("/golf-courses", response_model=list[GolfCourseResponse])
async def get_golf_courses(
    catalog: CourseCatalog = Depends(get_catalog),
) -> list[GolfCourse]:
    """Get every golf course, ordered by name."""
    return await catalog.list_courses()


@router.get("/golf-courses/{course_id}", response_model=GolfCourseResponse)
async def get_golf_course(
    course_id: int,
    catalog: CourseCatalog = Depends(get_catalog),
) -> GolfCourse:
    """Get a single golf course."""
    course = await catalog.get_course_by_id(course_id)
    if course is None:
        raise HTTPException(status_code=404, detail=f"Golf course {course_id} does not exist")
    return course
