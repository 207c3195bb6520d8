"""Courses, modules and lessons."""
from .router import router as courses_router
from .service import CourseService

__all__ = ["courses_router", "CourseService"]
