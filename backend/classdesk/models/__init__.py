"""SQLAlchemy models for the ClassDesk teacher API."""

from .enums import AttendanceStatus, PeerReviewStatus, LessonType
from .course import Course, CourseModule, Lesson
from .assignment import Assignment, Submission
from .attendance import AttendanceRecord
from .peer_review import PeerReview

__all__ = [
    "AttendanceStatus",
    "PeerReviewStatus",
    "LessonType",
    "Course",
    "CourseModule",
    "Lesson",
    "Assignment",
    "Submission",
    "AttendanceRecord",
    "PeerReview",
]
