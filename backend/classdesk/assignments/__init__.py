"""Assignments, submissions and grading."""
from .router import router as assignments_router
from .service import AssignmentService

__all__ = ["assignments_router", "AssignmentService"]
