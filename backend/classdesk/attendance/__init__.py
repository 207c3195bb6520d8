"""Attendance taking and reporting."""
from .router import router as attendance_router
from .service import AttendanceService

__all__ = ["attendance_router", "AttendanceService"]
