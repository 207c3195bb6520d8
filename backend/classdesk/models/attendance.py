"""Attendance record model."""

from sqlalchemy import Column, String, Text, Date, DateTime, ForeignKey, Enum as SQLEnum, UniqueConstraint
from sqlalchemy.sql import func
import uuid

from ..database import Base
from .enums import AttendanceStatus


class AttendanceRecord(Base):
    """One student's attendance in one course on one date. Created or deleted, never updated."""
    __tablename__ = "attendance_records"
    __table_args__ = (
        UniqueConstraint("course_id", "student_id", "attendance_date", name="uq_attendance_course_student_date"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    course_id = Column(String(36), ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True)
    student_id = Column(String(36), nullable=False, index=True)
    attendance_date = Column(Date, nullable=False)
    status = Column(SQLEnum(AttendanceStatus), nullable=False, default=AttendanceStatus.present)
    notes = Column(Text)
    marked_by = Column(String(36))
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<AttendanceRecord(id={self.id}, student_id={self.student_id}, status={self.status.value})>"
