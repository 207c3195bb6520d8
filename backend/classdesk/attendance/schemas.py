"""Request and response schemas for attendance."""
from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from ..models.enums import AttendanceStatus


class AttendanceMark(BaseModel):
    student_id: str
    # Blank means present
    status: Optional[str] = None


class TakeAttendanceRequest(BaseModel):
    course_id: str
    date: date
    entries: list[AttendanceMark] = Field(..., min_length=1)
    notes: Optional[str] = None


class AttendanceRecordResponse(BaseModel):
    id: str
    course_id: str
    student_id: str
    attendance_date: date
    status: AttendanceStatus
    notes: Optional[str] = None
    marked_by: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class AttendanceSummary(BaseModel):
    course_id: str
    total: int = 0
    present: int = 0
    absent: int = 0
    tardy: int = 0
    excused: int = 0

    @computed_field
    @property
    def attendance_rate(self) -> float:
        """Present over present + absent + tardy; excused days do not count."""
        counted = self.present + self.absent + self.tardy
        if counted == 0:
            return 0.0
        return self.present / counted
