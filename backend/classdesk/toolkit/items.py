"""Immutable value types the toolkit functions operate on."""
from datetime import date, datetime, timezone
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator

from ..models.enums import AttendanceStatus, PeerReviewStatus


class GradedItem(BaseModel):
    """A student's submission joined with its assignment."""
    id: str
    course_id: str
    assignment_id: Optional[str] = None
    title: str
    due_date: datetime
    grade: Optional[float] = None
    student_id: str
    student_name: Optional[str] = None
    submitted: bool = False
    feedback: Optional[str] = None
    standard_ids: list[str] = []

    model_config = ConfigDict(frozen=True, from_attributes=True)


class AttendanceEntry(BaseModel):
    """Attendance for one student, in one course, on one date."""
    id: str
    course_id: str
    student_id: str
    date: date
    status: AttendanceStatus = AttendanceStatus.present

    model_config = ConfigDict(frozen=True, from_attributes=True)


class PeerReviewAssignment(BaseModel):
    id: str
    assignment_id: str
    reviewer_id: str
    submission_owner_id: str
    status: PeerReviewStatus = PeerReviewStatus.assigned
    score: Optional[float] = None

    model_config = ConfigDict(frozen=True, from_attributes=True)

    @model_validator(mode="after")
    def reviewer_is_not_owner(self):
        if self.reviewer_id == self.submission_owner_id:
            raise ValueError("A student cannot review their own submission")
        return self


class LearningStandard(BaseModel):
    """Read-only curriculum standard, e.g. CCSS.MATH.6.RP.1."""
    id: str
    subject: str
    category: str
    code: str
    title: str
    description: str
    grade_level: str

    model_config = ConfigDict(frozen=True)


class DateRange(BaseModel):
    """Inclusive date window; either bound may be left open."""
    start: Optional[Union[datetime, date]] = None
    end: Optional[Union[datetime, date]] = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def start_before_end(self):
        if self.start is not None and self.end is not None:
            if as_utc(self.start) > as_utc(self.end, end_of_day=True):
                raise ValueError("Date range start must not be after its end")
        return self

    def contains(self, value: Union[datetime, date]) -> bool:
        moment = as_utc(value)
        if self.start is not None and moment < as_utc(self.start):
            return False
        if self.end is not None and moment > as_utc(self.end, end_of_day=True):
            return False
        return True


def as_utc(value: Union[datetime, date], end_of_day: bool = False) -> datetime:
    """Coerce a date or datetime to an aware UTC datetime.

    Naive datetimes are taken to already be in UTC. A bare date becomes
    midnight, or the last microsecond of the day when ``end_of_day`` is set.
    """
    if not isinstance(value, datetime):
        clock = datetime.max.time() if end_of_day else datetime.min.time()
        value = datetime.combine(value, clock)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
