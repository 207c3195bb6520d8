"""Build persistable records from teacher form input.

Every builder returns frozen models carrying a freshly generated UUID and
dates already normalized to the strings the store expects.
"""
import uuid
from datetime import date, datetime, timezone
from typing import Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict

from ..errors import ValidationBlockedError
from ..models.enums import AttendanceStatus

DateInput = Union[date, datetime, str]


class AttendanceRecordDraft(BaseModel):
    id: str
    course_id: str
    student_id: str
    attendance_date: str
    status: AttendanceStatus
    marked_by: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class AssignmentDraft(BaseModel):
    id: str
    course_id: str
    title: str
    instructions: str
    due_date: str
    points: int
    xp_reward: int

    model_config = ConfigDict(frozen=True)


def new_id() -> str:
    return str(uuid.uuid4())


def normalize_date(value: DateInput) -> str:
    """Calendar date as ``YYYY-MM-DD``.

    Accepts a date, a datetime (its UTC date is used when aware) or an ISO
    8601 string.
    """
    if isinstance(value, str):
        value = _parse_iso(value)
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        value = value.date()
    return value.isoformat()


def normalize_timestamp(value: DateInput) -> str:
    """Moment as an ISO 8601 UTC timestamp with milliseconds, e.g. ``2024-05-01T14:00:00.000Z``."""
    if isinstance(value, str):
        value = _parse_iso(value)
    if not isinstance(value, datetime):
        value = datetime.combine(value, datetime.min.time())
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_attendance_status(value: Union[AttendanceStatus, str, None]) -> AttendanceStatus:
    """Status from a form value; blank means present."""
    if value is None or isinstance(value, AttendanceStatus):
        return value or AttendanceStatus.present
    if not value.strip():
        return AttendanceStatus.present
    status = AttendanceStatus.parse(value)
    if status is None:
        raise ValidationBlockedError("status", f"Unknown attendance status: {value}")
    return status


def build_attendance_records(
    course_id: str,
    on_date: DateInput,
    statuses: Mapping[str, Union[AttendanceStatus, str, None]],
    marked_by: Optional[str] = None,
) -> list[AttendanceRecordDraft]:
    """One draft per student in ``statuses``, in the mapping's order."""
    if not course_id:
        raise ValidationBlockedError("course_id")
    day = normalize_date(on_date)
    return [
        AttendanceRecordDraft(
            id=new_id(),
            course_id=course_id,
            student_id=student_id,
            attendance_date=day,
            status=parse_attendance_status(status),
            marked_by=marked_by,
        )
        for student_id, status in statuses.items()
    ]


def build_assignment_record(
    course_id: str,
    title: str,
    instructions: str,
    due_date: DateInput,
    points: int,
) -> AssignmentDraft:
    title = (title or "").strip()
    if not title:
        raise ValidationBlockedError("title", "Assignment title is required")
    if points is None or points < 0:
        raise ValidationBlockedError("points", "Points must be zero or more")
    return AssignmentDraft(
        id=new_id(),
        course_id=course_id,
        title=title,
        instructions=(instructions or "").strip(),
        due_date=normalize_timestamp(due_date),
        points=points,
        xp_reward=points // 2,
    )


def _parse_iso(value: str) -> Union[date, datetime]:
    text = value.strip()
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError as e:
        raise ValidationBlockedError("date", f"Not an ISO 8601 date: {value}") from e
