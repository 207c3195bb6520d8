"""Taking, listing and deleting attendance."""
import logging
from datetime import date
from typing import Optional

from sqlalchemy import select

from ..errors import ValidationBlockedError
from ..models import AttendanceRecord, AttendanceStatus, Course
from ..services import BaseService
from ..toolkit.grade_filter import filter_attendance
from ..toolkit.items import AttendanceEntry, DateRange
from ..toolkit.records import build_attendance_records
from .schemas import AttendanceMark, AttendanceSummary

logger = logging.getLogger(__name__)


class AttendanceService(BaseService):

    def take_attendance(
        self,
        course_id: str,
        on_date: date,
        entries: list[AttendanceMark],
        marked_by: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> list[AttendanceRecord]:
        """Record one status per student for a course on a date, all or nothing."""
        self.get_or_raise(Course, course_id)
        if not entries:
            raise ValidationBlockedError("entries", "No students to record attendance for")

        statuses = {}
        for entry in entries:
            if entry.student_id in statuses:
                raise ValidationBlockedError("entries", f"Student listed twice: {entry.student_id}")
            statuses[entry.student_id] = entry.status

        already = self.db.execute(
            select(AttendanceRecord.student_id).where(
                AttendanceRecord.course_id == course_id,
                AttendanceRecord.attendance_date == on_date,
                AttendanceRecord.student_id.in_(list(statuses)),
            )
        ).scalars().all()
        if already:
            raise ValidationBlockedError(
                "entries",
                f"Attendance already recorded on {on_date.isoformat()} for: {', '.join(sorted(already))}",
            )

        drafts = build_attendance_records(course_id, on_date, statuses, marked_by=marked_by)
        records = [
            AttendanceRecord(
                id=draft.id,
                course_id=draft.course_id,
                student_id=draft.student_id,
                attendance_date=date.fromisoformat(draft.attendance_date),
                status=draft.status,
                notes=notes,
                marked_by=draft.marked_by,
            )
            for draft in drafts
        ]
        self.db.add_all(records)
        self.commit(
            f"record attendance for {len(records)} students in course {course_id}",
            conflict=("entries", f"Attendance already recorded on {on_date.isoformat()} for one or more students"),
        )
        return records

    def list_attendance(self, course_id: str, date_range: Optional[DateRange] = None) -> list[AttendanceRecord]:
        self.get_or_raise(Course, course_id)
        rows = list(self.db.execute(
            select(AttendanceRecord)
            .where(AttendanceRecord.course_id == course_id)
            .order_by(AttendanceRecord.attendance_date, AttendanceRecord.student_id)
        ).scalars())
        by_id = {row.id: row for row in rows}
        kept = filter_attendance((self._entry(row) for row in rows), course_id, date_range)
        return [by_id[entry.id] for entry in kept]

    def delete_record(self, record_id: str) -> None:
        record = self.get_or_raise(AttendanceRecord, record_id)
        self.db.delete(record)
        self.commit(f"delete attendance record {record_id}")

    def summary(self, course_id: str, date_range: Optional[DateRange] = None) -> AttendanceSummary:
        counts = {status: 0 for status in AttendanceStatus}
        records = self.list_attendance(course_id, date_range)
        for record in records:
            counts[record.status] += 1
        return AttendanceSummary(
            course_id=course_id,
            total=len(records),
            present=counts[AttendanceStatus.present],
            absent=counts[AttendanceStatus.absent],
            tardy=counts[AttendanceStatus.tardy],
            excused=counts[AttendanceStatus.excused],
        )

    @staticmethod
    def _entry(record: AttendanceRecord) -> AttendanceEntry:
        return AttendanceEntry(
            id=record.id,
            course_id=record.course_id,
            student_id=record.student_id,
            date=record.attendance_date,
            status=record.status,
        )
