"""Test cases for attendance taking and reporting."""

import pytest
from datetime import date
from unittest.mock import patch
from sqlalchemy.exc import IntegrityError

from classdesk.attendance import AttendanceService
from classdesk.attendance.schemas import AttendanceMark
from classdesk.errors import NotFoundError, ValidationBlockedError
from classdesk.models import AttendanceRecord, AttendanceStatus
from classdesk.toolkit import DateRange


@pytest.fixture
def service(db_session):
    return AttendanceService(db_session)


def marks(**statuses):
    return [AttendanceMark(student_id=student_id, status=status) for student_id, status in statuses.items()]


class TestTakeAttendance:
    """Test cases for take_attendance."""

    def test_records_one_row_per_student(self, service, sample_course):
        records = service.take_attendance(
            sample_course.id, date(2024, 5, 1), marks(s1=None, s2="absent", s3="Tardy"), marked_by="t1"
        )

        assert [r.status for r in records] == [
            AttendanceStatus.present, AttendanceStatus.absent, AttendanceStatus.tardy,
        ]
        assert all(r.attendance_date == date(2024, 5, 1) for r in records)
        assert all(r.marked_by == "t1" for r in records)

    def test_missing_course(self, service):
        with pytest.raises(NotFoundError):
            service.take_attendance("missing", date(2024, 5, 1), marks(s1=None))

    def test_student_listed_twice(self, service, sample_course):
        entries = marks(s1=None) + marks(s1="absent")
        with pytest.raises(ValidationBlockedError):
            service.take_attendance(sample_course.id, date(2024, 5, 1), entries)

    def test_second_batch_for_same_day_is_rejected_whole(self, db_session, service, sample_course):
        service.take_attendance(sample_course.id, date(2024, 5, 1), marks(s1=None))

        with pytest.raises(ValidationBlockedError):
            service.take_attendance(sample_course.id, date(2024, 5, 1), marks(s1="absent", s2=None))

        assert db_session.query(AttendanceRecord).count() == 1

    def test_concurrent_batch_conflict_is_a_validation_error(self, db_session, service, sample_course):
        unique_violation = IntegrityError("INSERT INTO attendance_records", {}, Exception("UNIQUE constraint failed"))
        with patch.object(db_session, "commit", side_effect=unique_violation):
            with pytest.raises(ValidationBlockedError) as exc_info:
                service.take_attendance(sample_course.id, date(2024, 5, 1), marks(s1=None))

        assert exc_info.value.field == "entries"
        assert "already recorded on 2024-05-01" in exc_info.value.message

    def test_unknown_status_writes_nothing(self, db_session, service, sample_course):
        with pytest.raises(ValidationBlockedError):
            service.take_attendance(sample_course.id, date(2024, 5, 1), marks(s1=None, s2="sick"))

        assert db_session.query(AttendanceRecord).count() == 0


class TestAttendanceReports:
    """Test cases for listing, deleting and summarizing attendance."""

    @pytest.fixture
    def two_days(self, service, sample_course):
        service.take_attendance(sample_course.id, date(2024, 5, 1), marks(s1=None, s2="absent", s3="excused"))
        service.take_attendance(sample_course.id, date(2024, 5, 8), marks(s1="tardy", s2=None))

    def test_list_with_date_range(self, service, sample_course, two_days):
        everything = service.list_attendance(sample_course.id)
        first_week = service.list_attendance(
            sample_course.id, DateRange(start=date(2024, 5, 1), end=date(2024, 5, 7))
        )

        assert len(everything) == 5
        assert len(first_week) == 3

    def test_summary(self, service, sample_course, two_days):
        summary = service.summary(sample_course.id)

        assert (summary.present, summary.absent, summary.tardy, summary.excused) == (2, 1, 1, 1)
        assert summary.total == 5
        assert summary.attendance_rate == 0.5

    def test_empty_summary(self, service, sample_course):
        assert service.summary(sample_course.id).attendance_rate == 0.0

    def test_delete_record(self, service, sample_course, two_days):
        record = service.list_attendance(sample_course.id)[0]
        service.delete_record(record.id)

        assert len(service.list_attendance(sample_course.id)) == 4
        with pytest.raises(NotFoundError):
            service.delete_record(record.id)
