"""Test cases for grade preview and CSV export."""

import pytest
from datetime import date, datetime, timezone

from classdesk.errors import NoDataToExportError, NotFoundError
from classdesk.grades import GradeExportService
from classdesk.models import Assignment, Course, Submission
from classdesk.toolkit import DateRange, parse_grades_csv


@pytest.fixture
def service(db_session, tmp_path):
    return GradeExportService(db_session, export_dir=str(tmp_path))


class TestPreview:
    """Test cases for the grade preview."""

    def test_preview(self, service, sample_course, sample_submissions):
        preview = service.preview(sample_course.id)

        assert preview.course_title == "Life Science"
        assert preview.count == 3
        assert preview.completion_ratio == 1.0
        assert preview.average_grade == 81.0

    def test_unsubmitted_work_lowers_completion(self, db_session, service, sample_course,
                                                sample_assignment, sample_submissions):
        db_session.add(Submission(assignment_id=sample_assignment.id, student_id="student-d", submitted=False))
        db_session.commit()

        preview = service.preview(sample_course.id)

        assert preview.count == 3
        assert preview.completion_ratio == 0.75

    def test_date_range_outside_due_dates(self, service, sample_course, sample_submissions):
        preview = service.preview(sample_course.id, DateRange(start=date(2024, 6, 1)))
        assert preview.count == 0
        assert preview.average_grade is None

    def test_missing_course(self, service):
        with pytest.raises(NotFoundError):
            service.preview("missing")


class TestExport:
    """Test cases for writing the CSV."""

    def test_export_writes_filtered_rows(self, service, sample_course, sample_submissions):
        path = service.export_csv(sample_course.id, on=date(2024, 5, 20))

        assert path.name == "Grades_Life_Science_2024-05-20.csv"
        rows = parse_grades_csv(path.read_text(encoding="utf-8"))
        assert len(rows) == 3
        assert rows[0]["Student Name"] == "Ana Lopez"
        assert rows[0]["Letter Grade"] == "A-"
        assert rows[2]["Grade"] == "Not Graded"

    def test_other_courses_are_excluded(self, db_session, service, sample_course, sample_submissions):
        other = Course(title="Chemistry")
        db_session.add(other)
        db_session.flush()
        assignment = Assignment(
            course_id=other.id,
            title="Titration",
            due_date=datetime(2024, 5, 12, tzinfo=timezone.utc),
        )
        db_session.add(assignment)
        db_session.flush()
        db_session.add(Submission(assignment_id=assignment.id, student_id="student-a", student_name="Ana Lopez"))
        db_session.commit()

        path = service.export_csv(sample_course.id)

        assert len(parse_grades_csv(path.read_text(encoding="utf-8"))) == 3

    def test_nothing_to_export(self, service, sample_course, sample_assignment):
        with pytest.raises(NoDataToExportError):
            service.export_csv(sample_course.id)
