"""Test cases for course, module and lesson management."""

import pytest
from unittest.mock import patch
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from classdesk.courses import CourseService
from classdesk.courses.schemas import CourseCreate, LessonCreate, LessonUpdate
from classdesk.errors import NotFoundError, OperationFailedError, ValidationBlockedError
from classdesk.models import CourseModule, Lesson, LessonType


@pytest.fixture
def service(db_session):
    return CourseService(db_session)


class TestCourses:
    """Test cases for courses."""

    def test_create_and_list(self, service):
        course = service.create_course(CourseCreate(title="  Algebra I "), teacher_id="t1")
        service.create_course(CourseCreate(title="Biology"), teacher_id="t2")

        assert course.title == "Algebra I"
        assert [c.title for c in service.list_courses(teacher_id="t1")] == ["Algebra I"]

    def test_missing_course(self, service):
        with pytest.raises(NotFoundError):
            service.get_course("missing")


class TestModules:
    """Test cases for module management."""

    def test_modules_are_appended(self, service, sample_course):
        first = service.create_module(sample_course.id, "Cells")
        second = service.create_module(sample_course.id, "Genetics")

        assert (first.order_index, second.order_index) == (0, 1)

    def test_blank_title_is_rejected(self, service, sample_course):
        with pytest.raises(ValidationBlockedError):
            service.create_module(sample_course.id, "   ")

    def test_rename(self, service, sample_module):
        assert service.rename_module(sample_module.id, " Cell Biology ").title == "Cell Biology"

    def test_delete_renumbers_and_removes_lessons(self, db_session, service, sample_course, sample_module):
        lesson_id = sample_module.lessons[0].id
        second = service.create_module(sample_course.id, "Genetics")

        service.delete_module(sample_module.id)

        assert db_session.get(CourseModule, sample_module.id) is None
        assert db_session.get(Lesson, lesson_id) is None
        db_session.refresh(second)
        assert second.order_index == 0

    def test_reorder(self, service, sample_course, sample_module):
        second = service.create_module(sample_course.id, "Genetics")

        course = service.reorder_modules(sample_course.id, [second.id, sample_module.id])

        assert [m.title for m in course.modules] == ["Genetics", "Cells"]

    def test_reorder_requires_every_module(self, service, sample_course, sample_module):
        service.create_module(sample_course.id, "Genetics")
        with pytest.raises(ValidationBlockedError):
            service.reorder_modules(sample_course.id, [sample_module.id])

    def test_commit_failure_is_generic(self, db_session, service, sample_course):
        with patch.object(db_session, "commit", side_effect=SQLAlchemyError("disk I/O error")):
            with pytest.raises(OperationFailedError):
                service.create_module(sample_course.id, "Genetics")

    def test_integrity_failure_without_conflict_is_generic(self, db_session, service, sample_course):
        violation = IntegrityError("INSERT INTO course_modules", {}, Exception("constraint failed"))
        with patch.object(db_session, "commit", side_effect=violation):
            with pytest.raises(OperationFailedError):
                service.create_module(sample_course.id, "Genetics")


class TestLessons:
    """Test cases for lesson management."""

    def test_create_lesson_is_appended(self, service, sample_module):
        lesson = service.create_lesson(
            sample_module.id,
            LessonCreate(title="Mitochondria", lesson_type=LessonType.video, duration_minutes=8),
        )
        assert lesson.order_index == 1
        assert lesson.lesson_type == LessonType.video

    def test_partial_update(self, service, sample_module):
        lesson = sample_module.lessons[0]
        updated = service.update_lesson(lesson.id, LessonUpdate(duration_minutes=45))

        assert updated.duration_minutes == 45
        assert updated.title == "Cell Structure"

    def test_update_rejects_blank_title(self, service, sample_module):
        with pytest.raises(ValidationBlockedError):
            service.update_lesson(sample_module.lessons[0].id, LessonUpdate(title=" "))

    def test_delete_lesson_renumbers(self, db_session, service, sample_module):
        first_id = sample_module.lessons[0].id
        second = service.create_lesson(sample_module.id, LessonCreate(title="Mitochondria"))

        service.delete_lesson(first_id)

        db_session.refresh(second)
        assert second.order_index == 0
