"""Course, module and lesson management."""
import logging
from typing import Optional

from sqlalchemy import select

from ..errors import ValidationBlockedError
from ..models import Course, CourseModule, Lesson
from ..services import BaseService, require_text
from .schemas import CourseCreate, LessonCreate, LessonUpdate

logger = logging.getLogger(__name__)


class CourseService(BaseService):

    def create_course(self, data: CourseCreate, teacher_id: Optional[str] = None) -> Course:
        course = Course(
            title=require_text(data.title, "title"),
            subject=data.subject,
            grade_level=data.grade_level,
            teacher_id=teacher_id,
        )
        self.db.add(course)
        self.commit(f"create course '{course.title}'")
        self.db.refresh(course)
        return course

    def get_course(self, course_id: str) -> Course:
        return self.get_or_raise(Course, course_id)

    def list_courses(self, teacher_id: Optional[str] = None) -> list[Course]:
        query = select(Course).order_by(Course.title)
        if teacher_id is not None:
            query = query.where(Course.teacher_id == teacher_id)
        return list(self.db.execute(query).scalars())

    # Modules

    def create_module(self, course_id: str, title: str) -> CourseModule:
        """Append a module to the end of the course."""
        course = self.get_course(course_id)
        module = CourseModule(
            course_id=course.id,
            title=require_text(title, "title"),
            order_index=len(course.modules),
        )
        course.modules.append(module)
        self.commit(f"create module '{module.title}' in course {course.id}")
        self.db.refresh(module)
        return module

    def rename_module(self, module_id: str, title: str) -> CourseModule:
        module = self.get_or_raise(CourseModule, module_id)
        module.title = require_text(title, "title")
        self.commit(f"rename module {module_id}")
        self.db.refresh(module)
        return module

    def delete_module(self, module_id: str) -> None:
        """Delete a module and its lessons, closing the gap in the ordering."""
        module = self.get_or_raise(CourseModule, module_id)
        course = module.course
        course.modules.remove(module)
        self._renumber(course.modules)
        self.commit(f"delete module {module_id}")

    def reorder_modules(self, course_id: str, module_ids: list[str]) -> Course:
        course = self.get_course(course_id)
        by_id = {module.id: module for module in course.modules}
        if len(module_ids) != len(by_id) or set(module_ids) != set(by_id):
            raise ValidationBlockedError(
                "module_ids",
                "Module order must list every module of the course exactly once",
            )
        for index, module_id in enumerate(module_ids):
            by_id[module_id].order_index = index
        self.commit(f"reorder modules of course {course_id}")
        self.db.refresh(course)
        return course

    # Lessons

    def create_lesson(self, module_id: str, data: LessonCreate) -> Lesson:
        """Append a lesson to the end of the module."""
        module = self.get_or_raise(CourseModule, module_id)
        lesson = Lesson(
            module_id=module.id,
            title=require_text(data.title, "title"),
            content=data.content,
            duration_minutes=data.duration_minutes,
            lesson_type=data.lesson_type,
            xp_reward=data.xp_reward,
            order_index=len(module.lessons),
        )
        module.lessons.append(lesson)
        self.commit(f"create lesson '{lesson.title}' in module {module.id}")
        self.db.refresh(lesson)
        return lesson

    def update_lesson(self, lesson_id: str, data: LessonUpdate) -> Lesson:
        lesson = self.get_or_raise(Lesson, lesson_id)
        changes = data.model_dump(exclude_unset=True)
        if "title" in changes:
            changes["title"] = require_text(changes["title"], "title")
        for field, value in changes.items():
            if value is not None:
                setattr(lesson, field, value)
        self.commit(f"update lesson {lesson_id}")
        self.db.refresh(lesson)
        return lesson

    def delete_lesson(self, lesson_id: str) -> None:
        lesson = self.get_or_raise(Lesson, lesson_id)
        module = lesson.module
        module.lessons.remove(lesson)
        self._renumber(module.lessons)
        self.commit(f"delete lesson {lesson_id}")

    @staticmethod
    def _renumber(rows) -> None:
        for index, row in enumerate(sorted(rows, key=lambda r: r.order_index)):
            row.order_index = index
