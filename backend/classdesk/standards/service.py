"""Standards mastery over a course's graded work."""
import logging
from typing import Optional

from ..assignments.service import AssignmentService
from ..errors import NotFoundError
from ..services import BaseService
from ..toolkit.grade_filter import average_grade, filter_graded_items
from ..toolkit.items import DateRange, GradedItem
from ..toolkit.standards_catalog import get_standard
from .schemas import StandardMastery, StudentMastery

logger = logging.getLogger(__name__)


class StandardsService(BaseService):

    def mastery(self, course_id: str, standard_id: str, date_range: Optional[DateRange] = None) -> StandardMastery:
        """Average grade on graded work tagged with a standard, overall and per student.

        Students are listed by name, falling back to id when no name was recorded.
        """
        standard = get_standard(standard_id)
        if standard is None:
            raise NotFoundError("LearningStandard", standard_id)

        items = filter_graded_items(
            AssignmentService(self.db).graded_items(course_id), course_id, date_range
        )
        tagged = [item for item in items if standard_id in item.standard_ids and item.grade is not None]

        by_student: dict[str, list[GradedItem]] = {}
        for item in tagged:
            by_student.setdefault(item.student_id, []).append(item)

        students = [
            StudentMastery(
                student_id=student_id,
                student_name=student_items[0].student_name,
                average_grade=average_grade(student_items),
                graded_count=len(student_items),
            )
            for student_id, student_items in by_student.items()
        ]
        students.sort(key=lambda s: ((s.student_name or s.student_id).lower(), s.student_id))

        return StandardMastery(
            course_id=course_id,
            standard=standard,
            graded_count=len(tagged),
            average_grade=average_grade(tagged),
            students=students,
        )
