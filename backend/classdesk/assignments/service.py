"""Assignment editing, submissions and grading."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy import select

from ..errors import ValidationBlockedError
from ..models import Assignment, Course, Submission
from ..services import BaseService, require_text
from ..toolkit.standards_catalog import get_standard
from ..toolkit.items import GradedItem
from ..toolkit.records import build_assignment_record
from .schemas import AssignmentCreate, AssignmentUpdate

logger = logging.getLogger(__name__)

DUPLICATE_DUE_IN = timedelta(days=7)


def _parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class AssignmentService(BaseService):

    def create_assignment(self, data: AssignmentCreate, created_by: Optional[str] = None) -> Assignment:
        self.get_or_raise(Course, data.course_id)
        draft = build_assignment_record(
            course_id=data.course_id,
            title=data.title,
            instructions=data.instructions,
            due_date=data.due_date,
            points=data.points,
        )
        assignment = Assignment(
            id=draft.id,
            course_id=draft.course_id,
            title=draft.title,
            instructions=draft.instructions,
            due_date=_parse_timestamp(draft.due_date),
            points=draft.points,
            xp_reward=draft.xp_reward,
            standard_ids=self._checked_standard_ids(data.standard_ids),
            created_by=created_by,
        )
        self.db.add(assignment)
        self.commit(f"create assignment '{assignment.title}'")
        self.db.refresh(assignment)
        return assignment

    def get_assignment(self, assignment_id: str) -> Assignment:
        return self.get_or_raise(Assignment, assignment_id)

    def list_assignments(self, course_id: str) -> list[Assignment]:
        self.get_or_raise(Course, course_id)
        query = select(Assignment).where(Assignment.course_id == course_id).order_by(Assignment.due_date)
        return list(self.db.execute(query).scalars())

    def update_assignment(self, assignment_id: str, data: AssignmentUpdate) -> Assignment:
        assignment = self.get_assignment(assignment_id)
        if data.title is not None:
            assignment.title = require_text(data.title, "title")
        if data.instructions is not None:
            assignment.instructions = data.instructions.strip()
        if data.due_date is not None:
            assignment.due_date = data.due_date
        if data.points is not None:
            assignment.points = data.points
        self.commit(f"update assignment {assignment_id}")
        self.db.refresh(assignment)
        return assignment

    def delete_assignment(self, assignment_id: str) -> None:
        assignment = self.get_assignment(assignment_id)
        self.db.delete(assignment)
        self.commit(f"delete assignment {assignment_id}")

    def duplicate_assignment(self, assignment_id: str, course_id: Optional[str] = None) -> Assignment:
        """Copy an assignment, optionally into another course, due a week from now."""
        source = self.get_assignment(assignment_id)
        target_course = self.get_or_raise(Course, course_id or source.course_id)
        copy = Assignment(
            course_id=target_course.id,
            title=f"{source.title} (Copy)",
            instructions=source.instructions,
            due_date=datetime.now(timezone.utc) + DUPLICATE_DUE_IN,
            points=source.points,
            xp_reward=source.xp_reward,
            standard_ids=list(source.standard_ids or []),
            created_by=source.created_by,
        )
        self.db.add(copy)
        self.commit(f"duplicate assignment {assignment_id}")
        self.db.refresh(copy)
        return copy

    def tag_standards(self, assignment_id: str, standard_ids: list[str]) -> Assignment:
        assignment = self.get_assignment(assignment_id)
        assignment.standard_ids = self._checked_standard_ids(standard_ids)
        self.commit(f"tag standards on assignment {assignment_id}")
        self.db.refresh(assignment)
        return assignment

    # Submissions

    def record_submission(
        self,
        assignment_id: str,
        student_id: str,
        student_name: Optional[str] = None,
        submitted: bool = True,
    ) -> Submission:
        """Record whether a student has turned in their work, creating the submission if needed."""
        assignment = self.get_assignment(assignment_id)
        student_id = require_text(student_id, "student_id")
        submission = self.db.execute(
            select(Submission).where(
                Submission.assignment_id == assignment.id,
                Submission.student_id == student_id,
            )
        ).scalar_one_or_none()
        if submission is None:
            submission = Submission(assignment_id=assignment.id, student_id=student_id)
            self.db.add(submission)
        submission.submitted = submitted
        submission.submitted_at = datetime.now(timezone.utc) if submitted else None
        if student_name:
            submission.student_name = student_name.strip()
        self.commit(f"record submission of {student_id} for assignment {assignment_id}")
        self.db.refresh(submission)
        return submission

    def grade_submission(self, submission_id: str, grade: float, feedback: Optional[str] = None) -> Submission:
        submission = self.get_or_raise(Submission, submission_id)
        if grade is None or not 0 <= grade <= 100:
            raise ValidationBlockedError("grade", "Grade must be between 0 and 100")
        submission.grade = grade
        if feedback is not None:
            submission.feedback = feedback.strip()
        self.commit(f"grade submission {submission_id}")
        self.db.refresh(submission)
        return submission

    def list_submissions(self, assignment_id: str) -> list[Submission]:
        return list(self.get_assignment(assignment_id).submissions)

    def graded_items(self, course_id: str) -> list[GradedItem]:
        """Every submission in the course as a GradedItem, ordered by due date then student."""
        self.get_or_raise(Course, course_id)
        query = (
            select(Submission)
            .join(Assignment)
            .where(Assignment.course_id == course_id)
            .order_by(Assignment.due_date, Submission.student_name)
        )
        return [submission.to_graded_item() for submission in self.db.execute(query).scalars()]

    @staticmethod
    def _checked_standard_ids(standard_ids: list[str]) -> list[str]:
        unique_ids = list(dict.fromkeys(standard_ids or []))
        unknown = [standard_id for standard_id in unique_ids if get_standard(standard_id) is None]
        if unknown:
            raise ValidationBlockedError("standard_ids", f"Unknown learning standards: {', '.join(unknown)}")
        return unique_ids
