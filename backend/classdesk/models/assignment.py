"""Assignment and Submission models."""

from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Integer, JSON, Float, Boolean, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from ..database import Base


class Assignment(Base):
    """Assignment model."""
    __tablename__ = "assignments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    course_id = Column(String(36), ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    instructions = Column(Text, default="")
    due_date = Column(DateTime(timezone=True), nullable=False)
    points = Column(Integer, nullable=False, default=100)
    xp_reward = Column(Integer, default=0)
    standard_ids = Column(JSON, default=list)
    created_by = Column(String(36))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    course = relationship("Course", back_populates="assignments")
    submissions = relationship("Submission", back_populates="assignment", cascade="all, delete-orphan")
    peer_reviews = relationship("PeerReview", back_populates="assignment", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Assignment(id={self.id}, title='{self.title}')>"

    @property
    def submission_count(self):
        """Get count of submitted work for this assignment."""
        return sum(1 for s in self.submissions if s.submitted)


class Submission(Base):
    """A student's work on an assignment, with the teacher's grade."""
    __tablename__ = "submissions"
    __table_args__ = (
        UniqueConstraint("assignment_id", "student_id", name="uq_submission_assignment_student"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    assignment_id = Column(String(36), ForeignKey("assignments.id", ondelete="CASCADE"), nullable=False, index=True)
    student_id = Column(String(36), nullable=False, index=True)
    student_name = Column(String(255))
    submitted = Column(Boolean, default=True)
    submitted_at = Column(DateTime(timezone=True), server_default=func.now())
    grade = Column(Float)
    feedback = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    assignment = relationship("Assignment", back_populates="submissions")

    def __repr__(self):
        return f"<Submission(id={self.id}, student_name='{self.student_name}')>"

    @property
    def is_graded(self):
        return self.grade is not None

    def to_graded_item(self):
        """Project this submission and its assignment onto a GradedItem."""
        from ..toolkit.items import GradedItem

        return GradedItem(
            id=self.id,
            course_id=self.assignment.course_id,
            assignment_id=self.assignment_id,
            title=self.assignment.title,
            due_date=self.assignment.due_date,
            grade=self.grade,
            student_id=self.student_id,
            student_name=self.student_name,
            submitted=bool(self.submitted),
            feedback=self.feedback,
            standard_ids=list(self.assignment.standard_ids or []),
        )
