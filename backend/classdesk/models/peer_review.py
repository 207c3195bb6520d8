"""Peer review model."""

from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Float, Enum as SQLEnum, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from ..database import Base
from .enums import PeerReviewStatus


class PeerReview(Base):
    """A reviewer-to-submission assignment between two students."""
    __tablename__ = "peer_reviews"
    __table_args__ = (
        CheckConstraint("reviewer_id <> submission_owner_id", name="ck_peer_review_not_self"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    assignment_id = Column(String(36), ForeignKey("assignments.id", ondelete="CASCADE"), nullable=False, index=True)
    reviewer_id = Column(String(36), nullable=False, index=True)
    submission_owner_id = Column(String(36), nullable=False)
    status = Column(SQLEnum(PeerReviewStatus), nullable=False, default=PeerReviewStatus.assigned)
    score = Column(Float)
    feedback = Column(Text, default="")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    completed_at = Column(DateTime(timezone=True))

    # Relationships
    assignment = relationship("Assignment", back_populates="peer_reviews")

    def __repr__(self):
        return f"<PeerReview(id={self.id}, reviewer_id={self.reviewer_id}, status={self.status.value})>"

    @property
    def is_completed(self):
        return self.status == PeerReviewStatus.completed
