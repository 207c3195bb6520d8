"""Peer review setup and lifecycle."""
import logging
import random
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, select

from ..errors import InvalidStatusTransitionError, ValidationBlockedError
from ..models import Assignment, PeerReview, PeerReviewStatus, Submission
from ..services import BaseService, require_text
from ..toolkit.review_stats import ReviewTally, tally_reviews
from ..toolkit.reviewer_assignment import assign_reviewers

logger = logging.getLogger(__name__)


class PeerReviewService(BaseService):

    def assign_reviewers(
        self,
        assignment_id: str,
        reviews_per_submission: int = 2,
        rng: Optional[random.Random] = None,
    ) -> list[PeerReview]:
        """Replace the assignment's peer reviews with a fresh random pairing.

        The old set is deleted and the new one inserted in one transaction.
        """
        assignment = self.get_or_raise(Assignment, assignment_id)
        submitters = self.db.execute(
            select(Submission.student_id)
            .where(Submission.assignment_id == assignment.id, Submission.submitted.is_(True))
            .order_by(Submission.submitted_at, Submission.student_id)
        ).scalars().all()

        pairs = assign_reviewers(submitters, reviews_per_submission, rng=rng)
        if not pairs:
            raise ValidationBlockedError(
                "submissions",
                "Need at least 2 student submissions to assign peer reviews.",
            )

        self.db.execute(delete(PeerReview).where(PeerReview.assignment_id == assignment.id))
        reviews = [
            PeerReview(
                assignment_id=assignment.id,
                reviewer_id=reviewer_id,
                submission_owner_id=owner_id,
                status=PeerReviewStatus.assigned,
                feedback="",
            )
            for reviewer_id, owner_id in pairs
        ]
        self.db.add_all(reviews)
        self.commit(f"assign {len(reviews)} peer reviews for assignment {assignment_id}")
        return reviews

    def list_reviews(self, assignment_id: str) -> list[PeerReview]:
        self.get_or_raise(Assignment, assignment_id)
        return list(self.db.execute(
            select(PeerReview)
            .where(PeerReview.assignment_id == assignment_id)
            .order_by(PeerReview.submission_owner_id, PeerReview.reviewer_id)
        ).scalars())

    def reviews_by_reviewer(self, reviewer_id: str) -> list[PeerReview]:
        return list(self.db.execute(
            select(PeerReview)
            .where(PeerReview.reviewer_id == reviewer_id)
            .order_by(PeerReview.created_at.desc())
        ).scalars())

    def tally(self, assignment_id: str) -> ReviewTally:
        return tally_reviews(self.list_reviews(assignment_id))

    def mark_in_progress(self, review_id: str) -> PeerReview:
        review = self.get_or_raise(PeerReview, review_id)
        self._advance(review, PeerReviewStatus.in_progress)
        self.commit(f"start peer review {review_id}")
        self.db.refresh(review)
        return review

    def submit_review(self, review_id: str, score: float, feedback: str) -> PeerReview:
        review = self.get_or_raise(PeerReview, review_id)
        feedback = require_text(feedback, "feedback")
        if score is None or not 0 <= score <= 100:
            raise ValidationBlockedError("score", "Score must be between 0 and 100")
        self._advance(review, PeerReviewStatus.completed)
        review.score = score
        review.feedback = feedback
        review.completed_at = datetime.now(timezone.utc)
        self.commit(f"complete peer review {review_id}")
        self.db.refresh(review)
        return review

    @staticmethod
    def _advance(review: PeerReview, target: PeerReviewStatus) -> None:
        """Move forward along assigned -> in_progress -> completed; repeating a status is a no-op."""
        current = review.status
        if current == PeerReviewStatus.completed or target.rank < current.rank:
            raise InvalidStatusTransitionError(current.value, target.value)
        review.status = target
