"""Test cases for peer review setup and lifecycle."""

import random
import pytest
from collections import Counter

from classdesk.errors import InvalidStatusTransitionError, NotFoundError, ValidationBlockedError
from classdesk.models import PeerReview, PeerReviewStatus, Submission
from classdesk.peer_reviews import PeerReviewService


@pytest.fixture
def service(db_session):
    return PeerReviewService(db_session)


@pytest.fixture
def reviews(service, sample_assignment, sample_submissions):
    return service.assign_reviewers(sample_assignment.id, 2, rng=random.Random(3))


class TestAssignReviewers:
    """Test cases for assigning reviewers."""

    def test_every_submission_gets_two_reviewers(self, reviews):
        assert len(reviews) == 6
        assert all(r.reviewer_id != r.submission_owner_id for r in reviews)
        assert set(Counter(r.submission_owner_id for r in reviews).values()) == {2}
        assert all(r.status == PeerReviewStatus.assigned for r in reviews)

    def test_reassigning_replaces_previous_set(self, db_session, service, sample_assignment, reviews):
        service.assign_reviewers(sample_assignment.id, 1)

        assert db_session.query(PeerReview).count() == 3

    def test_needs_two_submissions(self, db_session, service, sample_assignment):
        db_session.add(Submission(assignment_id=sample_assignment.id, student_id="solo", submitted=True))
        db_session.commit()

        with pytest.raises(ValidationBlockedError) as exc_info:
            service.assign_reviewers(sample_assignment.id, 2)
        assert "at least 2" in exc_info.value.message

    def test_unsubmitted_work_is_not_reviewed(self, db_session, service, sample_assignment, sample_submissions):
        db_session.add(Submission(assignment_id=sample_assignment.id, student_id="late", submitted=False))
        db_session.commit()

        pairs = service.assign_reviewers(sample_assignment.id, 2)

        assert all("late" not in (r.reviewer_id, r.submission_owner_id) for r in pairs)

    def test_missing_assignment(self, service):
        with pytest.raises(NotFoundError):
            service.assign_reviewers("missing", 2)


class TestReviewLifecycle:
    """Test cases for starting and submitting reviews."""

    def test_tally_after_progress(self, service, sample_assignment, reviews):
        service.mark_in_progress(reviews[0].id)
        service.submit_review(reviews[1].id, 85, "Clear labels")
        service.submit_review(reviews[2].id, 70, "Check the membrane")

        tally = service.tally(sample_assignment.id)

        assert (tally.total, tally.completed, tally.in_progress, tally.assigned) == (6, 2, 1, 3)
        assert tally.completion_rate == pytest.approx(1 / 3)

    def test_start_is_idempotent(self, service, reviews):
        service.mark_in_progress(reviews[0].id)
        review = service.mark_in_progress(reviews[0].id)
        assert review.status == PeerReviewStatus.in_progress

    def test_submit_sets_completion(self, service, reviews):
        review = service.submit_review(reviews[0].id, 92, "  Great detail  ")

        assert review.status == PeerReviewStatus.completed
        assert review.feedback == "Great detail"
        assert review.score == 92
        assert review.completed_at is not None

    def test_completed_review_cannot_restart(self, service, reviews):
        service.submit_review(reviews[0].id, 92, "Great detail")

        with pytest.raises(InvalidStatusTransitionError):
            service.mark_in_progress(reviews[0].id)
        with pytest.raises(InvalidStatusTransitionError):
            service.submit_review(reviews[0].id, 50, "Changed my mind")

    def test_feedback_is_required(self, service, reviews):
        with pytest.raises(ValidationBlockedError):
            service.submit_review(reviews[0].id, 80, "   ")

    def test_reviews_by_reviewer(self, service, reviews):
        reviewer = reviews[0].reviewer_id
        assert len(service.reviews_by_reviewer(reviewer)) == 2
