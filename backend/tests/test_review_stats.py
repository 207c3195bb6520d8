"""Test cases for peer review tallies."""

from types import SimpleNamespace

from classdesk.models import PeerReviewStatus
from classdesk.toolkit import ReviewTally, tally_reviews


def reviews_with(*statuses):
    return [SimpleNamespace(status=status) for status in statuses]


class TestTallyReviews:
    """Test cases for tally_reviews."""

    def test_mixed_statuses(self):
        tally = tally_reviews(reviews_with(
            PeerReviewStatus.completed,
            PeerReviewStatus.completed,
            PeerReviewStatus.in_progress,
            PeerReviewStatus.assigned,
        ))
        assert tally.total == 4
        assert tally.completed == 2
        assert tally.in_progress == 1
        assert tally.assigned == 1
        assert tally.completion_rate == 0.5

    def test_no_reviews(self):
        tally = tally_reviews([])
        assert tally == ReviewTally()
        assert tally.completion_rate == 0.0

    def test_string_statuses_are_accepted(self):
        tally = tally_reviews(reviews_with("completed", "assigned"))
        assert tally.completed == 1
        assert tally.assigned == 1

    def test_rate_is_serialized(self):
        dumped = tally_reviews(reviews_with("completed")).model_dump()
        assert dumped["completion_rate"] == 1.0
