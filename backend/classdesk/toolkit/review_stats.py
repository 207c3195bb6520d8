"""Peer review status tallies."""
from typing import Iterable

from pydantic import BaseModel, ConfigDict, computed_field

from ..models.enums import PeerReviewStatus


class ReviewTally(BaseModel):
    total: int = 0
    completed: int = 0
    in_progress: int = 0
    assigned: int = 0

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def completion_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return self.completed / self.total


def tally_reviews(reviews: Iterable) -> ReviewTally:
    """Count reviews by status.

    Accepts anything carrying a ``status`` attribute, either a
    ``PeerReviewStatus`` or its string value.
    """
    counts = {status: 0 for status in PeerReviewStatus}
    for review in reviews:
        counts[PeerReviewStatus(review.status)] += 1
    return ReviewTally(
        total=sum(counts.values()),
        completed=counts[PeerReviewStatus.completed],
        in_progress=counts[PeerReviewStatus.in_progress],
        assigned=counts[PeerReviewStatus.assigned],
    )
