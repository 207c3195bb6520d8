"""Request and response schemas for peer review."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.enums import PeerReviewStatus
from ..toolkit.reviewer_assignment import MAX_REVIEWS_PER_SUBMISSION
from ..toolkit.review_stats import ReviewTally


class AssignReviewersRequest(BaseModel):
    reviews_per_submission: int = Field(2, ge=1, le=MAX_REVIEWS_PER_SUBMISSION)
    # Fixes the shuffle so a pairing can be reproduced
    seed: Optional[int] = None


class SubmitReviewRequest(BaseModel):
    score: float = Field(..., ge=0, le=100)
    feedback: str


class PeerReviewResponse(BaseModel):
    id: str
    assignment_id: str
    reviewer_id: str
    submission_owner_id: str
    status: PeerReviewStatus
    score: Optional[float] = None
    feedback: Optional[str] = ""
    created_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PeerReviewOverview(BaseModel):
    assignment_id: str
    tally: ReviewTally
    reviews: list[PeerReviewResponse]
