"""Routes for the peer review setup screen."""
import random

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..auth import get_current_teacher
from ..database import get_db
from ..errors import to_http_exception
from .schemas import AssignReviewersRequest, SubmitReviewRequest, PeerReviewResponse, PeerReviewOverview
from .service import PeerReviewService

router = APIRouter(prefix="/api", tags=["Peer Review"], dependencies=[Depends(get_current_teacher)])


def get_peer_review_service(db: Session = Depends(get_db)) -> PeerReviewService:
    """Dependency to get an instance of PeerReviewService."""
    return PeerReviewService(db)


@router.post("/assignments/{assignment_id}/peer-reviews", response_model=PeerReviewOverview,
             status_code=status.HTTP_201_CREATED)
async def assign_peer_reviewers(
    assignment_id: str,
    data: AssignReviewersRequest,
    service: PeerReviewService = Depends(get_peer_review_service),
):
    """Randomly assign reviewers, replacing any existing peer reviews for the assignment."""
    rng = random.Random(data.seed) if data.seed is not None else None
    try:
        service.assign_reviewers(assignment_id, data.reviews_per_submission, rng=rng)
        reviews = service.list_reviews(assignment_id)
        return PeerReviewOverview(
            assignment_id=assignment_id,
            tally=service.tally(assignment_id),
            reviews=[PeerReviewResponse.model_validate(r) for r in reviews],
        )
    except Exception as e:
        raise to_http_exception(e)


@router.get("/assignments/{assignment_id}/peer-reviews", response_model=PeerReviewOverview)
async def list_peer_reviews(assignment_id: str, service: PeerReviewService = Depends(get_peer_review_service)):
    try:
        reviews = service.list_reviews(assignment_id)
        return PeerReviewOverview(
            assignment_id=assignment_id,
            tally=service.tally(assignment_id),
            reviews=[PeerReviewResponse.model_validate(r) for r in reviews],
        )
    except Exception as e:
        raise to_http_exception(e)


@router.get("/students/{student_id}/peer-reviews", response_model=list[PeerReviewResponse])
async def list_reviews_for_reviewer(student_id: str, service: PeerReviewService = Depends(get_peer_review_service)):
    """Reviews a student has been asked to write."""
    return service.reviews_by_reviewer(student_id)


@router.post("/peer-reviews/{review_id}/start", response_model=PeerReviewResponse)
async def start_peer_review(review_id: str, service: PeerReviewService = Depends(get_peer_review_service)):
    try:
        return service.mark_in_progress(review_id)
    except Exception as e:
        raise to_http_exception(e)


@router.post("/peer-reviews/{review_id}/submit", response_model=PeerReviewResponse)
async def submit_peer_review(
    review_id: str,
    data: SubmitReviewRequest,
    service: PeerReviewService = Depends(get_peer_review_service),
):
    try:
        return service.submit_review(review_id, data.score, data.feedback)
    except Exception as e:
        raise to_http_exception(e)
